from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'pubs'

router = DefaultRouter()
router.register(r'', views.PubViewSet, basename='pub')

urlpatterns = [
    # Pub ViewSet routes
    # GET    /api/pubs/               - List all pubs with average rating
    # POST   /api/pubs/               - Add pub
    # GET    /api/pubs/{id}/          - Get pub with photos
    # PATCH  /api/pubs/{id}/          - Update pub (creator or staff)
    # DELETE /api/pubs/{id}/          - Delete pub (staff)

    # Custom actions
    # GET    /api/pubs/nearby/        - Pubs near lat/lng within radius
    # GET    /api/pubs/near/          - Same, latitude/longitude parameter names
    # GET    /api/pubs/{id}/rating/   - Average rating of a pub

    path('', include(router.urls)),
]
