from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'ratings'

router = DefaultRouter()
router.register(r'', views.RatingViewSet, basename='rating')

urlpatterns = [
    # Rating ViewSet routes
    # GET    /api/ratings/                 - List all ratings
    # POST   /api/ratings/                 - Rate a pub
    # GET    /api/ratings/{id}/            - Get rating
    # PUT    /api/ratings/{id}/            - Update rating (owner)
    # PATCH  /api/ratings/{id}/            - Partial update (owner)
    # DELETE /api/ratings/{id}/            - Delete rating (owner)

    # Custom actions
    # GET    /api/ratings/pub/{pub_id}/    - Ratings of a pub
    # GET    /api/ratings/user/{user_id}/  - Ratings by a user

    path('', include(router.urls)),
]
