from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'photos'

router = DefaultRouter()
router.register(r'', views.PhotoViewSet, basename='photo')

urlpatterns = [
    # Photo ViewSet routes
    # POST   /api/photos/                 - Upload image (multipart)
    # GET    /api/photos/{id}/            - Get photo
    # DELETE /api/photos/{id}/            - Delete photo (uploader)

    # Custom actions
    # POST   /api/photos/base64/          - Upload image as data URI
    # GET    /api/photos/pub/{pub_id}/    - Photos of a pub

    path('', include(router.urls)),
]
