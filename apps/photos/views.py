from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .models import Photo
from .serializers import (
    PhotoSerializer,
    PhotoUploadSerializer,
    Base64PhotoUploadSerializer,
)
from .services import (
    create_photo,
    create_photo_from_base64,
    get_photo_by_id,
    delete_photo,
    get_pub_photos,
)


class PhotoViewSet(
    mixins.CreateModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """
    ViewSet for Photo operations.

    create: Upload an image (multipart)
    retrieve: Get a photo
    destroy: Delete a photo (uploader only)
    """

    queryset = Photo.objects.select_related('user')
    serializer_class = PhotoSerializer
    permission_classes = [IsAuthenticatedOrReadOnly]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def get_serializer_class(self):
        if self.action == 'create':
            return PhotoUploadSerializer
        if self.action == 'upload_base64':
            return Base64PhotoUploadSerializer
        return PhotoSerializer

    def _created(self, photo):
        return Response(
            PhotoSerializer(photo, context=self.get_serializer_context()).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(request=PhotoUploadSerializer, responses={201: PhotoSerializer})
    def create(self, request, *args, **kwargs):
        """Upload an image file, optionally for a pub and/or one of your ratings."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        photo = create_photo(
            user=request.user,
            image=serializer.validated_data['image'],
            pub_id=serializer.validated_data.get('pubId'),
            rating_id=serializer.validated_data.get('ratingId'),
        )
        return self._created(photo)

    @extend_schema(request=Base64PhotoUploadSerializer, responses={201: PhotoSerializer})
    @action(detail=False, methods=['post'], url_path='base64', url_name='base64')
    def upload_base64(self, request):
        """Upload an image sent as a base64 data URI."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        photo = create_photo_from_base64(
            user=request.user,
            data_uri=serializer.validated_data['image'],
            pub_id=serializer.validated_data.get('pubId'),
            rating_id=serializer.validated_data.get('ratingId'),
        )
        return self._created(photo)

    def retrieve(self, request, *args, **kwargs):
        photo = get_photo_by_id(photo_id=kwargs['pk'])
        return Response(PhotoSerializer(photo, context=self.get_serializer_context()).data)

    def destroy(self, request, *args, **kwargs):
        """Delete a photo and its stored file."""
        delete_photo(photo_id=kwargs['pk'], user=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        parameters=[OpenApiParameter('pub_id', OpenApiTypes.UUID, OpenApiParameter.PATH)],
        responses={200: PhotoSerializer(many=True)},
    )
    @action(detail=False, methods=['get'], url_path=r'pub/(?P<pub_id>[^/.]+)', url_name='by-pub')
    def by_pub(self, request, pub_id=None):
        """Get all photos of a pub, newest first."""
        photos = get_pub_photos(pub_id=pub_id)
        serializer = self.get_serializer(photos, many=True)
        return Response(serializer.data)
