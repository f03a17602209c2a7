from rest_framework import serializers
from .models import Photo


class PhotoSerializer(serializers.ModelSerializer):
    """Photo with an absolute URL to the stored image."""

    url = serializers.SerializerMethodField()
    userId = serializers.UUIDField(source='user_id', read_only=True)
    pubId = serializers.UUIDField(source='pub_id', read_only=True, allow_null=True)
    ratingId = serializers.UUIDField(source='rating_id', read_only=True, allow_null=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Photo
        fields = ['id', 'url', 'userId', 'pubId', 'ratingId', 'createdAt']
        read_only_fields = fields

    def get_url(self, obj) -> str:
        if not obj.image:
            return ''
        url = obj.image.url
        request = self.context.get('request')
        if request is not None:
            return request.build_absolute_uri(url)
        return url


class PhotoUploadSerializer(serializers.Serializer):
    """Multipart upload input."""

    image = serializers.FileField()
    pubId = serializers.UUIDField(required=False, allow_null=True)
    ratingId = serializers.UUIDField(required=False, allow_null=True)


class Base64PhotoUploadSerializer(serializers.Serializer):
    """JSON upload input with the image as a data URI."""

    image = serializers.CharField(trim_whitespace=True)
    pubId = serializers.UUIDField(required=False, allow_null=True)
    ratingId = serializers.UUIDField(required=False, allow_null=True)
