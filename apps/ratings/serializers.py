from rest_framework import serializers
from apps.accounts.serializers import UserPublicSerializer
from apps.photos.serializers import PhotoSerializer
from apps.pubs.models import Pub
from .models import Rating


class PubMinimalSerializer(serializers.ModelSerializer):
    """Minimal pub info for nested serialization."""

    class Meta:
        model = Pub
        fields = ['id', 'name', 'address']
        read_only_fields = fields


class RatingSerializer(serializers.ModelSerializer):
    """Main rating serializer, with author and photos."""

    userId = serializers.UUIDField(source='user_id', read_only=True)
    pubId = serializers.UUIDField(source='pub_id', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)
    user = UserPublicSerializer(read_only=True)
    photos = PhotoSerializer(many=True, read_only=True)

    class Meta:
        model = Rating
        fields = [
            'id',
            'userId',
            'pubId',
            'score',
            'comment',
            'date',
            'updatedAt',
            'user',
            'photos',
        ]
        read_only_fields = fields


class UserRatingSerializer(RatingSerializer):
    """Rating as listed on a user's profile, with the rated pub."""

    pub = PubMinimalSerializer(read_only=True)

    class Meta(RatingSerializer.Meta):
        fields = [
            'id',
            'userId',
            'pubId',
            'score',
            'comment',
            'date',
            'updatedAt',
            'pub',
            'photos',
        ]
        read_only_fields = fields


class RatingCreateSerializer(serializers.Serializer):
    """Input for rating creation. Score range is checked by the service."""

    pubId = serializers.UUIDField()
    score = serializers.FloatField()
    comment = serializers.CharField(required=False, allow_blank=True, default='')


class RatingUpdateSerializer(serializers.Serializer):
    """Input for rating updates. PUT must carry a score, PATCH may send either field."""

    score = serializers.FloatField()
    comment = serializers.CharField(required=False, allow_blank=True)
