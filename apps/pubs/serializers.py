from rest_framework import serializers
from apps.photos.serializers import PhotoSerializer
from .models import Pub
from .services import format_average


class PubSerializer(serializers.ModelSerializer):
    """Pub with its derived rating aggregate (list views)."""

    phoneNumber = serializers.CharField(source='phone_number', read_only=True)
    openingHours = serializers.CharField(source='opening_hours', read_only=True)
    averageRating = serializers.FloatField(source='average_rating', read_only=True, allow_null=True)
    averageRatingDisplay = serializers.SerializerMethodField()
    ratingCount = serializers.IntegerField(source='rating_count', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Pub
        fields = [
            'id',
            'name',
            'address',
            'latitude',
            'longitude',
            'phoneNumber',
            'website',
            'openingHours',
            'averageRating',
            'averageRatingDisplay',
            'ratingCount',
            'createdAt',
        ]
        read_only_fields = fields

    def get_averageRatingDisplay(self, obj):
        return format_average(getattr(obj, 'average_rating', None))


class PubDetailSerializer(PubSerializer):
    """Single pub including its photos."""

    photos = PhotoSerializer(many=True, read_only=True)

    class Meta(PubSerializer.Meta):
        fields = PubSerializer.Meta.fields + ['photos']
        read_only_fields = fields


class NearbyPubSerializer(PubSerializer):
    """Nearby search result with distance from the search center."""

    distanceKm = serializers.FloatField(source='distance_km', read_only=True)

    class Meta(PubSerializer.Meta):
        fields = PubSerializer.Meta.fields + ['distanceKm']
        read_only_fields = fields


class PubWriteSerializer(serializers.ModelSerializer):
    """Input for creating and updating pubs."""

    phoneNumber = serializers.CharField(source='phone_number', required=False, allow_blank=True, max_length=50)
    openingHours = serializers.CharField(source='opening_hours', required=False, allow_blank=True, max_length=500)

    class Meta:
        model = Pub
        fields = [
            'name',
            'address',
            'latitude',
            'longitude',
            'phoneNumber',
            'website',
            'openingHours',
        ]


class NearbyQuerySerializer(serializers.Serializer):
    """
    Query parameters of the nearby search.

    Accepts ``lat``/``lng`` and the older ``latitude``/``longitude`` names.
    Range checks happen in the service.
    """

    SORT_CHOICES = ['rating', 'distance']

    lat = serializers.FloatField(required=False)
    lng = serializers.FloatField(required=False)
    latitude = serializers.FloatField(required=False)
    longitude = serializers.FloatField(required=False)
    radius = serializers.FloatField(required=False)
    strict = serializers.BooleanField(required=False, default=False)
    sort = serializers.ChoiceField(choices=SORT_CHOICES, required=False)

    def validate(self, attrs):
        latitude = attrs.pop('lat', attrs.get('latitude'))
        longitude = attrs.pop('lng', attrs.get('longitude'))

        if latitude is None or longitude is None:
            raise serializers.ValidationError('Latitude and longitude are required')

        attrs['latitude'] = latitude
        attrs['longitude'] = longitude
        return attrs


class RatingSummarySerializer(serializers.Serializer):
    """Aggregate rating of one pub."""

    pubId = serializers.UUIDField(source='pub_id')
    averageRating = serializers.FloatField(source='average_rating', allow_null=True)
    averageRatingDisplay = serializers.SerializerMethodField()
    ratingCount = serializers.IntegerField(source='rating_count')

    def get_averageRatingDisplay(self, obj):
        return format_average(obj['average_rating'])
