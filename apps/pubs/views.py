from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAdminUser, IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .models import Pub
from .serializers import (
    PubSerializer,
    PubDetailSerializer,
    PubWriteSerializer,
    NearbyPubSerializer,
    NearbyQuerySerializer,
    RatingSummarySerializer,
)
from .permissions import IsPubCreatorOrStaff
from .services import (
    list_pubs,
    find_nearby_pubs,
    get_pub_by_id,
    create_pub,
    update_pub,
    delete_pub,
    get_pub_rating_summary,
)


NEARBY_PARAMETERS = [
    OpenApiParameter('lat', OpenApiTypes.FLOAT, description='Center latitude (-85..85)'),
    OpenApiParameter('lng', OpenApiTypes.FLOAT, description='Center longitude (-180..180)'),
    OpenApiParameter('radius', OpenApiTypes.FLOAT, description='Radius in km, > 0 (default 5)'),
    OpenApiParameter('strict', OpenApiTypes.BOOL, description='Only pubs within the exact circle'),
    OpenApiParameter('sort', OpenApiTypes.STR, enum=NearbyQuerySerializer.SORT_CHOICES, description='Optional ordering'),
]


def _sort_pubs(pubs, sort):
    if sort == 'rating':
        # Highest first, unrated pubs last
        pubs.sort(key=lambda pub: (pub.average_rating is None, -(pub.average_rating or 0)))
    elif sort == 'distance':
        pubs.sort(key=lambda pub: pub.distance_km)
    return pubs


class PubViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Pub operations.

    list: Get all pubs with average rating
    create: Add a new pub
    retrieve: Get a pub with average rating and photos
    partial_update: Update a pub (creator or staff)
    destroy: Delete a pub (staff)
    """

    serializer_class = PubSerializer
    permission_classes = [IsAuthenticatedOrReadOnly]
    http_method_names = ['get', 'post', 'patch', 'delete', 'head', 'options']

    def get_queryset(self):
        return Pub.objects.all()

    @extend_schema(
        parameters=[OpenApiParameter('search', OpenApiTypes.STR, description='Search in name and address')],
        responses={200: PubSerializer(many=True)},
    )
    def list(self, request, *args, **kwargs):
        """List pubs by name, optionally filtered by a search term."""
        pubs = list_pubs(search=request.query_params.get('search'))
        return Response(self.get_serializer(pubs, many=True).data)

    def get_permissions(self):
        """Use different permissions for different actions."""
        if self.action == 'destroy':
            return [IsAdminUser()]
        if self.action == 'partial_update':
            return [IsAuthenticated(), IsPubCreatorOrStaff()]
        return super().get_permissions()

    def get_serializer_class(self):
        """Use different serializers for different actions."""
        if self.action in ('create', 'partial_update'):
            return PubWriteSerializer
        if self.action == 'retrieve':
            return PubDetailSerializer
        if self.action in ('nearby', 'near'):
            return NearbyPubSerializer
        return PubSerializer

    def retrieve(self, request, *args, **kwargs):
        """Get a single pub."""
        pub = get_pub_by_id(pub_id=kwargs['pk'])
        return Response(PubDetailSerializer(pub, context=self.get_serializer_context()).data)

    @extend_schema(request=PubWriteSerializer, responses={201: PubDetailSerializer})
    def create(self, request, *args, **kwargs):
        """Create a new pub."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        pub = create_pub(created_by=request.user, **serializer.validated_data)

        return Response(
            PubDetailSerializer(pub, context=self.get_serializer_context()).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(request=PubWriteSerializer, responses={200: PubDetailSerializer})
    def partial_update(self, request, *args, **kwargs):
        """Update some fields of a pub."""
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        pub = update_pub(pub_id=instance.id, **serializer.validated_data)

        return Response(PubDetailSerializer(pub, context=self.get_serializer_context()).data)

    def destroy(self, request, *args, **kwargs):
        """Delete a pub and everything attached to it."""
        delete_pub(pub_id=kwargs['pk'])
        return Response(status=status.HTTP_204_NO_CONTENT)

    def _nearby_response(self, request):
        query = NearbyQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        params = query.validated_data

        pubs = find_nearby_pubs(
            latitude=params['latitude'],
            longitude=params['longitude'],
            radius_km=params.get('radius'),
            strict=params.get('strict', False),
        )
        _sort_pubs(pubs, params.get('sort'))

        serializer = self.get_serializer(pubs, many=True)
        return Response(serializer.data)

    @extend_schema(
        parameters=NEARBY_PARAMETERS,
        responses={200: NearbyPubSerializer(many=True)},
        description="Pubs inside the bounding box of a circle around a point, with average rating.",
    )
    @action(detail=False, methods=['get'])
    def nearby(self, request):
        """Find pubs near a coordinate."""
        return self._nearby_response(request)

    @extend_schema(
        parameters=[
            OpenApiParameter('latitude', OpenApiTypes.FLOAT),
            OpenApiParameter('longitude', OpenApiTypes.FLOAT),
            OpenApiParameter('radius', OpenApiTypes.FLOAT),
        ],
        responses={200: NearbyPubSerializer(many=True)},
        description="Older alias of /nearby/ taking latitude/longitude.",
    )
    @action(detail=False, methods=['get'])
    def near(self, request):
        """Find pubs near a coordinate (latitude/longitude parameter names)."""
        return self._nearby_response(request)

    @extend_schema(responses={200: RatingSummarySerializer})
    @action(detail=True, methods=['get'])
    def rating(self, request, pk=None):
        """Get the average rating of a pub."""
        summary = get_pub_rating_summary(pub_id=pk)
        return Response(RatingSummarySerializer(summary).data)
