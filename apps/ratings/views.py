from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .models import Rating
from .serializers import (
    RatingSerializer,
    UserRatingSerializer,
    RatingCreateSerializer,
    RatingUpdateSerializer,
)
from .services import (
    create_rating,
    get_rating_by_id,
    update_rating,
    delete_rating,
    get_pub_ratings,
    get_user_ratings,
)


class RatingViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Rating CRUD operations.

    list: Get all ratings, newest first
    create: Rate a pub
    retrieve: Get a specific rating
    update: Update a rating (owner only)
    partial_update: Partially update a rating (owner only)
    destroy: Delete a rating (owner only)
    """

    queryset = Rating.objects.select_related('user', 'pub').prefetch_related('photos')
    serializer_class = RatingSerializer
    permission_classes = [IsAuthenticatedOrReadOnly]

    def get_queryset(self):
        return super().get_queryset().order_by('-date')

    def get_serializer_class(self):
        if self.action == 'create':
            return RatingCreateSerializer
        if self.action in ('update', 'partial_update'):
            return RatingUpdateSerializer
        if self.action == 'by_user':
            return UserRatingSerializer
        return RatingSerializer

    def _output(self, rating, **kwargs):
        return Response(
            RatingSerializer(rating, context=self.get_serializer_context()).data,
            **kwargs
        )

    def retrieve(self, request, *args, **kwargs):
        """Get a rating."""
        return self._output(get_rating_by_id(rating_id=kwargs['pk']))

    @extend_schema(request=RatingCreateSerializer, responses={201: RatingSerializer})
    def create(self, request, *args, **kwargs):
        """Create rating using service layer."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        rating = create_rating(
            user=request.user,
            pub_id=serializer.validated_data['pubId'],
            score=serializer.validated_data['score'],
            comment=serializer.validated_data.get('comment', ''),
        )

        return self._output(get_rating_by_id(rating_id=rating.id), status=status.HTTP_201_CREATED)

    @extend_schema(request=RatingUpdateSerializer, responses={200: RatingSerializer})
    def update(self, request, *args, **kwargs):
        """Update rating using service layer."""
        serializer = self.get_serializer(data=request.data, partial=kwargs.pop('partial', False))
        serializer.is_valid(raise_exception=True)

        rating = update_rating(
            rating_id=kwargs['pk'],
            user=request.user,
            score=serializer.validated_data.get('score'),
            comment=serializer.validated_data.get('comment'),
        )

        return self._output(rating)

    def destroy(self, request, *args, **kwargs):
        """Delete rating using service layer."""
        delete_rating(rating_id=kwargs['pk'], user=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        parameters=[OpenApiParameter('pub_id', OpenApiTypes.UUID, OpenApiParameter.PATH)],
        responses={200: RatingSerializer(many=True)},
    )
    @action(detail=False, methods=['get'], url_path=r'pub/(?P<pub_id>[^/.]+)', url_name='by-pub')
    def by_pub(self, request, pub_id=None):
        """Get all ratings of a pub, newest first."""
        ratings = get_pub_ratings(pub_id=pub_id)
        serializer = self.get_serializer(ratings, many=True)
        return Response(serializer.data)

    @extend_schema(
        parameters=[OpenApiParameter('user_id', OpenApiTypes.UUID, OpenApiParameter.PATH)],
        responses={200: UserRatingSerializer(many=True)},
    )
    @action(detail=False, methods=['get'], url_path=r'user/(?P<user_id>[^/.]+)', url_name='by-user')
    def by_user(self, request, user_id=None):
        """Get all ratings by a user, newest first."""
        ratings = get_user_ratings(user_id=user_id)
        serializer = self.get_serializer(ratings, many=True)
        return Response(serializer.data)
