import uuid

import pytest
from django.urls import reverse
from rest_framework import status
from apps.ratings.models import Rating


@pytest.mark.django_db
class TestCreateRating:
    """Tests for POST /api/ratings/"""

    def test_create(self, authenticated_client, user, pub):
        url = reverse('ratings:rating-list')
        response = authenticated_client.post(url, {'pubId': str(pub.id), 'score': 9.5, 'comment': 'Creamy'})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['score'] == 9.5
        assert response.data['pubId'] == str(pub.id)
        assert response.data['userId'] == str(user.id)
        assert response.data['user']['username'] == user.username
        assert response.data['photos'] == []

    def test_requires_auth(self, api_client, pub):
        url = reverse('ratings:rating-list')
        response = api_client.post(url, {'pubId': str(pub.id), 'score': 5})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert not Rating.objects.exists()

    @pytest.mark.parametrize('score', [0, 11])
    def test_out_of_range_score(self, authenticated_client, pub, score):
        url = reverse('ratings:rating-list')
        response = authenticated_client.post(url, {'pubId': str(pub.id), 'score': score})
        body = response.json()

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert body['success'] is False
        assert body['code'] == 'validation_error'
        assert not Rating.objects.exists()

    def test_unknown_pub(self, authenticated_client):
        url = reverse('ratings:rating-list')
        response = authenticated_client.post(url, {'pubId': str(uuid.uuid4()), 'score': 5})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_missing_pub_id(self, authenticated_client):
        url = reverse('ratings:rating-list')
        response = authenticated_client.post(url, {'score': 5})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'pubId' in response.data['details']

    def test_rating_changes_pub_average(self, authenticated_client, pub):
        authenticated_client.post(reverse('ratings:rating-list'), {'pubId': str(pub.id), 'score': 9.5})
        authenticated_client.post(reverse('ratings:rating-list'), {'pubId': str(pub.id), 'score': 8.0})

        response = authenticated_client.get(reverse('pubs:pub-rating', kwargs={'pk': pub.id}))

        assert response.data['averageRating'] == pytest.approx(8.75)
        assert response.data['ratingCount'] == 2


@pytest.mark.django_db
class TestRatingDetail:
    """Tests for /api/ratings/{id}/"""

    def test_retrieve(self, api_client, rating):
        url = reverse('ratings:rating-detail', kwargs={'pk': rating.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['comment'] == rating.comment

    def test_retrieve_unknown(self, api_client):
        url = reverse('ratings:rating-detail', kwargs={'pk': uuid.uuid4()})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error'] == 'Rating not found'

    def test_owner_put(self, authenticated_client, rating):
        url = reverse('ratings:rating-detail', kwargs={'pk': rating.id})
        response = authenticated_client.put(url, {'score': 7, 'comment': 'Went downhill'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['score'] == 7.0
        assert response.data['comment'] == 'Went downhill'

    def test_put_without_score(self, authenticated_client, rating):
        url = reverse('ratings:rating-detail', kwargs={'pk': rating.id})
        response = authenticated_client.put(url, {'comment': 'Only a comment'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'score' in response.data['details']
        rating.refresh_from_db()
        assert rating.comment != 'Only a comment'

    def test_owner_patch(self, authenticated_client, rating):
        url = reverse('ratings:rating-detail', kwargs={'pk': rating.id})
        response = authenticated_client.patch(url, {'comment': 'Still good'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['score'] == 8.5

    def test_non_owner_update_forbidden(self, other_client, rating):
        url = reverse('ratings:rating-detail', kwargs={'pk': rating.id})
        response = other_client.patch(url, {'score': 1})

        assert response.status_code == status.HTTP_403_FORBIDDEN
        rating.refresh_from_db()
        assert rating.score == 8.5

    def test_non_owner_delete_forbidden(self, other_client, rating):
        url = reverse('ratings:rating-detail', kwargs={'pk': rating.id})
        response = other_client.delete(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()['code'] == 'forbidden'
        assert Rating.objects.filter(id=rating.id).exists()

    def test_owner_delete(self, authenticated_client, rating):
        url = reverse('ratings:rating-detail', kwargs={'pk': rating.id})
        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Rating.objects.exists()


@pytest.mark.django_db
class TestRatingListings:
    """Tests for /api/ratings/pub/{id}/ and /api/ratings/user/{id}/"""

    def test_by_pub(self, api_client, rating, pub):
        url = reverse('ratings:rating-by-pub', kwargs={'pub_id': pub.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [item['id'] for item in response.data] == [str(rating.id)]
        assert response.data[0]['user']['username'] == 'test_user'

    def test_by_pub_unknown(self, api_client):
        url = reverse('ratings:rating-by-pub', kwargs={'pub_id': 'not-a-uuid'})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_by_user(self, api_client, rating, user, pub):
        url = reverse('ratings:rating-by-user', kwargs={'user_id': user.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data[0]['pub']['name'] == pub.name

    def test_by_user_unknown(self, api_client):
        url = reverse('ratings:rating-by-user', kwargs={'user_id': uuid.uuid4()})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
