import uuid

import pytest
from django.urls import reverse
from rest_framework import status
from apps.pubs.models import Pub
from .conftest import DUBLIN, GALWAY


# =============================================================================
# Nearby Search Tests
# =============================================================================

@pytest.mark.django_db
class TestNearby:
    """Tests for GET /api/pubs/nearby/ and /api/pubs/near/"""

    def test_nearby_envelope(self, api_client, rated_dublin_pub, galway_pub):
        url = reverse('pubs:pub-nearby')
        response = api_client.get(url, {'lat': DUBLIN[0], 'lng': DUBLIN[1], 'radius': 2})
        body = response.json()

        assert response.status_code == status.HTTP_200_OK
        assert body['success'] is True
        assert len(body['data']) == 1

        pub = body['data'][0]
        assert pub['id'] == str(rated_dublin_pub.id)
        assert pub['averageRating'] == pytest.approx(9.1666, abs=1e-3)
        assert pub['averageRatingDisplay'] == '9.2'
        assert pub['ratingCount'] == 3
        assert pub['distanceKm'] == pytest.approx(0.0)

    def test_unrated_pub_average_is_null(self, api_client, galway_pub):
        url = reverse('pubs:pub-nearby')
        response = api_client.get(url, {'lat': GALWAY[0], 'lng': GALWAY[1]})

        pub = response.json()['data'][0]
        assert pub['averageRating'] is None
        assert pub['averageRatingDisplay'] is None

    def test_near_alias(self, api_client, dublin_pub):
        url = reverse('pubs:pub-near')
        response = api_client.get(url, {'latitude': DUBLIN[0], 'longitude': DUBLIN[1], 'radius': 1})

        assert response.status_code == status.HTTP_200_OK
        assert [pub['id'] for pub in response.data] == [str(dublin_pub.id)]

    def test_missing_coordinates(self, api_client):
        url = reverse('pubs:pub-nearby')
        response = api_client.get(url, {'lat': DUBLIN[0]})
        body = response.json()

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert body['success'] is False
        assert body['code'] == 'validation_error'
        assert body['error'] == 'Latitude and longitude are required'

    @pytest.mark.parametrize('params', [
        {'lat': 'abc', 'lng': '0'},
        {'lat': '91', 'lng': '0'},
        {'lat': '0', 'lng': '-200'},
        {'lat': '89', 'lng': '0'},
        {'lat': '53', 'lng': '-6', 'radius': '0'},
        {'lat': '53', 'lng': '-6', 'radius': '-3'},
        {'lat': '53', 'lng': '-6', 'sort': 'name'},
    ])
    def test_invalid_parameters(self, api_client, params):
        url = reverse('pubs:pub-nearby')
        response = api_client.get(url, params)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'validation_error'

    def test_strict_and_sort(self, api_client, rated_dublin_pub):
        # ~1.5 km east, unrated
        nearby = Pub.objects.create(name='East Wall', address='Dublin 3', latitude=DUBLIN[0], longitude=-6.2378)
        url = reverse('pubs:pub-nearby')

        by_distance = api_client.get(url, {'lat': DUBLIN[0], 'lng': DUBLIN[1], 'radius': 2, 'sort': 'distance'})
        assert [pub['id'] for pub in by_distance.data] == [str(rated_dublin_pub.id), str(nearby.id)]

        by_rating = api_client.get(url, {'lat': DUBLIN[0], 'lng': -6.2378, 'radius': 2, 'sort': 'rating'})
        assert [pub['id'] for pub in by_rating.data] == [str(rated_dublin_pub.id), str(nearby.id)]

        strict = api_client.get(url, {'lat': DUBLIN[0], 'lng': DUBLIN[1], 'radius': 1, 'strict': 'true'})
        assert [pub['id'] for pub in strict.data] == [str(rated_dublin_pub.id)]


# =============================================================================
# Pub CRUD Tests
# =============================================================================

@pytest.mark.django_db
class TestPubCrud:
    """Tests for /api/pubs/ and /api/pubs/{id}/"""

    def test_list_pubs(self, api_client, rated_dublin_pub, galway_pub):
        response = api_client.get(reverse('pubs:pub-list'))

        assert response.status_code == status.HTTP_200_OK
        assert [pub['name'] for pub in response.data] == ['Emerald Isle Bar', 'The Guinness Pub']
        assert response.data[1]['ratingCount'] == 3

    def test_retrieve_pub(self, api_client, rated_dublin_pub):
        url = reverse('pubs:pub-detail', kwargs={'pk': rated_dublin_pub.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['name'] == 'The Guinness Pub'
        assert response.data['averageRatingDisplay'] == '9.2'
        assert response.data['photos'] == []

    def test_retrieve_unknown_pub(self, api_client):
        url = reverse('pubs:pub-detail', kwargs={'pk': uuid.uuid4()})
        response = api_client.get(url)
        body = response.json()

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert body == {'success': False, 'error': 'Pub not found', 'code': 'not_found'}

    def test_create_requires_auth(self, api_client):
        response = api_client.post(reverse('pubs:pub-list'), {'name': 'X', 'address': 'Y', 'latitude': 1, 'longitude': 1})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_create_pub(self, authenticated_client, user):
        data = {
            'name': 'The Brazen Head',
            'address': '20 Bridge St Lower, Dublin',
            'latitude': 53.3447,
            'longitude': -6.2766,
            'phoneNumber': '+353 1 677 9549',
            'openingHours': 'Daily: 10:30am - 12am',
        }
        response = authenticated_client.post(reverse('pubs:pub-list'), data)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['phoneNumber'] == '+353 1 677 9549'
        assert response.data['averageRating'] is None
        assert Pub.objects.get(name='The Brazen Head').created_by == user

    def test_create_pub_bad_latitude(self, authenticated_client):
        data = {'name': 'Nowhere', 'address': '-', 'latitude': 123, 'longitude': 0}
        response = authenticated_client.post(reverse('pubs:pub-list'), data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'latitude' in response.data['details']

    def test_creator_can_update(self, authenticated_client, dublin_pub):
        url = reverse('pubs:pub-detail', kwargs={'pk': dublin_pub.id})
        response = authenticated_client.patch(url, {'website': 'https://guinness.com'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['website'] == 'https://guinness.com'

    def test_other_user_cannot_update(self, other_client, dublin_pub):
        url = reverse('pubs:pub-detail', kwargs={'pk': dublin_pub.id})
        response = other_client.patch(url, {'name': 'Hijacked'})

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['code'] == 'forbidden'
        dublin_pub.refresh_from_db()
        assert dublin_pub.name == 'The Guinness Pub'

    def test_only_staff_can_delete(self, authenticated_client, staff_client, dublin_pub):
        url = reverse('pubs:pub-detail', kwargs={'pk': dublin_pub.id})

        assert authenticated_client.delete(url).status_code == status.HTTP_403_FORBIDDEN

        response = staff_client.delete(url)
        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert response.content == b''
        assert not Pub.objects.exists()

    def test_put_not_allowed(self, authenticated_client, dublin_pub):
        url = reverse('pubs:pub-detail', kwargs={'pk': dublin_pub.id})
        response = authenticated_client.put(url, {'name': 'X'})

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED


@pytest.mark.django_db
class TestPubRatingSummary:
    """Tests for GET /api/pubs/{id}/rating/"""

    def test_summary(self, api_client, rated_dublin_pub):
        url = reverse('pubs:pub-rating', kwargs={'pk': rated_dublin_pub.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['pubId'] == str(rated_dublin_pub.id)
        assert response.data['averageRatingDisplay'] == '9.2'
        assert response.data['ratingCount'] == 3

    def test_summary_unknown_pub(self, api_client):
        url = reverse('pubs:pub-rating', kwargs={'pk': uuid.uuid4()})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
