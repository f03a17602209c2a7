import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.pubs.models import Pub
from apps.ratings.models import Rating


DUBLIN = (53.349805, -6.26031)
GALWAY = (53.270668, -9.056791)


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return User.objects.create_user(
        email='testuser@example.com',
        password='TestPass123!',
        username='test_user',
    )


@pytest.fixture
def other_user(db):
    """Create and return another test user."""
    return User.objects.create_user(
        email='otheruser@example.com',
        password='OtherPass123!',
        username='other_user',
    )


@pytest.fixture
def staff_user(db):
    """Create and return a staff user."""
    return User.objects.create_user(
        email='staff@example.com',
        password='StaffPass123!',
        username='staff_user',
        is_staff=True,
    )


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def authenticated_client(user):
    """Return an authenticated API client using JWT."""
    return _client_for(user)


@pytest.fixture
def other_client(other_user):
    return _client_for(other_user)


@pytest.fixture
def staff_client(staff_user):
    return _client_for(staff_user)


@pytest.fixture
def dublin_pub(user):
    """Pub in central Dublin, created by `user`."""
    return Pub.objects.create(
        name='The Guinness Pub',
        address='123 Dublin St, Dublin',
        latitude=DUBLIN[0],
        longitude=DUBLIN[1],
        created_by=user,
    )


@pytest.fixture
def galway_pub(db):
    """Pub in Galway, ~190 km west of Dublin."""
    return Pub.objects.create(
        name='Emerald Isle Bar',
        address='789 Galway Ave, Galway',
        latitude=GALWAY[0],
        longitude=GALWAY[1],
    )


@pytest.fixture
def rated_dublin_pub(dublin_pub, user, other_user):
    """Dublin pub with scores 9.5, 8.0 and 10.0 (mean 9.1666...)."""
    Rating.objects.create(user=user, pub=dublin_pub, score=9.5)
    Rating.objects.create(user=other_user, pub=dublin_pub, score=8.0)
    Rating.objects.create(user=user, pub=dublin_pub, score=10.0)
    return dublin_pub
