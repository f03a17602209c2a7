import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.pubs.models import Pub
from apps.ratings.models import Rating


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
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def other_client(other_user):
    client = APIClient()
    refresh = RefreshToken.for_user(other_user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def pub(db):
    """Create and return a test pub."""
    return Pub.objects.create(
        name='Dublin Porter',
        address='42 Temple Bar, Dublin',
        latitude=53.345367,
        longitude=-6.263419,
    )


@pytest.fixture
def rating(user, pub):
    """Rating by `user` for `pub`."""
    return Rating.objects.create(
        user=user,
        pub=pub,
        score=8.5,
        comment='Great atmosphere and a well-poured pint!',
    )
