import base64

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.pubs.models import Pub
from apps.ratings.models import Rating

# 1x1 transparent PNG
PNG_BYTES = base64.b64decode(
    'iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII='
)


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Store uploads in a throwaway directory."""
    settings.MEDIA_ROOT = tmp_path
    return tmp_path


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
    return Pub.objects.create(
        name='Celtic Brew House',
        address='78 High Street, Kilkenny',
        latitude=52.654145,
        longitude=-7.252297,
    )


@pytest.fixture
def other_pub(db):
    return Pub.objects.create(
        name='Irish Tavern',
        address='456 Cork Rd, Cork',
        latitude=51.896892,
        longitude=-8.486316,
    )


@pytest.fixture
def rating(user, pub):
    return Rating.objects.create(user=user, pub=pub, score=9.2)


@pytest.fixture
def png_upload():
    return SimpleUploadedFile('pint.PNG', PNG_BYTES, content_type='image/png')


@pytest.fixture
def png_data_uri():
    return 'data:image/png;base64,' + base64.b64encode(PNG_BYTES).decode()
