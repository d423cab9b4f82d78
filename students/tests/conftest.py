import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from students.services import credentials
from students.services.tokens import issue_for
from students.tests.factories import make_student


@pytest.fixture(autouse=True)
def _reset_throttles():
    # Throttle history lives in the default cache and would leak between tests.
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def student(db):
    return make_student()


@pytest.fixture
def student_client(student):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {issue_for(student)}')
    return client


@pytest.fixture
def admin_client(db):
    admin = credentials.create_admin(email='root@example.com', password_hash=credentials.hash_password('adminpass'))
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {issue_for(admin)}')
    return client
