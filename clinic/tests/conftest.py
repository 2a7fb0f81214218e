import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from clinic.models import User

PASSWORD = 'Harbor-lamp-71!'


@pytest.fixture(autouse=True)
def _reset_throttles():
    # throttle counters live in the default cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_user(db):
    def _make(email, role=User.ROLE_PATIENT, *, name=None, verified=True, password=PASSWORD, **extra):
        return User.objects.create_user(
            email=email, password=password, name=name or email.split('@')[0].title(),
            role=role, verified=verified, **extra,
        )
    return _make


@pytest.fixture
def admin_user(make_user):
    return make_user('admin@hospital.test', User.ROLE_ADMIN, name='Ada Admin')


@pytest.fixture
def admin_client(api_client, admin_user):
    api_client.force_authenticate(user=admin_user)
    return api_client
