import os
import subprocess
import sys
from pathlib import Path

import pytest
from django.urls import reverse
from rest_framework.test import APIClient

from clinic.models import AuditEvent, Doctor, StaffProfile, User
from clinic.services import users as user_service

from .conftest import PASSWORD

pytestmark = pytest.mark.django_db

ROOT = Path(__file__).resolve().parents[2]


def signup(client, email, role, **extra):
    body = {'name': 'Test Person', 'email': email, 'password': PASSWORD, 'role': role, **extra}
    return client.post(reverse('signup_view'), body, format='json')


@pytest.mark.parametrize('role', ['Patient', 'Admin'])
def test_self_verified_roles_are_verified_on_signup(role):
    r = signup(APIClient(), f'{role.lower()}@example.com', role)
    assert r.status_code == 201
    assert r.data['ok'] is True
    assert r.data['verified'] is True
    assert r.data['message'] == 'Account created successfully!'
    assert User.objects.get(email=f'{role.lower()}@example.com').verified is True


@pytest.mark.parametrize('role', ['Doctor', 'Pharmacist'])
def test_staff_roles_wait_for_approval(role):
    email = f'{role.lower()}@example.com'
    r = signup(APIClient(), email, role, specialization='Cardiac Surgery', department='Cardiology',
               licenseNumber='LIC-42', experienceYears=7, verified=True)
    assert r.status_code == 201
    assert r.data['verified'] is False
    assert r.data['message'] == 'Account created! Waiting for admin approval.'

    user = User.objects.get(email=email)
    assert user.verified is False
    profile = StaffProfile.objects.get(user=user)
    assert profile.department == 'Cardiology'
    assert profile.license_number == 'LIC-42'
    assert profile.experience_years == 7
    # directory entry is deferred until approval
    assert not Doctor.objects.filter(email=email).exists()


def test_patient_signup_has_no_staff_profile():
    signup(APIClient(), 'pat@example.com', 'Patient', specialization='ignored')
    assert not StaffProfile.objects.filter(user__email='pat@example.com').exists()


def test_duplicate_signup_fails_every_time():
    client = APIClient()
    assert signup(client, 'dup@example.com', 'Patient').status_code == 201
    for _ in range(2):
        r = signup(client, 'dup@example.com', 'Patient')
        assert r.status_code == 400
        assert r.data['error']['code'] == 'duplicate_email'
        assert r.data['error']['message'] == 'Email already exists!'
    assert User.objects.filter(email='dup@example.com').count() == 1


def test_signup_rejects_weak_password_and_unknown_role():
    client = APIClient()
    r = client.post(reverse('signup_view'), {
        'name': 'Weak', 'email': 'weak@example.com', 'password': '123', 'role': 'Patient',
    }, format='json')
    assert r.status_code == 400
    assert 'password' in r.data['error']['message']

    r = signup(client, 'nurse@example.com', 'Nurse')
    assert r.status_code == 400
    assert r.data['error']['code'] == 'invalid'


def test_login_returns_jwt_and_legacy_token(make_user):
    make_user('u_jwt@example.com')
    r = APIClient().post(reverse('login_view'), {'email': 'u_jwt@example.com', 'password': PASSWORD}, format='json')
    assert r.status_code == 200
    assert r.data['ok'] is True
    assert r.data['role'] == 'Patient'
    assert r.data['user']['email'] == 'u_jwt@example.com'
    assert 'jwt_access' in r.data and r.data['jwt_access']
    assert 'jwt_refresh' in r.data and r.data['jwt_refresh']
    assert 'token' in r.data and r.data['token']
    assert AuditEvent.objects.filter(action='login', detail__result='ok').count() == 1


def test_login_with_bad_credentials_is_401_and_audited(make_user):
    make_user('p1@example.com')
    client = APIClient()
    r = client.post(reverse('login_view'), {'email': 'p1@example.com', 'password': 'wrong-one'}, format='json')
    assert r.status_code == 401
    assert r.data['error']['code'] == 'invalid_credentials'

    r = client.post(reverse('login_view'), {'email': 'ghost@example.com', 'password': PASSWORD}, format='json')
    assert r.status_code == 401

    failed = AuditEvent.objects.filter(action='login', detail__result='invalid_credentials')
    assert failed.count() == 2
    assert failed.filter(user__isnull=True).count() == 2


def test_unverified_doctor_is_pending_until_verified():
    client = APIClient()
    signup(client, 'doc@example.com', 'Doctor', department='Cardiology')
    body = {'email': 'doc@example.com', 'password': PASSWORD}

    r = client.post(reverse('login_view'), body, format='json')
    assert r.status_code == 403
    assert r.data['error']['code'] == 'pending_approval'
    assert 'pending admin approval' in r.data['error']['message']

    user_service.verify('doc@example.com')
    r = client.post(reverse('login_view'), body, format='json')
    assert r.status_code == 200
    assert r.data['role'] == 'Doctor'


def test_token_header_authenticates_and_anonymous_is_rejected(make_user):
    make_user('reader@example.com')
    client = APIClient()
    assert client.get('/api/doctors').status_code == 401

    r = client.post(reverse('login_view'), {'email': 'reader@example.com', 'password': PASSWORD}, format='json')
    client.credentials(HTTP_AUTHORIZATION=f"Token {r.data['token']}")
    assert client.get('/api/doctors').status_code == 200

    client.credentials(HTTP_AUTHORIZATION=f"Bearer {r.data['jwt_access']}")
    assert client.get('/api/departments').status_code == 200


def test_refresh_then_logout_blacklists_refresh_token(make_user):
    make_user('jwt@example.com')
    client = APIClient()
    r = client.post(reverse('login_view'), {'email': 'jwt@example.com', 'password': PASSWORD}, format='json')
    refresh = r.data['jwt_refresh']

    r = client.post(reverse('jwt_refresh_view'), {'refresh': refresh}, format='json')
    assert r.status_code == 200
    assert r.data['jwt_access']

    client.credentials(HTTP_AUTHORIZATION=f"Bearer {r.data['jwt_access']}")
    r = client.post(reverse('jwt_logout_view'), {'refresh': refresh}, format='json')
    assert r.status_code == 200
    assert r.data == {'ok': True, 'blacklisted': 1}

    client.credentials()
    r = client.post(reverse('jwt_refresh_view'), {'refresh': refresh}, format='json')
    assert r.status_code == 401


@pytest.mark.parametrize('scheme', ['Token', 'Bearer'])
def test_revoked_staff_credentials_are_rejected(make_user, scheme):
    doctor = make_user('doc@example.com', User.ROLE_DOCTOR)
    client = APIClient()
    r = client.post(reverse('login_view'), {'email': 'doc@example.com', 'password': PASSWORD}, format='json')
    credential = r.data['token'] if scheme == 'Token' else r.data['jwt_access']
    client.credentials(HTTP_AUTHORIZATION=f'{scheme} {credential}')
    assert client.get('/api/doctors').status_code == 200

    User.objects.filter(pk=doctor.pk).update(verified=False)

    r = client.get('/api/doctors')
    assert r.status_code == 403
    assert r.data['error']['code'] == 'pending_approval'


@pytest.mark.parametrize('first', ['clinic.exceptions', 'clinic.services.users', 'clinic.authentication'])
def test_modules_import_in_any_order(first):
    # fresh interpreter so no module is cached yet
    code = f'import django; django.setup(); import {first}; import clinic.auth_views; import clinic.routers'
    env = {**os.environ, 'DJANGO_SETTINGS_MODULE': 'hms.settings'}
    result = subprocess.run([sys.executable, '-c', code], cwd=ROOT, env=env, capture_output=True, text=True)
    assert result.returncode == 0, result.stderr
