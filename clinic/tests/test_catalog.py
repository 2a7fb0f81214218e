"""
Doctor directory, departments, reference data seeding and health check.
"""
import uuid

import pytest
from django.core.management import call_command
from django.urls import reverse

from clinic.models import Department, Doctor, User
from clinic.services.seeding import DEPARTMENTS, DOCTORS, seed_reference_data

pytestmark = pytest.mark.django_db


def doctor_body(**overrides):
    body = {
        'name': 'Dr. Meena Kapoor',
        'email': 'meena@hospital.test',
        'department': 'Cardiology',
        'specialization': 'Interventional Cardiology',
        'phone': '+91 9876543213',
        'available': True,
        'experienceYears': 18,
        'qualification': 'MBBS, MD, DM',
    }
    body.update(overrides)
    return body


# ---------------------------------------------------------------------
# Doctors
# ---------------------------------------------------------------------
def test_doctor_crud(admin_client):
    r = admin_client.post('/api/doctors', doctor_body(), format='json')
    assert r.status_code == 201
    doctor_id = r.data['id']
    assert r.data['experienceYears'] == 18

    r = admin_client.put(f'/api/doctors/{doctor_id}', doctor_body(available=False, phone='000'), format='json')
    assert r.status_code == 200
    assert r.data['available'] is False
    assert Doctor.objects.get(pk=doctor_id).phone == '000'

    assert admin_client.get(f'/api/doctors/{doctor_id}').data['name'] == 'Dr. Meena Kapoor'
    assert admin_client.delete(f'/api/doctors/{doctor_id}').status_code == 204
    assert not Doctor.objects.exists()


def test_doctor_duplicate_email(admin_client):
    admin_client.post('/api/doctors', doctor_body(), format='json')
    r = admin_client.post('/api/doctors', doctor_body(name='Someone Else'), format='json')
    assert r.status_code == 400
    assert r.data['error']['code'] == 'duplicate_email'


def test_doctor_missing_is_404(admin_client):
    missing = uuid.uuid4()
    assert admin_client.put(f'/api/doctors/{missing}', doctor_body(), format='json').status_code == 404
    assert admin_client.delete(f'/api/doctors/{missing}').status_code == 404
    assert admin_client.get('/api/doctors/email/ghost@hospital.test').status_code == 404


def test_doctor_filters(api_client, make_user):
    seed_reference_data()
    Doctor.objects.filter(email='neha.bhatia@hospital.com').update(available=False)
    api_client.force_authenticate(user=make_user('pat@example.com'))

    assert len(api_client.get('/api/doctors').data) == len(DOCTORS)
    assert len(api_client.get('/api/doctors/available').data) == len(DOCTORS) - 1
    cardio = api_client.get('/api/doctors/department/Cardiology').data
    assert {d['email'] for d in cardio} == {
        'meena.kapoor@hospital.com', 'arjun.singh@hospital.com', 'kavita.reddy@hospital.com',
    }
    spec = api_client.get('/api/doctors/specialization/Neonatology').data
    assert [d['name'] for d in spec] == ['Dr. Suresh Patel']
    assert api_client.get('/api/doctors/email/sita.ram@hospital.com').data['department'] == 'ENT'
    assert len(api_client.get('/api/doctors?q=psychiatry').data) == 3


def test_doctor_writes_require_admin(api_client, make_user):
    api_client.force_authenticate(user=make_user('doc@example.com', User.ROLE_DOCTOR))
    assert api_client.get('/api/doctors').status_code == 200
    assert api_client.post('/api/doctors', doctor_body(), format='json').status_code == 403


# ---------------------------------------------------------------------
# Departments
# ---------------------------------------------------------------------
def test_department_crud_and_lookups(admin_client):
    r = admin_client.post('/api/departments', {'name': 'Radiology', 'description': 'Imaging', 'head': 'Dr. Ray'},
                          format='json')
    assert r.status_code == 201
    assert r.data['active'] is True
    dept_id = r.data['id']

    admin_client.post('/api/departments', {'name': 'Archive', 'active': False}, format='json')
    assert [d['name'] for d in admin_client.get('/api/departments/active').data] == ['Radiology']
    assert len(admin_client.get('/api/departments').data) == 2
    assert admin_client.get('/api/departments/name/Radiology').data['head'] == 'Dr. Ray'
    assert admin_client.get('/api/departments/name/Nope').status_code == 404

    r = admin_client.put(f'/api/departments/{dept_id}', {'name': 'Imaging', 'active': False}, format='json')
    assert r.status_code == 200
    dept = Department.objects.get(pk=dept_id)
    assert (dept.name, dept.description, dept.head, dept.active) == ('Imaging', '', '', False)

    assert admin_client.delete(f'/api/departments/{dept_id}').status_code == 204
    assert admin_client.delete(f'/api/departments/{dept_id}').status_code == 404


def test_department_name_is_unique(admin_client):
    admin_client.post('/api/departments', {'name': 'Radiology'}, format='json')
    r = admin_client.post('/api/departments', {'name': 'Radiology'}, format='json')
    assert r.status_code == 400
    other = admin_client.post('/api/departments', {'name': 'Oncology'}, format='json').data
    r = admin_client.put(f"/api/departments/{other['id']}", {'name': 'Radiology'}, format='json')
    assert r.status_code == 400


def test_department_missing_is_404(admin_client):
    assert admin_client.put(f'/api/departments/{uuid.uuid4()}', {'name': 'X'}, format='json').status_code == 404


# ---------------------------------------------------------------------
# Seeding & health
# ---------------------------------------------------------------------
def test_seed_is_idempotent():
    assert seed_reference_data() == {'departments': len(DEPARTMENTS), 'doctors': len(DOCTORS)}
    assert seed_reference_data() == {'departments': 0, 'doctors': 0}
    call_command('seed_data')
    assert Department.objects.count() == 10
    assert Doctor.objects.count() == 30
    assert Department.objects.filter(active=True).count() == 10


def test_seed_only_fills_empty_tables():
    Department.objects.create(name='Custom')
    assert seed_reference_data() == {'departments': 0, 'doctors': len(DOCTORS)}
    assert list(Department.objects.values_list('name', flat=True)) == ['Custom']


def test_healthz(api_client, make_user):
    make_user('someone@example.com')
    r = api_client.get(reverse('healthz'))
    assert r.status_code == 200
    assert r.json() == {'ok': True, 'db': True, 'users': 1}
