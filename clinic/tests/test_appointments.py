import uuid

import pytest

from clinic.models import Appointment

pytestmark = pytest.mark.django_db


def booking(**overrides):
    body = {
        'patientId': 'pat@example.com',
        'doctorId': 'doc@example.com',
        'patientName': 'Pat Patient',
        'doctorName': 'Dr. Who',
        'age': 34,
        'gender': 'Female',
        'contactNumber': '555-0100',
        'department': 'Cardiology',
        'appointmentDate': '2026-03-01',
        'appointmentTime': '10:30:00',
        'reason': 'Chest pain',
        'issueDays': 3,
    }
    body.update(overrides)
    return body


@pytest.fixture
def patient_client(api_client, make_user):
    api_client.force_authenticate(user=make_user('pat@example.com', name='Pat Patient'))
    return api_client


@pytest.mark.parametrize('submitted', ['Cancelled', 'Completed', None])
def test_create_always_scheduled(patient_client, submitted):
    body = booking()
    if submitted:
        body['status'] = submitted
    r = patient_client.post('/api/appointments', body, format='json')
    assert r.status_code == 201
    assert r.data['status'] == 'Scheduled'
    assert r.data['appointmentDate'] == '2026-03-01'
    assert r.data['appointmentTime'] == '10:30:00'
    assert Appointment.objects.get(pk=r.data['id']).status == Appointment.STATUS_SCHEDULED


def test_create_rejects_malformed_date(patient_client):
    r = patient_client.post('/api/appointments', booking(appointmentDate='next tuesday'), format='json')
    assert r.status_code == 400
    assert r.data['error']['code'] == 'invalid'


def test_update_replaces_fields(patient_client):
    appt_id = patient_client.post('/api/appointments', booking(), format='json').data['id']
    r = patient_client.put(f'/api/appointments/{appt_id}', booking(
        status='Completed', appointmentDate='2026-03-05', appointmentTime='09:00:00',
        reason='Follow-up visit', prescriptionGiven=True, followUpRequired=True, followUpDate='2026-04-01',
    ), format='json')
    assert r.status_code == 200
    appt = Appointment.objects.get(pk=appt_id)
    assert appt.status == 'Completed'
    assert appt.appointment_date.isoformat() == '2026-03-05'
    assert appt.reason == 'Follow-up visit'
    assert appt.prescription_given is True
    assert appt.follow_up_required is True
    assert appt.follow_up_date.isoformat() == '2026-04-01'
    assert appt.cancellation_reason is None


def test_update_missing_is_404(patient_client):
    r = patient_client.put(f'/api/appointments/{uuid.uuid4()}', booking(), format='json')
    assert r.status_code == 404
    assert r.data['error']['code'] == 'not_found'


def test_status_patch_from_query_params_and_body(patient_client):
    appt_id = patient_client.post('/api/appointments', booking(), format='json').data['id']

    r = patient_client.patch(f'/api/appointments/{appt_id}/status?status=Cancelled&cancellationReason=Travel')
    assert r.status_code == 200
    assert r.data['status'] == 'Cancelled'
    assert r.data['cancellationReason'] == 'Travel'

    # reason is kept when not supplied
    r = patient_client.patch(f'/api/appointments/{appt_id}/status', {'status': 'Scheduled'}, format='json')
    assert r.status_code == 200
    assert r.data['status'] == 'Scheduled'
    assert r.data['cancellationReason'] == 'Travel'


def test_status_patch_validates(patient_client):
    appt_id = patient_client.post('/api/appointments', booking(), format='json').data['id']
    assert patient_client.patch(f'/api/appointments/{appt_id}/status?status=Lost').status_code == 400
    assert patient_client.patch(f'/api/appointments/{appt_id}/status').status_code == 400
    assert patient_client.patch(f'/api/appointments/{uuid.uuid4()}/status?status=Completed').status_code == 404


def test_lookups(patient_client):
    patient_client.post('/api/appointments', booking(), format='json')
    patient_client.post('/api/appointments', booking(doctorId='other@example.com'), format='json')
    other = patient_client.post('/api/appointments', booking(patientId='someone@example.com'), format='json').data
    patient_client.patch(f"/api/appointments/{other['id']}/status?status=Completed")

    assert len(patient_client.get('/api/appointments').data) == 3
    assert len(patient_client.get('/api/appointments/patient/pat@example.com').data) == 2
    assert len(patient_client.get('/api/appointments/doctor/doc@example.com').data) == 2
    completed = patient_client.get('/api/appointments/status/Completed').data
    assert [a['id'] for a in completed] == [other['id']]


def test_get_and_delete(patient_client):
    appt_id = patient_client.post('/api/appointments', booking(), format='json').data['id']
    r = patient_client.get(f'/api/appointments/{appt_id}')
    assert r.status_code == 200
    assert r.data['patientName'] == 'Pat Patient'
    assert patient_client.delete(f'/api/appointments/{appt_id}').status_code == 204
    assert patient_client.get(f'/api/appointments/{appt_id}').status_code == 404
    assert patient_client.delete(f'/api/appointments/{appt_id}').status_code == 404


def test_requires_authentication(api_client):
    assert api_client.get('/api/appointments').status_code == 401
