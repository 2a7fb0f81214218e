"""
Appointment booking and status management.

New appointments always start as ``Scheduled``; the caller cannot pick
another initial status.  Updates replace the mutable part of the
booking wholesale, while :func:`update_status` only touches the status
and, when given, the cancellation reason.
"""
import logging
from typing import Optional

from clinic.exceptions import NotFound
from clinic.models import Appointment

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    'status', 'appointment_date', 'appointment_time', 'reason',
    'prescription_given', 'follow_up_required', 'follow_up_date', 'cancellation_reason',
)


def format_appointment(a: Appointment) -> dict:
    return {
        'id': str(a.id),
        'patientId': a.patient_id,
        'doctorId': a.doctor_id,
        'patientName': a.patient_name,
        'doctorName': a.doctor_name,
        'age': a.age,
        'gender': a.gender,
        'contactNumber': a.contact_number,
        'department': a.department,
        'appointmentDate': a.appointment_date.isoformat() if a.appointment_date else None,
        'appointmentTime': a.appointment_time.strftime('%H:%M:%S') if a.appointment_time else None,
        'status': a.status,
        'reason': a.reason,
        'issueDays': a.issue_days,
        'prescriptionGiven': a.prescription_given,
        'followUpRequired': a.follow_up_required,
        'followUpDate': a.follow_up_date.isoformat() if a.follow_up_date else None,
        'cancellationReason': a.cancellation_reason,
    }


def get_appointment(pk) -> Appointment:
    appt = Appointment.objects.filter(pk=pk).first()
    if not appt:
        raise NotFound(f'Appointment not found with id: {pk}')
    return appt


def list_appointments(*, patient_id: Optional[str]=None, doctor_id: Optional[str]=None, status: Optional[str]=None):
    qs = Appointment.objects.all()
    if patient_id is not None:
        qs = qs.filter(patient_id=patient_id)
    if doctor_id is not None:
        qs = qs.filter(doctor_id=doctor_id)
    if status is not None:
        qs = qs.filter(status=status)
    return qs


def create_appointment(**fields) -> Appointment:
    fields['status'] = Appointment.STATUS_SCHEDULED
    appt = Appointment.objects.create(**fields)
    logger.info('appointment created id=%s patient=%s doctor=%s', appt.id, appt.patient_id, appt.doctor_id)
    return appt


def update_appointment(pk, **fields) -> Appointment:
    appt = get_appointment(pk)
    for field in UPDATABLE_FIELDS:
        setattr(appt, field, fields.get(field))
    if appt.status is None:
        appt.status = Appointment.STATUS_SCHEDULED
    if appt.reason is None:
        appt.reason = ''
    appt.prescription_given = bool(appt.prescription_given)
    appt.follow_up_required = bool(appt.follow_up_required)
    appt.save()
    return appt


def update_status(pk, status: str, cancellation_reason: Optional[str]=None) -> Appointment:
    appt = get_appointment(pk)
    previous = appt.status
    appt.status = status
    if cancellation_reason is not None:
        appt.cancellation_reason = cancellation_reason
    appt.save(update_fields=['status', 'cancellation_reason'])
    logger.info('appointment status id=%s from=%s to=%s', pk, previous, status)
    return appt


def delete_appointment(pk) -> None:
    get_appointment(pk).delete()
    logger.info('appointment deleted id=%s', pk)
