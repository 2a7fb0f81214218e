import logging
from typing import Optional

from django.db.models import Q

from clinic.exceptions import DuplicateEmail, NotFound
from clinic.models import Doctor

logger = logging.getLogger(__name__)

DOCTOR_FIELDS = ('name', 'email', 'department', 'specialization', 'phone', 'available', 'experience_years', 'qualification')


def format_doctor(d: Doctor) -> dict:
    return {
        'id': str(d.id),
        'name': d.name,
        'email': d.email,
        'department': d.department,
        'specialization': d.specialization,
        'phone': d.phone,
        'available': d.available,
        'experienceYears': d.experience_years,
        'qualification': d.qualification,
    }


def list_doctors(*, q: Optional[str]=None, available_only: bool=False,
                 department: Optional[str]=None, specialization: Optional[str]=None):
    qs = Doctor.objects.all()
    if available_only:
        qs = qs.filter(available=True)
    if department is not None:
        qs = qs.filter(department=department)
    if specialization is not None:
        qs = qs.filter(specialization=specialization)
    if q:
        qs = qs.filter(Q(name__icontains=q) | Q(specialization__icontains=q))
    return qs


def get_doctor(pk) -> Doctor:
    doctor = Doctor.objects.filter(pk=pk).first()
    if not doctor:
        raise NotFound(f'Doctor not found with id: {pk}')
    return doctor


def get_by_email(email: str) -> Doctor:
    doctor = Doctor.objects.filter(email=email).first()
    if not doctor:
        raise NotFound(f'Doctor not found with email: {email}')
    return doctor


def create_doctor(**fields) -> Doctor:
    if Doctor.objects.filter(email=fields.get('email')).exists():
        raise DuplicateEmail()
    doctor = Doctor.objects.create(**{k: v for k, v in fields.items() if k in DOCTOR_FIELDS})
    logger.info('doctor created email=%s department=%s', doctor.email, doctor.department)
    return doctor


def update_doctor(pk, **fields) -> Doctor:
    doctor = get_doctor(pk)
    email = fields.get('email')
    if email and Doctor.objects.filter(email=email).exclude(pk=doctor.pk).exists():
        raise DuplicateEmail()
    for field in DOCTOR_FIELDS:
        if field in fields:
            setattr(doctor, field, fields[field])
    doctor.save()
    return doctor


def delete_doctor(pk) -> None:
    doctor = get_doctor(pk)
    doctor.delete()
    logger.info('doctor deleted id=%s email=%s', pk, doctor.email)
