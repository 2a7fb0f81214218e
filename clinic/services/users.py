"""
User lifecycle: signup, login gating, administrator verification and
cascading deletion.

Doctors and pharmacists sign up unverified and cannot log in until an
administrator verifies them.  Verifying a doctor makes sure the doctor
appears in the public directory and that the doctor's department
exists.  Deleting a user removes the appointments and prescriptions
that reference them in a single transaction.
"""
from __future__ import annotations

import logging
from typing import Optional

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction

from clinic.exceptions import DuplicateEmail, InvalidCredentials, NotFound, PendingApproval
from clinic.models import Appointment, Doctor, Prescription, StaffProfile
from clinic.services.departments import ensure_department

User = get_user_model()
logger = logging.getLogger(__name__)

NOT_SPECIFIED = 'Not specified'
DEFAULT_DEPARTMENT = 'General'

SELF_VERIFIED_ROLES = {User.ROLE_PATIENT, User.ROLE_ADMIN}
APPROVAL_ROLES = {User.ROLE_DOCTOR, User.ROLE_PHARMACIST}
STAFF_FIELDS = ('specialization', 'department', 'qualification', 'license_number', 'experience_years')


def format_user(user: User) -> dict:
    data = {
        'id': user.id,
        'name': user.name,
        'email': user.email,
        'role': user.role,
        'verified': user.verified,
        'phone': user.phone,
        'dateJoined': user.date_joined.isoformat() if user.date_joined else None,
    }
    profile = _staff_profile(user)
    if profile is not None:
        data.update({
            'specialization': profile.specialization,
            'department': profile.department,
            'qualification': profile.qualification,
            'licenseNumber': profile.license_number,
            'experienceYears': profile.experience_years,
        })
    return data


def _staff_profile(user: User) -> Optional[StaffProfile]:
    try:
        return user.staff_profile
    except StaffProfile.DoesNotExist:
        return None


def _get_or_404(email: str) -> User:
    user = User.objects.select_related('staff_profile').filter(email=email).first()
    if not user:
        raise NotFound(f'User not found with email: {email}')
    return user


def _doctor_from_user(user: User, department: Optional[str] = None) -> Doctor:
    """Return the user's directory entry, creating it when missing.

    An entry that already exists (seeded, or added by hand) is reused and
    marked available again.
    """
    doctor = Doctor.objects.filter(email=user.email).first()
    if doctor is not None:
        doctor.available = True
        doctor.save(update_fields=['available'])
        logger.info('doctor availability restored email=%s', user.email)
        return doctor

    profile = _staff_profile(user)
    doctor = Doctor.objects.create(
        name=user.name,
        email=user.email,
        specialization=(profile and profile.specialization) or NOT_SPECIFIED,
        department=department or (profile and profile.department) or NOT_SPECIFIED,
        phone=user.phone or '',
        experience_years=(profile and profile.experience_years) or 0,
        qualification=(profile and profile.qualification) or NOT_SPECIFIED,
        available=True,
    )
    logger.info('doctor record created email=%s department=%s', user.email, doctor.department)
    return doctor


def _add_to_directory(user: User) -> Doctor:
    profile = _staff_profile(user)
    department_name = (profile and profile.department) or DEFAULT_DEPARTMENT
    ensure_department(department_name)
    return _doctor_from_user(user, department=department_name)


# ---------------------------------------------------------------------
# Signup / login
# ---------------------------------------------------------------------
def create_user(*, email: str, password: str, name: str, role: str, phone: Optional[str] = None,
                verified: Optional[bool] = None, **staff) -> User:
    """Create a user account.

    ``verified`` defaults to the role policy: patients and administrators
    are verified immediately, doctors and pharmacists wait for approval.
    A doctor that is verified at creation time gets a directory entry
    straight away; otherwise that happens in :func:`verify`.
    """
    email = User.objects.normalize_email(email)
    if verified is None:
        verified = role in SELF_VERIFIED_ROLES
    if User.objects.filter(email=email).exists():
        raise DuplicateEmail()
    try:
        with transaction.atomic():
            user = User.objects.create_user(
                email=email, password=password, name=name, role=role,
                phone=phone or '', verified=verified,
            )
            if role in APPROVAL_ROLES:
                StaffProfile.objects.create(user=user, **{k: staff.get(k) for k in STAFF_FIELDS})
            if role == User.ROLE_DOCTOR and user.verified:
                _doctor_from_user(user)
    except IntegrityError as exc:
        raise DuplicateEmail() from exc

    if role == User.ROLE_DOCTOR and not verified:
        logger.info('doctor signup pending approval email=%s', email)
    logger.info('user created email=%s role=%s verified=%s', email, role, verified)
    return user


def signup(**profile) -> User:
    """Public signup; the verification flag always follows the role policy."""
    profile.pop('verified', None)
    return create_user(**profile)


def authenticate_user(email: str, password: str) -> User:
    user = User.objects.filter(email=User.objects.normalize_email(email)).first()
    if user is None or not user.check_password(password):
        logger.info('login rejected email=%s reason=credentials', email)
        raise InvalidCredentials()
    if user.role in APPROVAL_ROLES and not user.verified:
        logger.info('login rejected email=%s reason=pending_approval', email)
        raise PendingApproval()
    logger.info('login ok email=%s role=%s', email, user.role)
    return user


# ---------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------
def list_users():
    return User.objects.select_related('staff_profile').order_by('id')


def get_user(email: str) -> User:
    return _get_or_404(email)


def users_by_role(role: str):
    return list_users().filter(role__iexact=role)


def pending_verification():
    return list_users().filter(verified=False, role__in=APPROVAL_ROLES)


# ---------------------------------------------------------------------
# Updates
# ---------------------------------------------------------------------
@transaction.atomic
def update_user(email: str, *, name: Optional[str] = None, role: Optional[str] = None,
                password: Optional[str] = None, phone: Optional[str] = None, **staff) -> User:
    """Partial update.  A role change keeps the doctor directory in step:
    leaving the Doctor role removes the directory entry, a verified user
    becoming a Doctor is listed the same way :func:`verify` lists them.
    """
    user = _get_or_404(email)
    previous_role = user.role
    if name is not None:
        user.name = name
    if role is not None:
        user.role = role
    if phone is not None:
        user.phone = phone
    if password:
        user.set_password(password)
    user.save()

    supplied = {k: v for k, v in staff.items() if k in STAFF_FIELDS}
    if supplied or (user.role in APPROVAL_ROLES and _staff_profile(user) is None):
        profile, _ = StaffProfile.objects.get_or_create(user=user)
        for field, value in supplied.items():
            setattr(profile, field, value)
        profile.save()
        user.staff_profile = profile

    if previous_role == User.ROLE_DOCTOR and user.role != User.ROLE_DOCTOR:
        deleted, _ = Doctor.objects.filter(email=user.email).delete()
        logger.info('doctor record removed email=%s reason=role-change removed=%s', email, bool(deleted))
    elif user.role == User.ROLE_DOCTOR and previous_role != User.ROLE_DOCTOR and user.verified:
        _add_to_directory(user)
    logger.info('user updated email=%s role=%s', email, user.role)
    return user


@transaction.atomic
def verify(email: str) -> User:
    """Approve an account; doctors are added to the directory."""
    user = _get_or_404(email)
    user.verified = True
    user.save(update_fields=['verified'])

    if user.role == User.ROLE_DOCTOR:
        _add_to_directory(user)
    logger.info('user verified email=%s role=%s', email, user.role)
    return user


# ---------------------------------------------------------------------
# Deletion
# ---------------------------------------------------------------------
def _match(queryset, id_field: str, name_field: str, user: User):
    matched = queryset.filter(**{id_field: user.email})
    if not matched.exists() and user.name:
        matched = queryset.filter(**{name_field: user.name})
    return matched


def _delete_records(user: User, id_field: str, name_field: str) -> dict:
    appointments = _match(Appointment.objects.all(), id_field, name_field, user)
    prescriptions = _match(Prescription.objects.all(), id_field, name_field, user)
    deleted_appointments = appointments.count()
    deleted_prescriptions = prescriptions.count()
    appointments.delete()
    # medicines cascade with their prescription
    prescriptions.delete()
    return {'appointments': deleted_appointments, 'prescriptions': deleted_prescriptions}


@transaction.atomic
def delete_user(email: str) -> dict:
    """Delete a user and every record that references them.

    Patients lose their appointments and prescriptions, doctors
    additionally lose their directory entry.  Records are matched on the
    user's e-mail and, when nothing matches, on the user's name.
    Pharmacists and administrators own no dependent records.
    """
    user = _get_or_404(email)
    summary = {'appointments': 0, 'prescriptions': 0, 'doctor': False}
    logger.info('deleting user email=%s role=%s', email, user.role)

    if user.role == User.ROLE_PATIENT:
        summary.update(_delete_records(user, 'patient_id', 'patient_name'))
    elif user.role == User.ROLE_DOCTOR:
        summary.update(_delete_records(user, 'doctor_id', 'doctor_name'))
        deleted, _ = Doctor.objects.filter(email=user.email).delete()
        summary['doctor'] = bool(deleted)

    user.delete()
    logger.info(
        'user deleted email=%s appointments=%s prescriptions=%s doctor=%s',
        email, summary['appointments'], summary['prescriptions'], summary['doctor'],
    )
    return summary
