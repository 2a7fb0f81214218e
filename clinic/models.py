"""
Database models for the hospital backend.

These models capture the core concepts of the system: users and their
roles, the doctor directory, departments, appointments and
prescriptions with their medicine line items.  Field names mirror the
JSON exposed to the front-end (converted to camelCase by the views) to
keep the mapping between the two straightforward.
"""
from __future__ import annotations

import uuid

from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models


class UserManager(BaseUserManager):
    """Manager for the e-mail based :class:`User` model."""

    use_in_migrations = True

    def _create_user(self, email, password, **extra_fields):
        if not email:
            raise ValueError('An email address is required')
        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', False)
        extra_fields.setdefault('is_superuser', False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('role', User.ROLE_ADMIN)
        extra_fields.setdefault('verified', True)
        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True.')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True.')
        return self._create_user(email, password, **extra_fields)


class User(AbstractUser):
    """Custom user model identified by e-mail with a role and verification flag.

    Patients and administrators are verified on signup.  Doctors and
    pharmacists must be approved by an administrator before they may log
    in; their professional details live on :class:`StaffProfile`.
    """
    ROLE_PATIENT = 'Patient'
    ROLE_DOCTOR = 'Doctor'
    ROLE_PHARMACIST = 'Pharmacist'
    ROLE_ADMIN = 'Admin'
    ROLE_CHOICES = [
        (ROLE_PATIENT, 'Patient'),
        (ROLE_DOCTOR, 'Doctor'),
        (ROLE_PHARMACIST, 'Pharmacist'),
        (ROLE_ADMIN, 'Administrator'),
    ]

    username = None
    first_name = None
    last_name = None
    email = models.EmailField(unique=True)
    name = models.CharField(max_length=255)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_PATIENT, db_index=True)
    verified = models.BooleanField(default=False)
    phone = models.CharField(max_length=32, blank=True)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS: list[str] = []

    objects = UserManager()

    def get_full_name(self) -> str:
        return self.name

    def get_short_name(self) -> str:
        return self.name

    def __str__(self) -> str:
        return f"{self.email} ({self.role})"


class StaffProfile(models.Model):
    """Professional details for doctor and pharmacist accounts.

    Kept apart from :class:`User` so that patients and administrators do
    not carry a set of always-empty columns.
    """
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='staff_profile')
    specialization = models.CharField(max_length=255, blank=True, null=True)
    department = models.CharField(max_length=255, blank=True, null=True)
    qualification = models.CharField(max_length=255, blank=True, null=True)
    license_number = models.CharField(max_length=100, blank=True, null=True)
    experience_years = models.PositiveIntegerField(blank=True, null=True)

    def __str__(self) -> str:
        return f"{self.user.email} ({self.specialization or '-'})"


class Department(models.Model):
    """A hospital department such as Cardiology or Neurology."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, unique=True)
    description = models.CharField(max_length=500, blank=True)
    head = models.CharField(max_length=255, blank=True)
    active = models.BooleanField(default=True, db_index=True)

    class Meta:
        ordering = ['name']

    def __str__(self) -> str:
        return self.name


class Doctor(models.Model):
    """Public doctor directory entry.

    Entries are either seeded reference data, created by administrators,
    or created automatically when a doctor account is verified.  The
    ``email`` links an entry back to its owning :class:`User`.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    email = models.EmailField(unique=True)
    department = models.CharField(max_length=255, blank=True, db_index=True)
    specialization = models.CharField(max_length=255, blank=True, db_index=True)
    phone = models.CharField(max_length=32, blank=True)
    available = models.BooleanField(default=True, db_index=True)
    experience_years = models.PositiveIntegerField(default=0)
    qualification = models.CharField(max_length=255, blank=True)

    class Meta:
        ordering = ['name']

    def __str__(self) -> str:
        return f"{self.name} ({self.department})"


class Appointment(models.Model):
    """A patient's booking with a doctor.

    ``patient_id`` and ``doctor_id`` hold the e-mail of the respective
    users; names are denormalised so that a listing does not need a join.
    """
    STATUS_SCHEDULED = 'Scheduled'
    STATUS_COMPLETED = 'Completed'
    STATUS_CANCELLED = 'Cancelled'
    STATUS_CHOICES = [
        (STATUS_SCHEDULED, 'Scheduled'),
        (STATUS_COMPLETED, 'Completed'),
        (STATUS_CANCELLED, 'Cancelled'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    patient_id = models.CharField(max_length=255, blank=True, db_index=True)
    doctor_id = models.CharField(max_length=255, blank=True, db_index=True)
    patient_name = models.CharField(max_length=255, blank=True)
    doctor_name = models.CharField(max_length=255, blank=True)
    age = models.PositiveIntegerField(default=0)
    gender = models.CharField(max_length=20, blank=True)
    contact_number = models.CharField(max_length=32, blank=True)
    department = models.CharField(max_length=255, blank=True)
    appointment_date = models.DateField(null=True, blank=True)
    appointment_time = models.TimeField(null=True, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_SCHEDULED, db_index=True)
    reason = models.CharField(max_length=500, blank=True)
    issue_days = models.PositiveIntegerField(default=0)
    prescription_given = models.BooleanField(default=False)
    follow_up_required = models.BooleanField(default=False)
    follow_up_date = models.DateField(null=True, blank=True)
    cancellation_reason = models.CharField(max_length=500, blank=True, null=True)

    class Meta:
        ordering = ['appointment_date', 'appointment_time']
        indexes = [
            models.Index(fields=['doctor_id', 'appointment_date'], name='appt_doctor_date_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.patient_name} with {self.doctor_name} on {self.appointment_date}"


class Prescription(models.Model):
    """A prescription written by a doctor and later dispensed by a pharmacist."""
    DISPENSE_PENDING = 'Pending'
    DISPENSE_DONE = 'Dispensed'
    DISPENSE_CHOICES = [
        (DISPENSE_PENDING, 'Pending'),
        (DISPENSE_DONE, 'Dispensed'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    patient_id = models.CharField(max_length=255, blank=True, db_index=True)
    doctor_id = models.CharField(max_length=255, blank=True, db_index=True)
    patient_name = models.CharField(max_length=255, blank=True, db_index=True)
    doctor_name = models.CharField(max_length=255, blank=True)
    gender = models.CharField(max_length=20, blank=True)
    age = models.PositiveIntegerField(default=0)
    diagnosis = models.TextField(blank=True)
    symptoms = models.TextField(blank=True)
    additional_notes = models.TextField(blank=True)
    follow_up_date = models.DateField(null=True, blank=True)
    created_date = models.DateTimeField(null=True, blank=True)
    edited = models.BooleanField(default=False)
    last_edited_date = models.DateTimeField(null=True, blank=True)
    dispensed_status = models.CharField(
        max_length=20, choices=DISPENSE_CHOICES, default=DISPENSE_PENDING, db_index=True
    )
    dispensed_date = models.DateTimeField(null=True, blank=True)
    dispensed_by = models.CharField(max_length=255, blank=True, null=True)

    class Meta:
        ordering = ['-created_date']

    def __str__(self) -> str:
        return f"Prescription for {self.patient_name} by {self.doctor_name}"


class Medicine(models.Model):
    """A single line item of a :class:`Prescription`."""
    prescription = models.ForeignKey(Prescription, on_delete=models.CASCADE, related_name='medicines')
    position = models.PositiveIntegerField(default=0)
    medicine_name = models.CharField(max_length=255)
    dosage = models.CharField(max_length=100, blank=True)
    frequency = models.CharField(max_length=100, blank=True)
    duration = models.CharField(max_length=100, blank=True)
    instructions = models.CharField(max_length=500, blank=True)
    quantity = models.CharField(max_length=50, blank=True)

    class Meta:
        ordering = ['position', 'id']

    def __str__(self) -> str:
        return f"{self.medicine_name} {self.dosage}".strip()


class AuditEvent(models.Model):
    """Security relevant events such as logins, approvals and deletions."""
    user = models.ForeignKey(User, on_delete=models.SET_NULL, null=True, blank=True)
    action = models.CharField(max_length=64)
    object_type = models.CharField(max_length=64, blank=True, null=True)
    object_id = models.CharField(max_length=255, blank=True, null=True)
    detail = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=['action', 'created_at'], name='audit_action_created_idx'),
            models.Index(fields=['object_type', 'object_id', 'created_at'], name='audit_object_created_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.action}:{self.object_type}:{self.object_id}"
