"""
Django admin registrations for the clinic models.

This module hooks the clinic models into Django's built-in admin
interface so that superusers can inspect and manage data via the
``/admin/`` URL.
"""

from django.contrib import admin

from .models import (
    Appointment,
    AuditEvent,
    Department,
    Doctor,
    Medicine,
    Prescription,
    StaffProfile,
    User,
)


class StaffProfileInline(admin.StackedInline):
    model = StaffProfile
    can_delete = False
    extra = 0


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ('email', 'name', 'role', 'verified', 'is_staff', 'is_superuser')
    list_filter = ('role', 'verified')
    search_fields = ('email', 'name')
    ordering = ('email',)
    inlines = [StaffProfileInline]


@admin.register(Department)
class DepartmentAdmin(admin.ModelAdmin):
    list_display = ('name', 'head', 'active')
    list_filter = ('active',)
    search_fields = ('name', 'head')


@admin.register(Doctor)
class DoctorAdmin(admin.ModelAdmin):
    list_display = ('name', 'email', 'department', 'specialization', 'available')
    list_filter = ('department', 'available')
    search_fields = ('name', 'email', 'specialization')


@admin.register(Appointment)
class AppointmentAdmin(admin.ModelAdmin):
    list_display = ('patient_name', 'doctor_name', 'appointment_date', 'appointment_time', 'status')
    list_filter = ('status', 'department')
    search_fields = ('patient_id', 'patient_name', 'doctor_id', 'doctor_name')


class MedicineInline(admin.TabularInline):
    model = Medicine
    extra = 0


@admin.register(Prescription)
class PrescriptionAdmin(admin.ModelAdmin):
    list_display = ('patient_name', 'doctor_name', 'created_date', 'edited', 'dispensed_status')
    list_filter = ('dispensed_status', 'edited')
    search_fields = ('patient_id', 'patient_name', 'doctor_id', 'doctor_name', 'diagnosis')
    inlines = [MedicineInline]


@admin.register(AuditEvent)
class AuditEventAdmin(admin.ModelAdmin):
    list_display = ('created_at', 'action', 'object_type', 'object_id', 'user')
    list_filter = ('action',)
    search_fields = ('object_id', 'user__email')
