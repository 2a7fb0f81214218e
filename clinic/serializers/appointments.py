from rest_framework import serializers

from clinic.models import Appointment
from clinic.serializers.common import SanitizedCharField, optional_text

STATUS_CHOICES = [c[0] for c in Appointment.STATUS_CHOICES]


class AppointmentSerializer(serializers.Serializer):
    patientId = optional_text(source='patient_id', max_length=255)
    doctorId = optional_text(source='doctor_id', max_length=255)
    patientName = optional_text(source='patient_name', max_length=255)
    doctorName = optional_text(source='doctor_name', max_length=255)
    age = serializers.IntegerField(min_value=0, max_value=150, required=False, default=0)
    gender = optional_text(max_length=20)
    contactNumber = optional_text(source='contact_number', max_length=32)
    department = optional_text(max_length=255)
    appointmentDate = serializers.DateField(source='appointment_date', required=False, allow_null=True)
    appointmentTime = serializers.TimeField(source='appointment_time', required=False, allow_null=True)
    status = serializers.ChoiceField(choices=STATUS_CHOICES, required=False, allow_null=True)
    reason = optional_text(max_length=500)
    issueDays = serializers.IntegerField(source='issue_days', min_value=0, required=False, default=0)
    prescriptionGiven = serializers.BooleanField(source='prescription_given', required=False, default=False)
    followUpRequired = serializers.BooleanField(source='follow_up_required', required=False, default=False)
    followUpDate = serializers.DateField(source='follow_up_date', required=False, allow_null=True)
    cancellationReason = SanitizedCharField(source='cancellation_reason', max_length=500, required=False,
                                            allow_blank=True, allow_null=True)


class AppointmentStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=STATUS_CHOICES)
    cancellationReason = SanitizedCharField(max_length=500, required=False, allow_blank=True, allow_null=True)
