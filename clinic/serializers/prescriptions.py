from rest_framework import serializers

from clinic.serializers.common import SanitizedCharField, optional_text


class MedicineSerializer(serializers.Serializer):
    medicineName = SanitizedCharField(source='medicine_name', max_length=255)
    dosage = optional_text(max_length=100)
    frequency = optional_text(max_length=100)
    duration = optional_text(max_length=100)
    instructions = optional_text(max_length=500)
    quantity = optional_text(max_length=50)


class PrescriptionSerializer(serializers.Serializer):
    patientId = optional_text(source='patient_id', max_length=255)
    doctorId = optional_text(source='doctor_id', max_length=255)
    patientName = optional_text(source='patient_name', max_length=255)
    doctorName = optional_text(source='doctor_name', max_length=255)
    gender = optional_text(max_length=20)
    age = serializers.IntegerField(min_value=0, max_value=150, required=False, default=0)
    diagnosis = optional_text()
    symptoms = optional_text()
    additionalNotes = optional_text(source='additional_notes')
    followUpDate = serializers.DateField(source='follow_up_date', required=False, allow_null=True, default=None)
    medicines = MedicineSerializer(many=True, required=False)


class DispenseSerializer(serializers.Serializer):
    pharmacistName = SanitizedCharField(max_length=255, required=False, allow_blank=True)
