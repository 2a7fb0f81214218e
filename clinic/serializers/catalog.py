from rest_framework import serializers

from clinic.serializers.common import SanitizedCharField, optional_text


class DoctorSerializer(serializers.Serializer):
    name = SanitizedCharField(max_length=255)
    email = serializers.EmailField(max_length=254)
    department = optional_text(max_length=255)
    specialization = optional_text(max_length=255)
    phone = optional_text(max_length=32)
    available = serializers.BooleanField(required=False, default=True)
    experienceYears = serializers.IntegerField(source='experience_years', min_value=0, max_value=80,
                                               required=False, default=0)
    qualification = optional_text(max_length=255)


class DepartmentSerializer(serializers.Serializer):
    name = SanitizedCharField(max_length=255)
    description = optional_text(max_length=500)
    head = optional_text(max_length=255)
    active = serializers.BooleanField(required=False, default=True)

    def validate_name(self, v):
        if not v:
            raise serializers.ValidationError('Department name is required')
        return v
