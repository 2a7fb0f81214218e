from django.contrib.auth.password_validation import validate_password as run_password_validators
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from clinic.models import User
from clinic.serializers.common import SanitizedCharField, optional_text


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False)

    def validate_email(self, v):
        v = (v or '').strip()
        if not v:
            raise serializers.ValidationError('Email is required')
        return v

    def validate_password(self, v):
        if not v:
            raise serializers.ValidationError('Password is required')
        return v


class StaffFieldsSerializer(serializers.Serializer):
    """Professional fields stored for doctor and pharmacist accounts."""
    specialization = SanitizedCharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    department = SanitizedCharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    qualification = SanitizedCharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    licenseNumber = SanitizedCharField(source='license_number', max_length=100, required=False,
                                       allow_blank=True, allow_null=True)
    experienceYears = serializers.IntegerField(source='experience_years', min_value=0, max_value=80,
                                               required=False, allow_null=True)


class SignupSerializer(StaffFieldsSerializer):
    name = SanitizedCharField(max_length=255)
    email = serializers.EmailField(max_length=254)
    password = serializers.CharField(write_only=True, trim_whitespace=False)
    role = serializers.ChoiceField(choices=[c[0] for c in User.ROLE_CHOICES])
    phone = optional_text(max_length=32)

    def validate_name(self, v):
        if len(v) < 2:
            raise serializers.ValidationError('Name must be at least 2 characters')
        return v

    def validate_email(self, v):
        return User.objects.normalize_email(v.strip())

    def validate(self, attrs):
        probe = User(email=attrs.get('email'), name=attrs.get('name', ''))
        try:
            run_password_validators(attrs.get('password'), user=probe)
        except DjangoValidationError as exc:
            raise serializers.ValidationError({'password': list(exc.messages)})
        return attrs
