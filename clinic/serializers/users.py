from django.contrib.auth.password_validation import validate_password as run_password_validators
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from clinic.models import User
from clinic.serializers.auth import SignupSerializer, StaffFieldsSerializer
from clinic.serializers.common import SanitizedCharField


class UserCreateSerializer(SignupSerializer):
    """Administrator account creation; may set ``verified`` explicitly."""
    verified = serializers.BooleanField(required=False, allow_null=True, default=None)


class UserUpdateSerializer(StaffFieldsSerializer):
    name = SanitizedCharField(max_length=255, required=False)
    role = serializers.ChoiceField(choices=[c[0] for c in User.ROLE_CHOICES], required=False)
    password = serializers.CharField(write_only=True, required=False, allow_blank=True, trim_whitespace=False)
    phone = SanitizedCharField(max_length=32, required=False, allow_blank=True)

    def validate_password(self, v):
        if v:
            try:
                run_password_validators(v)
            except DjangoValidationError as exc:
                raise serializers.ValidationError(list(exc.messages))
        return v
