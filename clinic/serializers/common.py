import bleach
from rest_framework import serializers


class SanitizedCharField(serializers.CharField):
    """CharField that strips markup from free text before it is stored."""

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        return bleach.clean(value, tags=set(), strip=True).strip()


def optional_text(max_length=None, **kwargs):
    kwargs.setdefault('required', False)
    kwargs.setdefault('allow_blank', True)
    kwargs.setdefault('default', '')
    return SanitizedCharField(max_length=max_length, **kwargs)
