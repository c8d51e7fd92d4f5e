from rest_framework import serializers

from .models import Platform


class PlatformField(serializers.Field):
    """Platform by enum value or name in, integer value out."""

    default_error_messages = {"invalid": "Unknown platform {value!r}."}

    def to_internal_value(self, data):
        try:
            return Platform.parse(data)
        except (TypeError, ValueError):
            self.fail("invalid", value=data)

    def to_representation(self, value):
        return int(value)
