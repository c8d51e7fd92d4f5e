from rest_framework import serializers

from vendetta.apps.users.models import MAX_NAME_LENGTH, MAX_USERNAME_LENGTH, TelegramUser

# Raw widget callback names -> the camelCase names the frontend posts
WIDGET_ALIASES = {
    "first_name": "firstName",
    "last_name": "lastName",
    "photo_url": "photoUrl",
    "auth_date": "authDate",
}


class TelegramLoginSerializer(serializers.Serializer):
    """
    Login assertion. ``validated_data`` is keyed by the widget's wire names
    (first_name, auth_date, ...) because those names are part of the signed
    data-check string. Values are kept verbatim for the same reason.
    """

    id = serializers.IntegerField()
    username = serializers.CharField(
        default="", allow_blank=True, trim_whitespace=False, max_length=MAX_USERNAME_LENGTH
    )
    firstName = serializers.CharField(
        source="first_name", default="", allow_blank=True, trim_whitespace=False,
        max_length=MAX_NAME_LENGTH,
    )
    lastName = serializers.CharField(
        source="last_name", default="", allow_blank=True, trim_whitespace=False,
        max_length=MAX_NAME_LENGTH,
    )
    photoUrl = serializers.CharField(
        source="photo_url", default="", allow_blank=True, trim_whitespace=False
    )
    authDate = serializers.IntegerField(source="auth_date")
    hash = serializers.CharField()

    def to_internal_value(self, data):
        data = dict(data)
        for wire_name, field_name in WIDGET_ALIASES.items():
            if wire_name in data and field_name not in data:
                data[field_name] = data.pop(wire_name)
        return super().to_internal_value(data)


class TelegramUserSerializer(serializers.ModelSerializer):
    displayName = serializers.CharField(source="display_name")

    class Meta:
        model = TelegramUser
        fields = ["id", "username", "displayName"]
