import json

from vendetta.errors import ValidationError

JSON_CONTENT_TYPE = "application/json"


def read_json(request) -> dict:
    """Decode a JSON object body; anything else is a 400."""
    # Callers are CSRF-exempt; form-encodable types never reach the parser
    if request.content_type != JSON_CONTENT_TYPE:
        raise ValidationError(f"Content-Type must be {JSON_CONTENT_TYPE}")
    if not request.body:
        return {}
    try:
        data = json.loads(request.body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        raise ValidationError("Request body is not valid JSON")
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def validate_payload(serializer_class, data, **kwargs) -> dict:
    """Run a DRF serializer and surface its first error as a ValidationError."""
    serializer = serializer_class(data=data, **kwargs)
    if not serializer.is_valid():
        field, messages = next(iter(serializer.errors.items()))
        detail = messages[0] if isinstance(messages, list) else messages
        raise ValidationError(f"{field}: {detail}")
    return serializer.validated_data
