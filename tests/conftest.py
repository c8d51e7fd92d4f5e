from __future__ import annotations

import hashlib
import hmac
import json

import pytest
from django.conf import settings

from vendetta.apps.users.models import TelegramUser

CAMEL_CASE = {
    "first_name": "firstName",
    "last_name": "lastName",
    "photo_url": "photoUrl",
    "auth_date": "authDate",
}


def sign_widget_fields(fields: dict, bot_token: str) -> str:
    """Reference signer written straight from the Telegram widget docs."""
    lines = [f"{key}={value}" for key, value in fields.items() if value not in (None, "")]
    check_string = "\n".join(sorted(lines))
    secret = hashlib.sha256(bot_token.encode()).digest()
    return hmac.new(secret, check_string.encode(), hashlib.sha256).hexdigest()


def to_frontend_payload(fields: dict) -> dict:
    return {CAMEL_CASE.get(key, key): value for key, value in fields.items()}


@pytest.fixture
def widget_fields():
    """Factory for signed Login Widget fields (snake_case wire names)."""

    def _make(
        telegram_id: int = 777000,
        username: str = "alice",
        first_name: str = "Alice",
        last_name: str = "Liddell",
        auth_date: int = 1_700_000_000,
        bot_token: str | None = None,
    ) -> dict:
        fields = {
            "id": telegram_id,
            "username": username,
            "first_name": first_name,
            "last_name": last_name,
            "auth_date": auth_date,
        }
        fields["hash"] = sign_widget_fields(fields, bot_token or settings.TELEGRAM_BOT_TOKEN)
        return fields

    return _make


@pytest.fixture
def post_json(client):
    def _post(url: str, payload):
        return client.post(url, data=json.dumps(payload), content_type="application/json")

    return _post


@pytest.fixture
def login(post_json, widget_fields):
    def _login(**kwargs):
        response = post_json("/auth/telegram", to_frontend_payload(widget_fields(**kwargs)))
        assert response.status_code == 200, response.content
        return response

    return _login


@pytest.fixture
def author(db) -> TelegramUser:
    return TelegramUser.objects.create(
        telegram_id=424242, username="critic", display_name="Critic"
    )
