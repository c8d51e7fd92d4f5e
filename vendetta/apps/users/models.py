# vendetta/users/models.py
from django.db import models

MAX_USERNAME_LENGTH = 64
MAX_NAME_LENGTH = 128


class TelegramUser(models.Model):
    """A person who logged in through the Telegram Login Widget."""

    telegram_id = models.BigIntegerField(unique=True, db_index=True)
    username = models.CharField(max_length=MAX_USERNAME_LENGTH, blank=True, default="", db_index=True)
    first_name = models.CharField(max_length=MAX_NAME_LENGTH, blank=True, default="")
    last_name = models.CharField(max_length=MAX_NAME_LENGTH, blank=True, default="")
    display_name = models.CharField(max_length=257, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.username or self.display_name or str(self.telegram_id)

    @staticmethod
    def compose_display_name(first_name: str, last_name: str) -> str:
        return f"{first_name or ''} {last_name or ''}".strip()
