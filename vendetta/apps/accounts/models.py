# vendetta/accounts/models.py
from django.db import models

INITIAL_RATING = 1000.0
MAX_HANDLE_LENGTH = 128
MAX_EXTERNAL_ID_LENGTH = 128


class Platform(models.IntegerChoices):
    TELEGRAM = 0, "Telegram"
    INSTAGRAM = 1, "Instagram"
    TIKTOK = 2, "TikTok"
    YOUTUBE = 3, "YouTube"
    OTHER = 99, "Other"

    @classmethod
    def parse(cls, value):
        """Accept an enum value (int or digit string) or a label/name, any case."""
        if isinstance(value, bool):
            raise ValueError(f"Unknown platform: {value!r}")
        if isinstance(value, int):
            return cls(value)
        text = str(value).strip()
        if text.lstrip("-").isdigit():
            return cls(int(text))
        wanted = text.lower()
        for member in cls:
            if wanted in (member.label.lower(), member.name.lower()):
                return member
        raise ValueError(f"Unknown platform: {value!r}")


class SocialAccount(models.Model):
    """Reputation subject: one handle on one platform."""

    platform = models.SmallIntegerField(choices=Platform.choices, db_index=True)
    handle = models.CharField(max_length=MAX_HANDLE_LENGTH)  # stored with leading @
    external_id = models.CharField(max_length=MAX_EXTERNAL_ID_LENGTH, null=True, blank=True)
    rating = models.FloatField(default=INITIAL_RATING)
    reviews_count = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["platform", "handle"], name="uniq_account_platform_handle"
            )
        ]

    def __str__(self):
        return f"{self.get_platform_display()} {self.handle}"
