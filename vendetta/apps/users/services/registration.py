"""
Maps a verified Telegram login onto a local ``TelegramUser`` row.
"""
import logging
from typing import Tuple

from vendetta.apps.users.models import TelegramUser

logger = logging.getLogger(__name__)


def register_login(
    telegram_id: int,
    username: str = "",
    first_name: str = "",
    last_name: str = "",
) -> Tuple[TelegramUser, bool]:
    """
    Look up the user by Telegram id, creating it on first login.
    Returns (user, created). The internal id never changes once assigned;
    profile fields are refreshed when Telegram reports new values.
    """
    username = (username or "").lstrip("@")
    display_name = TelegramUser.compose_display_name(first_name, last_name)

    user, created = TelegramUser.objects.get_or_create(
        telegram_id=telegram_id,
        defaults={
            "username": username,
            "first_name": first_name or "",
            "last_name": last_name or "",
            "display_name": display_name,
        },
    )
    if created:
        logger.info(f"[Users] Registered telegram user {telegram_id} as #{user.id}")
        return user, True

    changed = []
    for field, value in (
        ("username", username),
        ("first_name", first_name or ""),
        ("last_name", last_name or ""),
        ("display_name", display_name),
    ):
        if getattr(user, field) != value:
            setattr(user, field, value)
            changed.append(field)
    if changed:
        user.save(update_fields=changed)
        logger.info(f"[Users] Refreshed {', '.join(changed)} for user #{user.id}")
    return user, False
