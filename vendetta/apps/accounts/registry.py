"""
Account registry: (platform, handle) -> SocialAccount.

Handles are stored with a leading "@". Matching is exact and case-sensitive
on the normalized form.
"""
import logging
from typing import Optional, Tuple

from django.db import IntegrityError, transaction

from vendetta.apps.accounts.models import (
    INITIAL_RATING,
    MAX_HANDLE_LENGTH,
    Platform,
    SocialAccount,
)
from vendetta.errors import ValidationError

logger = logging.getLogger(__name__)


def normalize_handle(raw: Optional[str]) -> str:
    handle = (raw or "").strip()
    if not handle.startswith("@"):
        handle = "@" + handle
    if handle == "@":
        raise ValidationError("Handle must not be empty")
    if len(handle) > MAX_HANDLE_LENGTH:
        raise ValidationError(
            f"Handle must be at most {MAX_HANDLE_LENGTH} characters long"
        )
    return handle


def find_by_handle(platform: Platform, handle: str) -> Optional[SocialAccount]:
    return SocialAccount.objects.filter(
        platform=platform, handle=normalize_handle(handle)
    ).first()


def get_or_create(
    platform: Platform, handle: str, external_id: Optional[str] = None
) -> Tuple[SocialAccount, bool]:
    """
    Resolve the account for a review, creating it on a miss.

    Creation runs in a savepoint. If a concurrent writer inserted the same
    (platform, handle) first, the unique constraint fires and the row that
    won is fetched instead. Returns (account, created).
    """
    handle = normalize_handle(handle)
    account = find_by_handle(platform, handle)
    if account is not None:
        return account, False

    try:
        with transaction.atomic():
            account = SocialAccount.objects.create(
                platform=platform,
                handle=handle,
                external_id=external_id or None,
                rating=INITIAL_RATING,
                reviews_count=0,
            )
    except IntegrityError:
        logger.info(
            f"[Registry] Lost creation race for {Platform(platform).label} {handle}; re-fetching"
        )
        return SocialAccount.objects.get(platform=platform, handle=handle), False

    logger.info(
        f"[Registry] Created account #{account.id} for {Platform(platform).label} {handle}"
    )
    return account, True
