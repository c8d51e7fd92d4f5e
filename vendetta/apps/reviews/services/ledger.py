"""
Rating ledger.

Every review is an immutable row; the owning account's ``rating`` and
``reviews_count`` are running totals over those rows:

    rating        = INITIAL_RATING + STEP * sum(impact)
    reviews_count = count(reviews)

``record_review`` keeps both in step inside one transaction. ``audit_account``
recomputes them from the rows so drift can be detected and repaired.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from django.db import transaction
from django.db.models import Count, F, Sum

from vendetta.apps.accounts import registry
from vendetta.apps.accounts.models import INITIAL_RATING, Platform, SocialAccount
from vendetta.apps.reviews.models import Review
from vendetta.apps.users.models import TelegramUser
from vendetta.errors import ValidationError

logger = logging.getLogger(__name__)

STEP = 25.0
TOP_REVIEWS_LIMIT = 10
VALID_IMPACTS = (1, -1)


@dataclass(frozen=True)
class ReviewReceipt:
    account_id: int
    review_id: int
    rating: float
    reviews_count: int
    account_created: bool = False


@dataclass(frozen=True)
class LedgerAudit:
    account_id: int
    rating: float
    reviews_count: int
    expected_rating: float
    expected_reviews_count: int

    @property
    def consistent(self) -> bool:
        return (
            self.rating == self.expected_rating
            and self.reviews_count == self.expected_reviews_count
        )


def validate_impact(impact) -> int:
    if isinstance(impact, bool) or impact not in VALID_IMPACTS:
        raise ValidationError("Impact must be +1 or -1")
    return int(impact)


def record_review(
    author: TelegramUser,
    platform: Platform,
    handle: str,
    text: str,
    impact: int,
    external_id: Optional[str] = None,
) -> ReviewReceipt:
    """
    Append a review and move the account's rating by STEP * impact.

    The account lookup-or-create, the review insert and the counter update
    commit together or not at all. Input is validated before any write.
    """
    impact = validate_impact(impact)
    handle = registry.normalize_handle(handle)

    with transaction.atomic():
        account, created = registry.get_or_create(platform, handle, external_id)
        # serialize appenders on the same account
        account = SocialAccount.objects.select_for_update().get(pk=account.pk)

        review = Review.objects.create(
            author=author, account=account, text=text or "", impact=impact
        )
        SocialAccount.objects.filter(pk=account.pk).update(
            rating=F("rating") + STEP * impact,
            reviews_count=F("reviews_count") + 1,
        )
        account.refresh_from_db(fields=["rating", "reviews_count"])

    logger.info(
        f"[Ledger] Review #{review.id} by user #{author.id} on account #{account.id} "
        f"({impact:+d}) -> rating {account.rating}, {account.reviews_count} reviews"
    )
    return ReviewReceipt(
        account_id=account.id,
        review_id=review.id,
        rating=account.rating,
        reviews_count=account.reviews_count,
        account_created=created,
    )


def top_reviews(account: SocialAccount, limit: int = TOP_REVIEWS_LIMIT) -> List[Review]:
    """Newest reviews first. Re-queried on every call."""
    return list(
        Review.objects.filter(account=account).order_by("-created_at", "-id")[:limit]
    )


def audit_account(account: SocialAccount) -> LedgerAudit:
    totals = Review.objects.filter(account=account).aggregate(
        impact_sum=Sum("impact"), count=Count("id")
    )
    impact_sum = totals["impact_sum"] or 0
    return LedgerAudit(
        account_id=account.id,
        rating=account.rating,
        reviews_count=account.reviews_count,
        expected_rating=INITIAL_RATING + STEP * impact_sum,
        expected_reviews_count=totals["count"],
    )


def repair_account(audit: LedgerAudit) -> None:
    """Overwrite the running totals with the values recomputed from the ledger."""
    SocialAccount.objects.filter(pk=audit.account_id).update(
        rating=audit.expected_rating, reviews_count=audit.expected_reviews_count
    )
    logger.warning(
        f"[Ledger] Repaired account #{audit.account_id}: "
        f"rating {audit.rating} -> {audit.expected_rating}, "
        f"reviews {audit.reviews_count} -> {audit.expected_reviews_count}"
    )
