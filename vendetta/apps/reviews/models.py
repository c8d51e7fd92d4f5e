# vendetta/reviews/models.py
from django.db import models
from vendetta.apps.accounts.models import SocialAccount
from vendetta.apps.users.models import TelegramUser


class Review(models.Model):
    """Append-only ledger entry; never edited or deleted once written."""

    IMPACT_CHOICES = [(1, "+1"), (-1, "-1")]

    author = models.ForeignKey(
        TelegramUser, on_delete=models.PROTECT, related_name="reviews"
    )
    account = models.ForeignKey(
        SocialAccount, on_delete=models.CASCADE, related_name="reviews"
    )
    text = models.TextField(blank=True, default="")
    impact = models.SmallIntegerField(choices=IMPACT_CHOICES)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(
                fields=["account", "created_at"], name="review_account_created_idx"
            )
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(impact__in=[1, -1]), name="review_impact_unit"
            )
        ]
