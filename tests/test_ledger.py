import threading
from io import StringIO
from unittest.mock import patch

import pytest
from django.core.management import CommandError, call_command
from django.db import connection

from vendetta.apps.accounts import registry
from vendetta.apps.accounts.models import Platform, SocialAccount
from vendetta.apps.reviews.models import Review
from vendetta.apps.reviews.services import ledger
from vendetta.apps.users.models import TelegramUser
from vendetta.errors import ValidationError

pytestmark = pytest.mark.django_db


def test_first_review_creates_account_and_applies_step(author):
    receipt = ledger.record_review(author, Platform.TELEGRAM, "fresh", "great", 1)

    account = SocialAccount.objects.get(handle="@fresh")
    assert receipt.account_created
    assert receipt.account_id == account.id
    assert receipt.rating == account.rating == 1025.0
    assert receipt.reviews_count == account.reviews_count == 1


def test_up_then_down_nets_to_zero_with_two_entries(author):
    ledger.record_review(author, Platform.TELEGRAM, "@pingpong", "up", 1)
    receipt = ledger.record_review(author, Platform.TELEGRAM, "pingpong", "down", -1)

    assert not receipt.account_created
    assert receipt.rating == 1000.0
    assert receipt.reviews_count == 2
    assert Review.objects.filter(account_id=receipt.account_id).count() == 2


def test_rating_is_not_clamped(author):
    for _ in range(41):
        receipt = ledger.record_review(author, Platform.OTHER, "scam", "", -1)

    assert receipt.rating == 1000.0 - 41 * 25
    assert receipt.rating < 0


@pytest.mark.parametrize("impact", [2, 0, -2, True, "1", None])
def test_invalid_impact_is_rejected_without_mutation(author, impact):
    SocialAccount.objects.create(platform=Platform.TELEGRAM, handle="@known")

    with pytest.raises(ValidationError):
        ledger.record_review(author, Platform.TELEGRAM, "@known", "text", impact)

    account = SocialAccount.objects.get(handle="@known")
    assert account.rating == 1000.0
    assert account.reviews_count == 0
    assert not Review.objects.exists()


def test_invalid_impact_on_unknown_handle_creates_nothing(author):
    with pytest.raises(ValidationError):
        ledger.record_review(author, Platform.TELEGRAM, "@nobody", "", 2)

    assert not SocialAccount.objects.exists()


def test_invalid_handle_is_rejected(author):
    with pytest.raises(ValidationError):
        ledger.record_review(author, Platform.TELEGRAM, "  ", "", 1)

    assert not SocialAccount.objects.exists()


def test_failed_append_rolls_back_account_creation(author):
    with patch.object(Review.objects, "create", side_effect=RuntimeError("disk full")):
        with pytest.raises(RuntimeError):
            ledger.record_review(author, Platform.TELEGRAM, "@half", "", 1)

    assert not SocialAccount.objects.filter(handle="@half").exists()


def test_creation_race_yields_one_account_and_two_reviews(author):
    ledger.record_review(author, Platform.TELEGRAM, "@newbie", "first", 1)

    # Second writer missed the row on lookup and hits the unique constraint
    with patch.object(registry, "find_by_handle", return_value=None):
        receipt = ledger.record_review(author, Platform.TELEGRAM, "newbie", "second", 1)

    assert not receipt.account_created
    assert SocialAccount.objects.filter(handle="@newbie").count() == 1
    account = SocialAccount.objects.get(handle="@newbie")
    assert account.reviews_count == 2
    assert account.rating == 1050.0
    assert Review.objects.filter(account=account).count() == 2


@pytest.mark.django_db(transaction=True)
def test_concurrent_first_reviews_share_one_account():
    author = TelegramUser.objects.create(telegram_id=515151, username="twin")
    start = threading.Barrier(2)
    receipts, errors = [], []

    def submit(handle):
        try:
            start.wait(timeout=10)
            receipts.append(ledger.record_review(author, Platform.TELEGRAM, handle, "", 1))
        except Exception as exc:
            errors.append(exc)
        finally:
            connection.close()

    threads = [threading.Thread(target=submit, args=(h,)) for h in ("@stampede", "stampede")]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=30)

    assert not errors
    assert sorted(r.account_created for r in receipts) == [False, True]
    account = SocialAccount.objects.get(handle="@stampede")
    assert SocialAccount.objects.count() == 1
    assert account.reviews_count == 2
    assert account.rating == 1050.0
    assert Review.objects.filter(account=account).count() == 2


def test_top_reviews_newest_first_and_limited(author):
    for n in range(12):
        receipt = ledger.record_review(author, Platform.TELEGRAM, "@busy", f"r{n}", 1)
    account = SocialAccount.objects.get(pk=receipt.account_id)

    reviews = ledger.top_reviews(account)

    assert len(reviews) == 10
    assert [r.text for r in reviews] == [f"r{n}" for n in range(11, 1, -1)]
    assert len(ledger.top_reviews(account, limit=3)) == 3


def test_top_reviews_reflects_new_writes(author):
    receipt = ledger.record_review(author, Platform.TELEGRAM, "@live", "one", 1)
    account = SocialAccount.objects.get(pk=receipt.account_id)
    assert [r.text for r in ledger.top_reviews(account)] == ["one"]

    ledger.record_review(author, Platform.TELEGRAM, "@live", "two", -1)
    assert [r.text for r in ledger.top_reviews(account)] == ["two", "one"]


def test_audit_detects_and_repairs_drift(author):
    receipt = ledger.record_review(author, Platform.TELEGRAM, "@drift", "", 1)
    SocialAccount.objects.filter(pk=receipt.account_id).update(rating=5.0, reviews_count=9)
    account = SocialAccount.objects.get(pk=receipt.account_id)

    audit = ledger.audit_account(account)
    assert not audit.consistent
    assert audit.expected_rating == 1025.0
    assert audit.expected_reviews_count == 1

    ledger.repair_account(audit)
    account.refresh_from_db()
    assert ledger.audit_account(account).consistent


def test_audit_of_untouched_account_is_consistent():
    account = SocialAccount.objects.create(platform=Platform.TELEGRAM, handle="@quiet")

    assert ledger.audit_account(account).consistent


def test_verify_ledger_command(author):
    receipt = ledger.record_review(author, Platform.TELEGRAM, "@cmd", "", -1)

    out = StringIO()
    call_command("verify_ledger", stdout=out)
    assert "All 1 accounts match the ledger." in out.getvalue()

    SocialAccount.objects.filter(pk=receipt.account_id).update(reviews_count=3)
    with pytest.raises(CommandError):
        call_command("verify_ledger", stdout=StringIO())

    call_command("verify_ledger", "--fix", stdout=StringIO())
    account = SocialAccount.objects.get(pk=receipt.account_id)
    assert account.reviews_count == 1
    assert account.rating == 975.0
