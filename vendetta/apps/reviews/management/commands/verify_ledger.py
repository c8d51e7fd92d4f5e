from django.core.management.base import BaseCommand, CommandError

from vendetta.apps.accounts.models import SocialAccount
from vendetta.apps.reviews.services.ledger import audit_account, repair_account


class Command(BaseCommand):
    help = "Check every account's rating and review count against its review ledger."

    def add_arguments(self, parser):
        parser.add_argument(
            "--fix",
            action="store_true",
            help="Rewrite drifted totals with the values recomputed from reviews.",
        )

    def handle(self, *args, **options):
        drifted = 0
        checked = 0
        for account in SocialAccount.objects.order_by("id"):
            checked += 1
            audit = audit_account(account)
            if audit.consistent:
                continue

            drifted += 1
            self.stdout.write(
                self.style.WARNING(
                    f"{account}: rating {audit.rating} (expected {audit.expected_rating}), "
                    f"reviews {audit.reviews_count} (expected {audit.expected_reviews_count})"
                )
            )
            if options["fix"]:
                repair_account(audit)

        if drifted and not options["fix"]:
            raise CommandError(f"{drifted} of {checked} accounts drifted from the ledger.")

        if drifted:
            self.stdout.write(self.style.SUCCESS(f"Repaired {drifted} of {checked} accounts."))
        else:
            self.stdout.write(self.style.SUCCESS(f"All {checked} accounts match the ledger."))
