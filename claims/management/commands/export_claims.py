from django.core.management.base import BaseCommand, CommandError

from core.store import get_repository
from claims.models import ClaimStatus
from claims.services import filter_claims, write_claims_csv


class Command(BaseCommand):
    help = "Export insurance claims as CSV (optionally filtered by search text and status)."

    def add_arguments(self, parser):
        parser.add_argument("--output", "-o", help="CSV path (default: stdout)")
        parser.add_argument("--q", default="", help="Search patient, claim id or insurer")
        parser.add_argument("--status", default="all",
                            choices=["all"] + list(ClaimStatus.values))

    def handle(self, *args, **opts):
        claims = filter_claims(get_repository("claims").all(), q=opts["q"], status=opts["status"])

        path = opts.get("output")
        if not path:
            write_claims_csv(self.stdout, claims)
            return

        try:
            with open(path, "w", newline="", encoding="utf-8") as f:
                count = write_claims_csv(f, claims)
        except OSError as exc:
            raise CommandError(f"Cannot write {path}: {exc}") from exc
        self.stdout.write(self.style.SUCCESS(f"Exported {count} claims to {path}"))
