import csv
from dataclasses import dataclass
from decimal import Decimal

import structlog
from django.utils import timezone

from core.filters import matches_choice, matches_search
from core.store import get_repository

from .models import ZERO, ClaimStatus, InsuranceClaim

logger = structlog.get_logger(__name__)


@dataclass
class ClaimSummary:
    total: int
    approved: int
    pending: int
    denied: int
    processing: int
    total_claimed: Decimal
    total_approved: Decimal

    @property
    def approval_rate(self):
        decided = self.approved + self.denied
        return round(self.approved / decided * 100, 1) if decided else 0.0


# ---------- queries ----------
def filter_claims(claims, q="", status=""):
    """Search patient / claim id / insurer, AND an optional status."""
    return [
        c for c in claims
        if matches_search(q, c.patient_name, c.id, c.insurance_provider)
        and matches_choice(status, c.status)
    ]


def claim_summary(claims):
    counts = {s: 0 for s in ClaimStatus.values}
    for c in claims:
        counts[c.status] += 1
    return ClaimSummary(
        total=len(claims),
        approved=counts[ClaimStatus.APPROVED],
        pending=counts[ClaimStatus.PENDING],
        denied=counts[ClaimStatus.DENIED],
        processing=counts[ClaimStatus.PROCESSING],
        total_claimed=sum((c.claim_amount for c in claims), ZERO),
        total_approved=sum((c.approved_amount for c in claims), ZERO),
    )


def parse_procedure_codes(raw):
    return [c.strip().upper() for c in (raw or "").replace(";", ",").split(",") if c.strip()]


def next_claim_id(claims, year):
    prefix = f"CLM-{year}-"
    used = [int(c.id[len(prefix):]) for c in claims if c.id.startswith(prefix) and c.id[len(prefix):].isdigit()]
    return f"{prefix}{max(used, default=0) + 1:03d}"


# ---------- commands ----------
def submit_claim(patient, provider, service_date, claim_amount, diagnosis,
                 procedure_codes, notes="", today=None):
    """Create a pending claim for ``patient`` against ``provider``."""
    today = today or timezone.localdate()
    repo = get_repository("claims")
    claim = InsuranceClaim(
        id=next_claim_id(repo.all(), today.year),
        patient_id=patient.id,
        patient_name=patient.name,
        patient_phone=patient.phone,
        service_date=service_date,
        submission_date=today,
        claim_amount=claim_amount,
        approved_amount=ZERO,
        status=ClaimStatus.PENDING,
        insurance_provider=provider.name,
        policy_number=patient.insurance_id,
        diagnosis=diagnosis,
        procedure_codes=list(procedure_codes),
        notes=notes,
    )
    repo.save(claim)
    logger.info("claim submitted", claim_id=claim.id, provider=provider.name, amount=str(claim_amount))
    return claim


def update_claim_status(claim, status, approved_amount=None, denial_reason=""):
    """Move ``claim`` to ``status`` keeping amount/reason consistent with it."""
    status = ClaimStatus(status)
    if status == ClaimStatus.APPROVED:
        if approved_amount is None or not (ZERO < approved_amount <= claim.claim_amount):
            raise ValueError("approved amount must be positive and within the claimed amount")
    else:
        approved_amount = ZERO
    if status == ClaimStatus.DENIED:
        if not (denial_reason or "").strip():
            raise ValueError("denied claims need a denial reason")
        denial_reason = denial_reason.strip()
    else:
        denial_reason = ""

    previous = claim.status
    claim.status = status
    claim.approved_amount = approved_amount
    claim.denial_reason = denial_reason
    claim.check_invariants()
    get_repository("claims").save(claim)
    logger.info("claim status changed", claim_id=claim.id, previous=str(previous), status=str(status))
    return claim


# ---------- export ----------
EXPORT_COLUMNS = (
    "claim_id", "patient_name", "insurance_provider", "service_date",
    "claim_amount", "approved_amount", "status", "processing_days", "denial_reason",
)


def claim_row(claim):
    return {
        "claim_id": claim.id,
        "patient_name": claim.patient_name,
        "insurance_provider": claim.insurance_provider,
        "service_date": claim.service_date.isoformat(),
        "claim_amount": f"{claim.claim_amount:.2f}",
        "approved_amount": f"{claim.approved_amount:.2f}",
        "status": str(claim.status),
        "processing_days": claim.processing_time,
        "denial_reason": claim.denial_reason,
    }


def write_claims_csv(stream, claims):
    writer = csv.DictWriter(stream, fieldnames=EXPORT_COLUMNS, lineterminator="\n")
    writer.writeheader()
    for claim in claims:
        writer.writerow(claim_row(claim))
    return len(claims)
