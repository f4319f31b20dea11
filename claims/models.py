from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from django.db import models

ZERO = Decimal("0")


class ClaimStatus(models.TextChoices):
    APPROVED = "approved", "Approved"
    PENDING = "pending", "Pending"
    DENIED = "denied", "Denied"
    PROCESSING = "processing", "Processing"


class PlanType(models.TextChoices):
    PPO = "PPO"
    HMO = "HMO"
    EPO = "EPO"
    POS = "POS"


@dataclass
class InsuranceClaim:
    id: str
    patient_id: str
    patient_name: str
    patient_phone: str
    service_date: date
    submission_date: date
    claim_amount: Decimal
    approved_amount: Decimal
    status: str
    insurance_provider: str
    policy_number: str
    diagnosis: str
    procedure_codes: list = field(default_factory=list)
    notes: str = ""
    processing_time: int = 0
    denial_reason: str = ""

    def __post_init__(self):
        self.check_invariants()

    def check_invariants(self):
        if self.status not in ClaimStatus.values:
            raise ValueError(f"unknown claim status {self.status!r}")
        if self.status != ClaimStatus.APPROVED and self.approved_amount != ZERO:
            raise ValueError(f"{self.id}: approved amount set on a {self.status} claim")
        if self.denial_reason and self.status != ClaimStatus.DENIED:
            raise ValueError(f"{self.id}: denial reason set on a {self.status} claim")

    @property
    def status_label(self):
        return ClaimStatus(self.status).label

    @property
    def is_denied(self):
        return self.status == ClaimStatus.DENIED

    def __str__(self):
        return f"{self.id} - {self.patient_name}"


@dataclass
class InsuranceProvider:
    id: str
    name: str
    type: str
    contact_phone: str
    contact_email: str
    website_portal: str
    average_processing_time: int
    approval_rate: float

    def __str__(self):
        return self.name
