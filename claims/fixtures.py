"""Seed records for the insurance screens."""

from datetime import date
from decimal import Decimal

from .models import ClaimStatus, InsuranceClaim, InsuranceProvider, PlanType


def seed_claims():
    return [
        InsuranceClaim(
            id="CLM-2024-001",
            patient_id="P-1001",
            patient_name="John Smith",
            patient_phone="(555) 123-4567",
            service_date=date(2024, 11, 5),
            submission_date=date(2024, 11, 6),
            claim_amount=Decimal("1250.50"),
            approved_amount=Decimal("1125.45"),
            status=ClaimStatus.APPROVED,
            insurance_provider="Blue Cross Blue Shield",
            policy_number="BC123456789",
            diagnosis="Hypertension follow-up",
            procedure_codes=["99213", "90801"],
            notes="Routine follow-up appointment",
            processing_time=3,
        ),
        InsuranceClaim(
            id="CLM-2024-002",
            patient_id="P-1002",
            patient_name="Sarah Johnson",
            patient_phone="(555) 987-6543",
            service_date=date(2024, 11, 3),
            submission_date=date(2024, 11, 4),
            claim_amount=Decimal("890.00"),
            approved_amount=Decimal("0"),
            status=ClaimStatus.PENDING,
            insurance_provider="Aetna Healthcare",
            policy_number="AE987654321",
            diagnosis="Annual physical examination",
            procedure_codes=["99395"],
            notes="Preventive care visit",
            processing_time=7,
        ),
        InsuranceClaim(
            id="CLM-2024-003",
            patient_id="P-1003",
            patient_name="Michael Brown",
            patient_phone="(555) 456-7890",
            service_date=date(2024, 10, 28),
            submission_date=date(2024, 10, 29),
            claim_amount=Decimal("2100.00"),
            approved_amount=Decimal("0"),
            status=ClaimStatus.DENIED,
            insurance_provider="Humana",
            policy_number="HU456789123",
            diagnosis="Emergency room visit",
            procedure_codes=["99284", "71020"],
            notes="Chest pain evaluation",
            processing_time=5,
            denial_reason="Prior authorization required",
        ),
        InsuranceClaim(
            id="CLM-2024-004",
            patient_id="P-1001",
            patient_name="John Smith",
            patient_phone="(555) 123-4567",
            service_date=date(2024, 11, 8),
            submission_date=date(2024, 11, 9),
            claim_amount=Decimal("450.00"),
            approved_amount=Decimal("0"),
            status=ClaimStatus.PROCESSING,
            insurance_provider="Blue Cross Blue Shield",
            policy_number="BC123456789",
            diagnosis="Lab work - metabolic panel",
            procedure_codes=["80053", "85025"],
            notes="",
            processing_time=2,
        ),
    ]


def seed_providers():
    return [
        InsuranceProvider("1", "Blue Cross Blue Shield", PlanType.PPO, "1-800-555-0123",
                          "claims@bcbs.com", "https://provider.bcbs.com", 5, 94.2),
        InsuranceProvider("2", "Aetna Healthcare", PlanType.HMO, "1-800-555-0456",
                          "provider@aetna.com", "https://www.aetna.com/providers", 7, 91.8),
        InsuranceProvider("3", "Humana", PlanType.PPO, "1-800-555-0789",
                          "claims@humana.com", "https://provider.humana.com", 6, 89.5),
    ]
