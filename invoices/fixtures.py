"""Seed records for the invoice screens."""

from datetime import date
from decimal import Decimal

from .models import (
    FieldType,
    Invoice,
    InvoiceStatus,
    InvoiceTemplate,
    LineItem,
    Payment,
    PaymentMethod,
    TemplateField,
    TemplateLayout,
)

FACILITY = {
    "facility": "City Medical Center",
    "facility_address": "456 Healthcare Ave, Medical City, ST 67890",
    "facility_phone": "(555) 987-6543",
}


def _items(*rows):
    return [
        LineItem(id=str(n), service_code=code, description=desc, quantity=qty, unit_price=Decimal(price))
        for n, (code, desc, qty, price) in enumerate(rows, start=1)
    ]


def seed_invoices():
    return [
        Invoice(
            id="INV-2024-001",
            patient_id="P-1001",
            patient_name="John Smith",
            patient_email="john.smith@email.com",
            patient_phone="(555) 123-4567",
            patient_address="123 Main St, Anytown, ST 12345",
            insurance="Blue Cross Blue Shield",
            insurance_id="BC123456789",
            date_issued=date(2024, 11, 1),
            due_date=date(2024, 12, 1),
            status=InvoiceStatus.PARTIAL,
            provider="Dr. Sarah Johnson",
            description="Annual Physical Exam",
            notes="Follow-up appointment recommended in 2 weeks. Patient responded well to treatment.",
            line_items=_items(
                ("99213", "Office Visit - Established Patient", 1, "200.00"),
                ("80053", "Comprehensive Metabolic Panel", 1, "150.00"),
                ("85025", "Complete Blood Count", 1, "100.00"),
            ),
            discount_amount=Decimal("50.00"),
            tax_rate=Decimal("8.5"),
            amount_paid=Decimal("200.00"),
            payment_history=[
                Payment(id="1", date=date(2024, 11, 5), amount=Decimal("200.00"),
                        method=PaymentMethod.CREDIT_CARD, reference="CH_1234567890"),
            ],
            **FACILITY,
        ),
        Invoice(
            id="INV-2024-002",
            patient_id="P-1002",
            patient_name="Sarah Johnson",
            patient_email="sarah.johnson@email.com",
            patient_phone="(555) 987-6543",
            patient_address="789 Oak Street, Hometown, ST 54321",
            insurance="Aetna Healthcare",
            insurance_id="AE987654321",
            date_issued=date(2024, 10, 28),
            due_date=date(2024, 11, 27),
            status=InvoiceStatus.OVERDUE,
            provider="Dr. Michael Chen",
            description="Emergency Visit",
            notes="Emergency visit for chest pain. All tests came back normal.",
            line_items=_items(
                ("99285", "Emergency Department Visit - High Complexity", 1, "800.00"),
                ("71020", "Chest X-Ray", 1, "200.00"),
            ),
            tax_rate=Decimal("8.5"),
            **FACILITY,
        ),
        Invoice(
            id="INV-2024-003",
            patient_id="P-1002",
            patient_name="Sarah Johnson",
            patient_email="sarah.johnson@email.com",
            patient_phone="(555) 987-6543",
            insurance="Aetna Healthcare",
            insurance_id="AE987654321",
            date_issued=date(2024, 10, 15),
            due_date=date(2024, 11, 14),
            status=InvoiceStatus.PAID,
            provider="Dr. Smith",
            description="Follow-up Consultation",
            line_items=_items(("99214", "Office Visit - Detailed", 1, "275.00")),
            amount_paid=Decimal("275.00"),
            payment_history=[
                Payment(id="1", date=date(2024, 10, 20), amount=Decimal("275.00"),
                        method=PaymentMethod.INSURANCE, reference="AET-EOB-5521"),
            ],
            **FACILITY,
        ),
        Invoice(
            id="INV-2024-004",
            patient_id="P-1003",
            patient_name="Michael Brown",
            patient_email="michael.brown@email.com",
            patient_phone="(555) 456-7890",
            insurance="Humana",
            insurance_id="HU456789123",
            date_issued=date(2024, 11, 6),
            due_date=date(2024, 12, 6),
            status=InvoiceStatus.SENT,
            provider="Dr. Johnson",
            description="Lab Work and Immunization",
            line_items=_items(
                ("36415", "Blood Draw", 1, "50.00"),
                ("90471", "Immunization Administration", 2, "25.00"),
                ("J3420", "B-12 Injection", 1, "75.00"),
            ),
            **FACILITY,
        ),
        Invoice(
            id="INV-2024-005",
            patient_id="P-1001",
            patient_name="John Smith",
            insurance="Blue Cross Blue Shield",
            insurance_id="BC123456789",
            date_issued=date(2024, 11, 8),
            due_date=date(2024, 12, 8),
            status=InvoiceStatus.DRAFT,
            provider="Dr. Sarah Johnson",
            description="Chest Imaging",
            line_items=_items(("71020", "Chest X-Ray", 1, "200.00")),
            tax_rate=Decimal("8.5"),
            **FACILITY,
        ),
    ]


def default_fields():
    return [TemplateField("patientInfo", "Patient Information", FieldType.SECTION, True, True)]


def seed_templates():
    def f(field_id, label, field_type, required, visible=True):
        return TemplateField(field_id, label, field_type, required, visible)

    return [
        InvoiceTemplate(
            id="TPL-001",
            name="Standard Medical Invoice",
            description="Professional medical services invoice template",
            category="Medical",
            is_default=True,
            usage_count=145,
            last_used=date(2024, 11, 6),
            layout=TemplateLayout.STANDARD,
            header_color="#2563eb",
            accent_color="#3b82f6",
            fields=[
                f("patientInfo", "Patient Information", FieldType.SECTION, True),
                f("serviceDate", "Service Date", FieldType.DATE, True),
                f("provider", "Provider Name", FieldType.TEXT, True),
                f("diagnosis", "Diagnosis Code", FieldType.TEXT, False),
                f("referralNumber", "Referral Number", FieldType.TEXT, False, visible=False),
            ],
        ),
        InvoiceTemplate(
            id="TPL-002",
            name="Emergency Department",
            description="Template for emergency department visits and urgent care",
            category="Emergency",
            usage_count=89,
            last_used=date(2024, 11, 5),
            layout=TemplateLayout.COMPACT,
            header_color="#dc2626",
            accent_color="#ef4444",
            fields=[
                f("patientInfo", "Patient Information", FieldType.SECTION, True),
                f("emergencyContact", "Emergency Contact", FieldType.SECTION, True),
                f("admissionTime", "Admission Time", FieldType.DATETIME, True),
                f("dischargeTime", "Discharge Time", FieldType.DATETIME, True),
                f("acuity", "Acuity Level", FieldType.SELECT, True),
            ],
        ),
        InvoiceTemplate(
            id="TPL-003",
            name="Physical Therapy",
            description="Specialized template for physical therapy sessions",
            category="Therapy",
            usage_count=67,
            last_used=date(2024, 11, 4),
            layout=TemplateLayout.DETAILED,
            header_color="#059669",
            accent_color="#10b981",
            fields=[
                f("patientInfo", "Patient Information", FieldType.SECTION, True),
                f("sessionType", "Session Type", FieldType.SELECT, True),
                f("therapist", "Therapist Name", FieldType.TEXT, True),
                f("exercisesPrescribed", "Exercises Prescribed", FieldType.TEXTAREA, False),
                f("nextAppointment", "Next Appointment", FieldType.DATE, False),
            ],
        ),
        InvoiceTemplate(
            id="TPL-004",
            name="Laboratory Services",
            description="Template for lab work and diagnostic testing",
            category="Laboratory",
            usage_count=123,
            last_used=date(2024, 11, 3),
            layout=TemplateLayout.STANDARD,
            header_color="#7c3aed",
            accent_color="#8b5cf6",
            fields=[
                f("patientInfo", "Patient Information", FieldType.SECTION, True),
                f("orderingPhysician", "Ordering Physician", FieldType.TEXT, True),
                f("specimenType", "Specimen Type", FieldType.SELECT, True),
                f("collectionDate", "Collection Date", FieldType.DATE, True),
                f("resultsDate", "Results Date", FieldType.DATE, False),
            ],
        ),
    ]
