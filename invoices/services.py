from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal

import structlog
from django.utils import timezone

from core.filters import matches_choice, matches_search
from core.store import get_repository

from .models import Invoice, InvoiceStatus, LineItem
from .totals import ZERO

logger = structlog.get_logger(__name__)

DATE_RANGES = {"today": 0, "week": 7, "month": 30}
PAYMENT_TERMS_DAYS = 30


@dataclass
class InvoiceSummary:
    count: int
    total_billed: Decimal
    total_paid: Decimal
    overdue: int

    @property
    def outstanding(self):
        return self.total_billed - self.total_paid


# ---------- queries ----------
def issued_within(invoice, date_range, today):
    limit = DATE_RANGES.get(date_range)
    if limit is None:
        return True
    days = (today - invoice.date_issued).days
    return days == 0 if limit == 0 else days <= limit


def filter_invoices(invoices, q="", status="all", date_range="all", today=None):
    today = today or timezone.localdate()
    return [
        inv for inv in invoices
        if matches_search(q, inv.patient_name, inv.id, inv.description)
        and matches_choice(status, inv.status)
        and issued_within(inv, date_range, today)
    ]


def invoice_summary(invoices):
    return InvoiceSummary(
        count=len(invoices),
        total_billed=sum((inv.total_amount for inv in invoices), ZERO),
        total_paid=sum((inv.amount_paid for inv in invoices), ZERO),
        overdue=sum(1 for inv in invoices if inv.status == InvoiceStatus.OVERDUE),
    )


def next_invoice_id(invoices, year):
    prefix = f"INV-{year}-"
    used = [int(i.id[len(prefix):]) for i in invoices if i.id.startswith(prefix) and i.id[len(prefix):].isdigit()]
    return f"{prefix}{max(used, default=0) + 1:03d}"


# ---------- commands ----------
def create_invoice(patient, data, line_rows, action="draft", today=None):
    """Build and store an invoice; ``action`` is ``draft`` or ``send``."""
    today = today or timezone.localdate()
    repo = get_repository("invoices")
    line_items = [
        LineItem(
            id=str(n),
            service_code=row["service_code"],
            description=row["description"],
            quantity=row["quantity"],
            unit_price=row["unit_price"],
            notes=row.get("notes", ""),
        )
        for n, row in enumerate(line_rows, start=1)
    ]
    date_issued = data.get("date_issued") or today
    invoice = Invoice(
        id=next_invoice_id(repo.all(), date_issued.year),
        patient_id=patient.id,
        patient_name=patient.name,
        patient_email=patient.email,
        patient_phone=patient.phone,
        patient_address=patient.address,
        insurance=patient.insurance,
        insurance_id=patient.insurance_id,
        date_issued=date_issued,
        due_date=data.get("due_date") or date_issued + timedelta(days=PAYMENT_TERMS_DAYS),
        status=InvoiceStatus.SENT if action == "send" else InvoiceStatus.DRAFT,
        provider=data["provider"],
        description=data.get("description", ""),
        notes=data.get("notes", ""),
        line_items=line_items,
        discount_amount=data.get("discount_amount") or ZERO,
        tax_rate=data.get("tax_rate") or ZERO,
        is_recurring=bool(data.get("is_recurring")),
        recurring_interval=data.get("recurring_interval", "") if data.get("is_recurring") else "",
    )
    repo.save(invoice)
    logger.info(
        "invoice created",
        invoice_id=invoice.id,
        status=str(invoice.status),
        items=len(line_items),
        total=str(invoice.total_amount),
    )
    return invoice
