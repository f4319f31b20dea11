"""
Presentational building blocks shared by the dashboard, reports and claims
screens. Builders turn repository records into small value objects; the
``practice_widgets`` template tags render them.
"""
from dataclasses import dataclass
from decimal import Decimal

from django.conf import settings
from django.utils import timezone

from invoices.models import InvoiceStatus, PaymentMethod
from invoices.totals import ZERO

TONES = ("success", "warning", "error", "info")


def format_money(value):
    return f"{settings.PRACTICE_CURRENCY}{Decimal(value):,.2f}"


@dataclass
class StatCard:
    title: str
    value: str
    subtitle: str = ""
    tone: str = "info"

    def __post_init__(self):
        if self.tone not in TONES:
            raise ValueError(f"Unknown tone {self.tone!r}")


@dataclass
class ProgressBar:
    label: str
    value: float
    max_value: float = None
    percentage: float = None

    @property
    def percent(self):
        if self.percentage:
            return float(self.percentage)
        if self.max_value:
            return float(self.value) / float(self.max_value) * 100
        return 0.0


@dataclass
class MetricsItem:
    label: str
    value: object
    subtitle: str = ""
    status: str = "info"
    badge: str = ""

    def __post_init__(self):
        if self.status not in TONES:
            raise ValueError(f"Unknown status {self.status!r}")

    @property
    def display_value(self):
        value = self.value
        if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
            return value
        if value % 1 != 0 or value > 1000:
            return format_money(value)
        return f"{int(value):,}"


@dataclass
class PendingPayment:
    patient: str
    amount: Decimal
    days_pending: int

    @property
    def needs_reminder(self):
        return self.days_pending > settings.PRACTICE_REMINDER_AFTER_DAYS


# ---------- builders ----------
def invoice_stat_cards(invoices):
    billed = sum((inv.total_amount for inv in invoices), ZERO)
    paid = sum((inv.amount_paid for inv in invoices), ZERO)
    overdue = [inv for inv in invoices if inv.status == InvoiceStatus.OVERDUE]
    open_count = sum(1 for inv in invoices if inv.balance_due > 0 and inv.status != InvoiceStatus.DRAFT)
    return [
        StatCard("Total Revenue", format_money(paid), f"of {format_money(billed)} billed", "success"),
        StatCard("Outstanding", format_money(billed - paid), f"{open_count} open invoices", "warning"),
        StatCard("Overdue", str(len(overdue)),
                 format_money(sum((inv.balance_due for inv in overdue), ZERO)), "error"),
        StatCard("Invoices", str(len(invoices)), "all time", "info"),
    ]


def pending_payments(invoices, today=None):
    """Unpaid balances on issued invoices, longest pending first."""
    today = today or timezone.localdate()
    pending = [
        PendingPayment(inv.patient_name, inv.balance_due, max((today - inv.date_issued).days, 0))
        for inv in invoices
        if inv.status != InvoiceStatus.DRAFT and inv.balance_due > 0
    ]
    return sorted(pending, key=lambda p: p.days_pending, reverse=True)


def recent_invoices(invoices, limit=5):
    return sorted(invoices, key=lambda inv: inv.date_issued, reverse=True)[:limit]


def status_breakdown(invoices):
    total = len(invoices)
    return [
        ProgressBar(status.label, sum(1 for inv in invoices if inv.status == status), max_value=total)
        for status in InvoiceStatus
    ]


def collections_by_method(invoices):
    collected = {}
    counts = {}
    for inv in invoices:
        for payment in inv.payment_history:
            collected[payment.method] = collected.get(payment.method, ZERO) + payment.amount
            counts[payment.method] = counts.get(payment.method, 0) + 1
    return [
        MetricsItem(
            label=PaymentMethod(method).label if method in PaymentMethod.values else method,
            value=amount,
            subtitle=f"{counts[method]} payment{'s' if counts[method] != 1 else ''}",
            status="success",
        )
        for method, amount in sorted(collected.items(), key=lambda kv: kv[1], reverse=True)
    ]


def provider_approval_bars(providers):
    return [
        ProgressBar(p.name, p.approval_rate, max_value=100, percentage=p.approval_rate)
        for p in sorted(providers, key=lambda p: p.approval_rate, reverse=True)
    ]
