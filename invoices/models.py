from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from django.db import models

from .totals import ZERO, as_decimal, compute_totals, line_total


class InvoiceStatus(models.TextChoices):
    DRAFT = "Draft", "Draft"
    SENT = "Sent", "Sent"
    PARTIAL = "Partial", "Partial Payment"
    PAID = "Paid", "Paid"
    OVERDUE = "Overdue", "Overdue"


class PaymentMethod(models.TextChoices):
    CREDIT_CARD = "credit_card", "Credit Card"
    DEBIT_CARD = "debit_card", "Debit Card"
    CHECK = "check", "Check"
    CASH = "cash", "Cash"
    BANK_TRANSFER = "bank_transfer", "Bank Transfer"
    INSURANCE = "insurance", "Insurance Payment"


class PaymentStatus(models.TextChoices):
    COMPLETED = "Completed"


class TemplateLayout(models.TextChoices):
    STANDARD = "standard", "Standard Layout"
    COMPACT = "compact", "Compact Layout"
    DETAILED = "detailed", "Detailed Layout"


class FieldType(models.TextChoices):
    TEXT = "text", "Text"
    TEXTAREA = "textarea", "Text Area"
    DATE = "date", "Date"
    DATETIME = "datetime", "Date & Time"
    SELECT = "select", "Select"
    NUMBER = "number", "Number"
    SECTION = "section", "Section"


@dataclass
class LineItem:
    id: str
    service_code: str
    description: str
    quantity: int
    unit_price: Decimal
    total: Decimal = None
    notes: str = ""

    def __post_init__(self):
        self.unit_price = as_decimal(self.unit_price)
        if self.total is None:
            self.total = line_total(self.quantity, self.unit_price)


@dataclass
class Payment:
    id: str
    date: date
    amount: Decimal
    method: str
    reference: str = ""
    notes: str = ""
    status: str = PaymentStatus.COMPLETED

    @property
    def method_label(self):
        try:
            return PaymentMethod(self.method).label
        except ValueError:
            return self.method


@dataclass
class Invoice:
    id: str
    patient_id: str
    patient_name: str
    date_issued: date
    due_date: date
    status: str
    provider: str
    line_items: list = field(default_factory=list)
    discount_amount: Decimal = ZERO
    tax_rate: Decimal = ZERO
    amount_paid: Decimal = ZERO
    payment_history: list = field(default_factory=list)
    description: str = ""
    notes: str = ""
    patient_email: str = ""
    patient_phone: str = ""
    patient_address: str = ""
    insurance: str = ""
    insurance_id: str = ""
    facility: str = ""
    facility_address: str = ""
    facility_phone: str = ""
    is_recurring: bool = False
    recurring_interval: str = ""

    # Derived amounts are recomputed on every access
    @property
    def totals(self):
        return compute_totals(self.line_items, self.discount_amount, self.tax_rate)

    @property
    def subtotal(self):
        return self.totals.subtotal

    @property
    def tax_amount(self):
        return self.totals.tax

    @property
    def total_amount(self):
        return self.totals.total

    @property
    def balance_due(self):
        return self.total_amount - self.amount_paid

    @property
    def last_payment_date(self):
        return self.payment_history[-1].date if self.payment_history else None

    def __str__(self):
        return f"{self.id} - {self.patient_name}"


@dataclass
class TemplateField:
    id: str
    label: str
    type: str = FieldType.TEXT
    required: bool = False
    visible: bool = True
    options: list = field(default_factory=list)


@dataclass
class InvoiceTemplate:
    id: str
    name: str
    description: str
    category: str
    fields: list
    is_default: bool = False
    is_active: bool = True
    usage_count: int = 0
    last_used: date = None
    layout: str = TemplateLayout.STANDARD
    header_color: str = "#2563eb"
    accent_color: str = "#3b82f6"
    font_family: str = "Inter"
    logo: str = ""

    def __post_init__(self):
        if not self.fields:
            raise ValueError(f"template {self.id} must have at least one field")

    def __str__(self):
        return self.name
