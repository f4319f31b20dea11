"""
Payment recording.

A payment is accepted only when ``0 < amount <= balance_due`` and a known
method is given. Acceptance appends the payment and moves the invoice status
forward (Partial, then Paid); nothing here ever lowers ``amount_paid``, so the
status never moves back.
"""

import uuid

import structlog
from django.conf import settings
from django.core.exceptions import ValidationError
from django.utils import timezone

from core.store import get_repository

from .models import InvoiceStatus, Payment, PaymentMethod, PaymentStatus
from .totals import ZERO, as_decimal

logger = structlog.get_logger(__name__)

MANUAL_STATUSES = (InvoiceStatus.SENT, InvoiceStatus.OVERDUE)


class PaymentRejected(ValidationError):
    """Field-keyed validation failure; the invoice was left untouched."""


def validate_payment(invoice, amount, method):
    errors = {}
    balance = invoice.balance_due
    if amount is None or amount <= ZERO:
        errors["amount"] = "Amount must be greater than 0"
    elif amount > balance:
        currency = getattr(settings, "PRACTICE_CURRENCY", "$")
        errors["amount"] = f"Amount cannot exceed {currency}{balance:.2f}"
    if not method or method not in PaymentMethod.values:
        errors["method"] = "Payment method is required"
    return errors


def next_status(balance_due, amount_paid, current):
    if balance_due <= ZERO:
        return InvoiceStatus.PAID
    if amount_paid > ZERO:
        return InvoiceStatus.PARTIAL
    return current


def record_payment(invoice, amount, method, reference="", notes="", on=None):
    """Apply a payment to ``invoice`` and return the new ``Payment``."""
    amount = as_decimal(amount) if amount is not None else None
    errors = validate_payment(invoice, amount, method)
    if errors:
        logger.warning("payment rejected", invoice_id=invoice.id, errors=errors)
        raise PaymentRejected(errors)

    payment = Payment(
        id=uuid.uuid4().hex[:12],
        date=on or timezone.localdate(),
        amount=amount,
        method=str(method),
        reference=(reference or "").strip(),
        notes=(notes or "").strip(),
        status=PaymentStatus.COMPLETED,
    )
    invoice.payment_history.append(payment)
    invoice.amount_paid += amount
    invoice.status = next_status(invoice.balance_due, invoice.amount_paid, invoice.status)
    get_repository("invoices").save(invoice)

    logger.info(
        "payment recorded",
        invoice_id=invoice.id,
        amount=str(amount),
        method=str(method),
        balance_due=str(invoice.balance_due),
        status=str(invoice.status),
    )
    return payment


def update_status(invoice, status):
    """Manual status change from the invoice actions menu.

    Only Sent and Overdue can be set by hand, and only while nothing has been
    paid. Partial and Paid follow from recorded payments.
    """
    status = InvoiceStatus(status)
    if status not in MANUAL_STATUSES:
        raise ValueError(f"{status.label} cannot be set manually")
    if invoice.amount_paid > ZERO:
        raise ValueError(f"Invoice {invoice.id} already has payments recorded")
    if invoice.balance_due <= ZERO:
        raise ValueError(f"Invoice {invoice.id} has nothing left to pay")
    previous = invoice.status
    invoice.status = status
    get_repository("invoices").save(invoice)
    logger.info("invoice status changed", invoice_id=invoice.id, previous=str(previous), status=str(invoice.status))
    return invoice
