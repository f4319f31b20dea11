"""Recording payments against invoices."""

import logging
from datetime import date
from decimal import Decimal

import pytest

from core.store import get_repository
from invoices.forms import PaymentForm
from invoices.models import InvoiceStatus, LineItem, PaymentMethod
from invoices.payments import PaymentRejected, next_status, record_payment, update_status, validate_payment


def _invoice(invoice_id="INV-2024-001"):
    return get_repository("invoices").get(invoice_id)


class TestSeededInvoice:
    def test_partial_invoice_amounts(self):
        inv = _invoice()
        assert inv.subtotal == Decimal("450")
        assert inv.tax_amount == Decimal("34")
        assert inv.total_amount == Decimal("434")
        assert inv.balance_due == Decimal("234")

    def test_overdue_invoice_total(self):
        assert _invoice("INV-2024-002").total_amount == Decimal("1085")


class TestRecordPayment:
    def test_partial_payment(self):
        inv = _invoice()
        payment = record_payment(inv, Decimal("100"), PaymentMethod.CASH, on=date(2024, 11, 12))
        assert inv.balance_due == Decimal("134")
        assert inv.status == InvoiceStatus.PARTIAL
        assert inv.payment_history[-1] is payment
        assert inv.last_payment_date == date(2024, 11, 12)

    def test_full_balance_marks_paid(self):
        inv = _invoice()
        record_payment(inv, inv.balance_due, PaymentMethod.CHECK, reference=" 1042 ")
        assert inv.balance_due == 0
        assert inv.status == InvoiceStatus.PAID
        assert inv.payment_history[-1].reference == "1042"

    def test_first_payment_on_overdue_invoice_becomes_partial(self):
        inv = _invoice("INV-2024-002")
        record_payment(inv, Decimal("85"), PaymentMethod.INSURANCE)
        assert inv.status == InvoiceStatus.PARTIAL
        assert inv.balance_due == Decimal("1000")

    def test_payment_is_persisted(self):
        inv = _invoice()
        record_payment(inv, Decimal("34"), PaymentMethod.DEBIT_CARD)
        assert get_repository("invoices").get(inv.id).amount_paid == Decimal("234")

    @pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-5"), None])
    def test_non_positive_amount_rejected(self, amount):
        inv = _invoice()
        with pytest.raises(PaymentRejected) as exc:
            record_payment(inv, amount, PaymentMethod.CASH)
        assert exc.value.message_dict["amount"] == ["Amount must be greater than 0"]
        assert inv.amount_paid == Decimal("200")
        assert len(inv.payment_history) == 1

    def test_overpayment_rejected(self):
        inv = _invoice()
        with pytest.raises(PaymentRejected) as exc:
            record_payment(inv, Decimal("234.01"), PaymentMethod.CASH)
        assert exc.value.message_dict["amount"] == ["Amount cannot exceed $234.00"]
        assert inv.status == InvoiceStatus.PARTIAL
        assert inv.balance_due == Decimal("234")

    def test_method_required(self):
        errors = validate_payment(_invoice(), Decimal("10"), "")
        assert errors == {"method": "Payment method is required"}

    def test_unknown_method_rejected(self):
        assert "method" in validate_payment(_invoice(), Decimal("10"), "bitcoin")


class TestStatus:
    def test_next_status(self):
        assert next_status(Decimal("0"), Decimal("10"), InvoiceStatus.SENT) == InvoiceStatus.PAID
        assert next_status(Decimal("5"), Decimal("10"), InvoiceStatus.SENT) == InvoiceStatus.PARTIAL
        assert next_status(Decimal("5"), Decimal("0"), InvoiceStatus.OVERDUE) == InvoiceStatus.OVERDUE

    def test_manual_update(self):
        inv = update_status(_invoice("INV-2024-005"), "Sent")
        assert get_repository("invoices").get("INV-2024-005").status == InvoiceStatus.SENT
        assert inv.status == InvoiceStatus.SENT

    def test_manual_update_rejects_unknown_status(self):
        with pytest.raises(ValueError):
            update_status(_invoice(), "Lost")

    @pytest.mark.parametrize("status", ["Paid", "Partial", "Draft"])
    def test_manual_update_limited_to_sent_and_overdue(self, status):
        inv = _invoice("INV-2024-002")
        with pytest.raises(ValueError):
            update_status(inv, status)
        assert get_repository("invoices").get("INV-2024-002").status == InvoiceStatus.OVERDUE

    def test_manual_update_refused_once_paid_into(self):
        with pytest.raises(ValueError, match="already has payments"):
            update_status(_invoice(), "Sent")
        assert _invoice().status == InvoiceStatus.PARTIAL


class TestCentRounding:
    def _odd_tax_invoice(self):
        inv = _invoice("INV-2024-002")
        inv.line_items = [LineItem("li-1", "99213", "Office visit", 1, "123.45")]
        inv.discount_amount = Decimal("0")
        inv.tax_rate = Decimal("8.5")
        return inv

    def test_tax_rounded_to_cents(self):
        inv = self._odd_tax_invoice()
        assert inv.tax_amount == Decimal("10.49")
        assert inv.balance_due == Decimal("133.94")

    def test_displayed_balance_settles_invoice(self):
        inv = self._odd_tax_invoice()
        form = PaymentForm({"amount": "133.94", "method": "credit_card"}, invoice=inv)
        assert form.fields["amount"].initial == Decimal("133.94")
        assert form.is_valid(), form.errors
        record_payment(inv, form.cleaned_data["amount"], form.cleaned_data["method"])
        assert inv.balance_due == 0
        assert inv.status == InvoiceStatus.PAID


class TestPaymentLog:
    def test_method_logged_as_plain_string(self, caplog):
        with caplog.at_level(logging.INFO, logger="invoices.payments"):
            record_payment(_invoice(), Decimal("10"), PaymentMethod.CASH)
        event = next(r.msg for r in caplog.records if isinstance(r.msg, dict) and r.msg["event"] == "payment recorded")
        assert type(event["method"]) is str
        assert event["method"] == "cash"
