"""Screens rendered through the Django test client."""

from decimal import Decimal

import pytest
from django.urls import reverse

from claims.models import ClaimStatus
from core.store import get_repository
from invoices.models import InvoiceStatus


def _line_items(*rows, prefix="items"):
    data = {
        f"{prefix}-TOTAL_FORMS": str(len(rows)),
        f"{prefix}-INITIAL_FORMS": "0",
        f"{prefix}-MIN_NUM_FORMS": "0",
        f"{prefix}-MAX_NUM_FORMS": "1000",
    }
    for n, (code, description, quantity, price) in enumerate(rows):
        data.update({
            f"{prefix}-{n}-service_code": code,
            f"{prefix}-{n}-description": description,
            f"{prefix}-{n}-quantity": str(quantity),
            f"{prefix}-{n}-unit_price": price,
        })
    return data


def _invoice_post(**overrides):
    data = {
        "patient": "P-1001",
        "provider": "Dr. Sarah Johnson",
        "date_issued": "2024-11-10",
        "due_date": "2024-12-10",
        "description": "Annual Physical Exam",
        "discount_amount": "50",
        "tax_rate": "8.5",
        "action": "send",
    }
    data.update(_line_items(
        ("99213", "Office Visit - Established Patient", 1, "200.00"),
        ("80053", "Comprehensive Metabolic Panel", 1, "150.00"),
        ("85025", "Complete Blood Count", 1, "100.00"),
    ))
    data.update(overrides)
    return data


class TestDashboard:
    def test_dashboard(self, client):
        response = client.get(reverse("dashboard"))
        assert response.status_code == 200
        assert b"Total Revenue" in response.content
        assert b"Pending Payments" in response.content

    def test_reports(self, client):
        response = client.get(reverse("reports"))
        assert response.status_code == 200
        assert b"Insurance Payment" in response.content
        assert b"Blue Cross Blue Shield" in response.content


class TestClaimScreens:
    @pytest.mark.parametrize("tab", ["overview", "claims", "providers", "reports", "bogus"])
    def test_tabs_render(self, client, tab):
        assert client.get(reverse("claim-list"), {"tab": tab}).status_code == 200

    def test_htmx_filter_returns_table_only(self, client, htmx_headers):
        response = client.get(reverse("claim-list"), {"status": "denied"}, **htmx_headers)
        assert response.status_code == 200
        assert b"<html" not in response.content
        assert b"CLM-2024-003" in response.content
        assert b"CLM-2024-001" not in response.content

    def test_unknown_claim(self, client):
        response = client.get(reverse("claim-detail", args=["CLM-9999-999"]))
        assert response.status_code == 404
        assert b"Return to Claims" in response.content

    def test_submit_claim(self, client):
        response = client.post(reverse("claim-create"), {
            "patient": "P-1002",
            "insurance_provider": "2",
            "service_date": "2024-11-09",
            "claim_amount": "410.00",
            "diagnosis": "Migraine",
            "procedure_codes": "99213",
        })
        assert response.status_code == 302
        claims = get_repository("claims")
        assert len(claims) == 5
        new = claims.all()[-1]
        assert response.url == reverse("claim-detail", args=[new.id])
        assert new.insurance_provider == "Aetna Healthcare"

    def test_submit_claim_errors_are_field_keyed(self, client):
        response = client.post(reverse("claim-create"), {"claim_amount": "0"})
        assert response.status_code == 200
        form = response.context["form"]
        assert form.errors["patient"] == ["Please select a patient"]
        assert "claim_amount" in form.errors
        assert len(get_repository("claims")) == 4

    def test_approve_needs_amount(self, client):
        url = reverse("claim-status", args=["CLM-2024-002"])
        response = client.post(url, {"status": "approved"})
        assert response.status_code == 200
        assert "approved_amount" in response.context["status_form"].errors
        assert get_repository("claims").get("CLM-2024-002").status == ClaimStatus.PENDING

    def test_deny_with_reason(self, client):
        url = reverse("claim-status", args=["CLM-2024-002"])
        response = client.post(url, {"status": "denied", "denial_reason": "Not covered"})
        assert response.status_code == 302
        claim = get_repository("claims").get("CLM-2024-002")
        assert claim.status == ClaimStatus.DENIED
        assert claim.denial_reason == "Not covered"

    def test_export(self, client):
        response = client.get(reverse("claim-export"), {"status": "pending"})
        assert response["Content-Type"] == "text/csv"
        lines = response.content.decode().strip().splitlines()
        assert len(lines) == 2
        assert lines[1].startswith("CLM-2024-002,")


class TestInvoiceScreens:
    def test_list_status_filter(self, client, htmx_headers):
        response = client.get(reverse("invoice-list"), {"status": "overdue"}, **htmx_headers)
        assert b"INV-2024-002" in response.content
        assert b"INV-2024-001" not in response.content

    def test_detail_and_not_found(self, client):
        assert client.get(reverse("invoice-detail", args=["INV-2024-001"])).status_code == 200
        response = client.get(reverse("invoice-detail", args=["INV-0000"]))
        assert response.status_code == 404
        assert b"Return to Invoices" in response.content

    def test_record_payment(self, client):
        response = client.post(reverse("payment-create", args=["INV-2024-001"]), {
            "amount": "234.00", "method": "check", "reference": "1042",
        }, follow=True)
        assert response.status_code == 200
        assert b"Payment recorded successfully!" in response.content
        invoice = get_repository("invoices").get("INV-2024-001")
        assert invoice.status == InvoiceStatus.PAID
        assert invoice.balance_due == 0

    def test_overpayment_shows_error(self, client):
        response = client.post(reverse("payment-create", args=["INV-2024-001"]), {
            "amount": "500", "method": "cash",
        })
        assert response.status_code == 200
        assert response.context["form"].errors["amount"] == ["Amount cannot exceed $234.00"]
        assert get_repository("invoices").get("INV-2024-001").amount_paid == Decimal("200.00")

    def test_mark_status(self, client):
        client.post(reverse("invoice-status", args=["INV-2024-005"]), {"status": "Sent"})
        assert get_repository("invoices").get("INV-2024-005").status == InvoiceStatus.SENT

    def test_mark_paid_is_refused(self, client):
        response = client.post(reverse("invoice-status", args=["INV-2024-002"]), {"status": "Paid"}, follow=True)
        assert b"Only Sent or Overdue can be set manually." in response.content
        invoice = get_repository("invoices").get("INV-2024-002")
        assert invoice.status == InvoiceStatus.OVERDUE
        assert invoice.balance_due == Decimal("1085")

    def test_mark_status_after_payment_is_refused(self, client):
        response = client.post(reverse("invoice-status", args=["INV-2024-001"]), {"status": "Sent"}, follow=True)
        assert b"already has payments recorded" in response.content
        assert get_repository("invoices").get("INV-2024-001").status == InvoiceStatus.PARTIAL

    def test_create_invoice(self, client):
        response = client.post(reverse("invoice-create"), _invoice_post())
        assert response.status_code == 302
        invoice = get_repository("invoices").get("INV-2024-006")
        assert response.url == reverse("invoice-detail", args=["INV-2024-006"])
        assert invoice.status == InvoiceStatus.SENT
        assert invoice.total_amount == Decimal("434")

    def test_create_draft(self, client):
        client.post(reverse("invoice-create"), _invoice_post(action="draft"))
        assert get_repository("invoices").get("INV-2024-006").status == InvoiceStatus.DRAFT

    def test_discount_above_subtotal_rejected(self, client):
        response = client.post(reverse("invoice-create"), _invoice_post(discount_amount="451"))
        assert response.status_code == 200
        assert response.context["form"].errors["discount_amount"] == ["Discount cannot exceed the subtotal"]
        assert len(get_repository("invoices")) == 5

    def test_tax_rate_capped(self, client):
        response = client.post(reverse("invoice-create"), _invoice_post(tax_rate="50.5"))
        assert "tax_rate" in response.context["form"].errors

    def test_missing_patient_and_items(self, client):
        data = _invoice_post(patient="")
        data.update(_line_items())
        response = client.post(reverse("invoice-create"), data)
        assert response.status_code == 200
        assert response.context["form"].errors["patient"] == ["Please select a patient"]
        assert response.context["formset"].non_form_errors() == ["At least one service/item is required"]

    def test_totals_preview(self, client):
        response = client.post(reverse("invoice-totals"), _invoice_post())
        assert b"$434.00" in response.content

    def test_searches(self, client):
        assert b"71020" in client.get(reverse("service-search"), {"q": "chest"}).content
        assert b"Sarah Johnson" in client.get(reverse("patient-search"), {"q": "987-6543"}).content


class TestTemplateScreens:
    def test_list_and_filter(self, client, htmx_headers):
        assert client.get(reverse("template-list")).status_code == 200
        response = client.get(reverse("template-list"), {"category": "Laboratory"}, **htmx_headers)
        assert b"Laboratory Services" in response.content
        assert b"Physical Therapy" not in response.content

    def test_create_template(self, client):
        data = {
            "name": "Dental Cleaning",
            "description": "Routine cleaning",
            "category": "Dental",
            "layout": "standard",
            "header_color": "#2563eb",
            "accent_color": "#3b82f6",
            "font_family": "Inter",
            "fields-TOTAL_FORMS": "1",
            "fields-INITIAL_FORMS": "0",
            "fields-MIN_NUM_FORMS": "0",
            "fields-MAX_NUM_FORMS": "1000",
            "fields-0-id": "patientInfo",
            "fields-0-label": "Patient Information",
            "fields-0-type": "section",
            "fields-0-required": "on",
            "fields-0-visible": "on",
        }
        response = client.post(reverse("template-create"), data)
        assert response.status_code == 302
        assert "Dental Cleaning" in [t.name for t in get_repository("templates").all()]

    def test_new_field_ids_do_not_clash(self, client):
        data = {
            "name": "Dental Cleaning",
            "description": "Routine cleaning",
            "category": "Dental",
            "layout": "standard",
            "header_color": "#2563eb",
            "accent_color": "#3b82f6",
            "font_family": "Inter",
            "fields-TOTAL_FORMS": "2",
            "fields-INITIAL_FORMS": "0",
            "fields-MIN_NUM_FORMS": "0",
            "fields-MAX_NUM_FORMS": "1000",
            "fields-0-id": "",
            "fields-0-label": "Tooth Chart",
            "fields-0-type": "text",
            "fields-0-visible": "on",
            "fields-1-id": "field-1",
            "fields-1-label": "Hygienist",
            "fields-1-type": "text",
            "fields-1-visible": "on",
        }
        client.post(reverse("template-create"), data)
        template = next(t for t in get_repository("templates").all() if t.name == "Dental Cleaning")
        ids = [f.id for f in template.fields]
        assert len(ids) == 2
        assert len(set(ids)) == 2
        assert ids[1] == "field-1"

    def test_create_template_requires_name(self, client):
        response = client.post(reverse("template-create"), {
            "description": "", "fields-TOTAL_FORMS": "0", "fields-INITIAL_FORMS": "0",
        })
        assert response.status_code == 200
        assert response.context["form"].errors["name"] == ["Template name is required"]
        assert response.context["formset"].non_form_errors() == ["At least one field is required"]

    def test_default_template_delete_refused(self, client):
        response = client.post(reverse("template-delete", args=["TPL-001"]), follow=True)
        assert b"Default templates cannot be deleted." in response.content
        assert "TPL-001" in get_repository("templates")

    def test_delete_template(self, client):
        assert client.get(reverse("template-delete", args=["TPL-004"])).status_code == 200
        client.post(reverse("template-delete", args=["TPL-004"]))
        assert "TPL-004" not in get_repository("templates")

    def test_duplicate_and_toggle(self, client):
        client.post(reverse("template-duplicate", args=["TPL-002"]))
        assert len(get_repository("templates")) == 5
        client.post(reverse("template-toggle", args=["TPL-002"]))
        assert not get_repository("templates").get("TPL-002").is_active


class TestInventoryScreen:
    def test_low_stock_toggle(self, client, htmx_headers):
        response = client.get(reverse("inventory-list"), {"low_stock": "on"}, **htmx_headers)
        assert b"Amoxicillin 250mg" in response.content
        assert b"Paracetamol 500mg" not in response.content

    def test_full_page(self, client):
        response = client.get(reverse("inventory-list"), {"sort": "stock"})
        assert response.status_code == 200
        assert [row["item"].current_stock for row in response.context["rows"]] == [8, 15, 25, 150, 200]


class TestProfileScreen:
    @pytest.mark.parametrize("tab", ["profile", "security", "notifications", "preferences"])
    def test_tabs(self, client, tab):
        assert client.get(reverse("profile"), {"tab": tab}).status_code == 200

    def test_save_profile(self, client):
        response = client.post(reverse("profile-update"), {
            "first_name": "Sarah", "last_name": "Johnson", "email": "sarah@clinic.example",
        }, follow=True)
        assert b"Profile updated successfully!" in response.content
        assert get_repository("profiles").get("EMP001").first_name == "Sarah"

    def test_invalid_email(self, client):
        response = client.post(reverse("profile-update"), {
            "first_name": "Sarah", "last_name": "Johnson", "email": "nope",
        })
        assert response.status_code == 200
        assert "email" in response.context["profile_form"].errors

    def test_notifications(self, client):
        response = client.post(reverse("settings-update", args=["notifications"]), {"push_notifications": "on"})
        assert response.status_code == 302
        settings = get_repository("profiles").get("EMP001").notifications
        assert settings.push_notifications
        assert not settings.email_notifications

    def test_unknown_section(self, client):
        assert client.post(reverse("settings-update", args=["billing"]), {}).status_code == 404

    def test_password_change(self, client):
        bad = client.post(reverse("password-change"), {
            "current_password": "old-pass", "new_password": "brand-new-1", "confirm_password": "other-one-1",
        })
        assert bad.context["password_form"].errors["confirm_password"] == ["Passwords do not match"]
        good = client.post(reverse("password-change"), {
            "current_password": "old-pass", "new_password": "brand-new-1", "confirm_password": "brand-new-1",
        })
        assert good.status_code == 302
