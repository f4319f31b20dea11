import uuid
from decimal import Decimal

from django import forms
from django.conf import settings
from django.core.validators import MaxValueValidator, RegexValidator

from core.directory import patient_choices
from core.store import get_repository

from .library import CATEGORIES, FONTS
from .models import FieldType, InvoiceStatus, PaymentMethod, TemplateField, TemplateLayout
from .payments import MANUAL_STATUSES, validate_payment
from .totals import to_money

HEX_COLOR = RegexValidator(r"^#[0-9a-fA-F]{6}$", "Enter a color like #2563eb")


# ---------- listing ----------
class InvoiceFilterForm(forms.Form):
    q = forms.CharField(required=False)
    status = forms.ChoiceField(
        required=False,
        choices=[("all", "All Statuses")] + [(v.lower(), label) for v, label in InvoiceStatus.choices],
    )
    date = forms.ChoiceField(required=False, choices=[
        ("all", "All Dates"), ("today", "Today"), ("week", "This Week"), ("month", "This Month"),
    ])


# ---------- payments ----------
class PaymentForm(forms.Form):
    amount = forms.DecimalField(
        max_digits=12, decimal_places=2, required=False,
        widget=forms.NumberInput(attrs={"step": "0.01", "min": "0"}),
    )
    method = forms.ChoiceField(
        choices=PaymentMethod.choices, required=False, initial=PaymentMethod.CREDIT_CARD,
    )
    reference = forms.CharField(required=False, max_length=64, widget=forms.TextInput(attrs={
        "placeholder": "e.g., Check number, Transaction ID",
    }))
    notes = forms.CharField(required=False, widget=forms.Textarea(attrs={
        "rows": 3, "placeholder": "Payment notes or comments",
    }))

    def __init__(self, *args, invoice, **kwargs):
        super().__init__(*args, **kwargs)
        self.invoice = invoice
        self.fields["amount"].initial = to_money(invoice.balance_due)
        self.fields["amount"].widget.attrs["max"] = str(to_money(invoice.balance_due))

    def clean(self):
        data = super().clean()
        # amount/method errors already raised by the field parsers stay as they are
        errors = validate_payment(self.invoice, data.get("amount"), data.get("method"))
        for field, message in errors.items():
            if field not in self.errors:
                self.add_error(field, message)
        return data


class InvoiceStatusForm(forms.Form):
    status = forms.ChoiceField(choices=[(s.value, s.label) for s in MANUAL_STATUSES])


# ---------- new invoice ----------
class LineItemForm(forms.Form):
    service_code = forms.CharField(max_length=16)
    description = forms.CharField(max_length=255)
    quantity = forms.IntegerField(min_value=1, initial=1)
    unit_price = forms.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal("0"))
    notes = forms.CharField(required=False, max_length=255)


class BaseLineItemFormSet(forms.BaseFormSet):
    def clean(self):
        super().clean()
        if any(self.errors):
            return
        if not self.rows():
            raise forms.ValidationError("At least one service/item is required")

    def rows(self):
        return [
            f.cleaned_data for f in self.forms
            if f.cleaned_data and not f.cleaned_data.get("DELETE")
        ]


LineItemFormSet = forms.formset_factory(
    LineItemForm, formset=BaseLineItemFormSet, extra=0, can_delete=True,
)


class InvoiceForm(forms.Form):
    patient = forms.ChoiceField(error_messages={"required": "Please select a patient"})
    provider = forms.CharField(max_length=128, error_messages={"required": "Provider is required"})
    date_issued = forms.DateField(widget=forms.DateInput(attrs={"type": "date"}))
    due_date = forms.DateField(widget=forms.DateInput(attrs={"type": "date"}))
    description = forms.CharField(required=False, max_length=255)
    notes = forms.CharField(required=False, widget=forms.Textarea(attrs={"rows": 3}))
    discount_amount = forms.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal("0"), initial=Decimal("0"), required=False,
    )
    tax_rate = forms.DecimalField(
        max_digits=5, decimal_places=2, min_value=Decimal("0"), initial=Decimal("0"), required=False,
    )
    is_recurring = forms.BooleanField(required=False)
    recurring_interval = forms.ChoiceField(required=False, initial="monthly", choices=[
        ("weekly", "Weekly"), ("monthly", "Monthly"), ("quarterly", "Quarterly"), ("yearly", "Yearly"),
    ])

    def __init__(self, *args, subtotal=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.subtotal = subtotal
        self.fields["patient"].choices = [("", "Select Patient")] + patient_choices()
        max_rate = settings.PRACTICE_MAX_TAX_RATE
        self.fields["tax_rate"].validators.append(MaxValueValidator(max_rate))
        self.fields["tax_rate"].widget.attrs.update({"max": max_rate, "step": "0.1"})

    def clean_patient(self):
        return get_repository("patients").get(self.cleaned_data["patient"])

    def clean(self):
        data = super().clean()
        discount = data.get("discount_amount") or Decimal("0")
        if self.subtotal is not None and discount > self.subtotal:
            self.add_error("discount_amount", "Discount cannot exceed the subtotal")
        issued, due = data.get("date_issued"), data.get("due_date")
        if issued and due and due < issued:
            self.add_error("due_date", "Due date cannot be before the issue date")
        return data


# ---------- templates ----------
class TemplateFilterForm(forms.Form):
    q = forms.CharField(required=False)
    category = forms.ChoiceField(required=False, choices=[(c, c) for c in ["All"] + CATEGORIES])


class TemplateForm(forms.Form):
    name = forms.CharField(max_length=128, error_messages={"required": "Template name is required"},
                           widget=forms.TextInput(attrs={"placeholder": "e.g., Cardiology Invoice"}))
    description = forms.CharField(
        error_messages={"required": "Template description is required"},
        widget=forms.Textarea(attrs={"rows": 3, "placeholder": "Brief description of when to use this template..."}),
    )
    category = forms.ChoiceField(choices=[(c, c) for c in CATEGORIES], initial="Medical")
    layout = forms.ChoiceField(choices=TemplateLayout.choices, initial=TemplateLayout.STANDARD)
    header_color = forms.CharField(initial="#2563eb", validators=[HEX_COLOR])
    accent_color = forms.CharField(initial="#3b82f6", validators=[HEX_COLOR])
    font_family = forms.ChoiceField(choices=[(f, f) for f in FONTS], initial="Inter")


class TemplateFieldForm(forms.Form):
    id = forms.CharField(required=False, widget=forms.HiddenInput)
    label = forms.CharField(max_length=64, initial="New Field")
    type = forms.ChoiceField(choices=FieldType.choices, initial=FieldType.TEXT)
    required = forms.BooleanField(required=False)
    visible = forms.BooleanField(required=False, initial=True)


class BaseTemplateFieldFormSet(forms.BaseFormSet):
    def clean(self):
        super().clean()
        if any(self.errors):
            return
        if not self.template_fields():
            raise forms.ValidationError("At least one field is required")

    def template_fields(self):
        fields = []
        for form in self.forms:
            data = form.cleaned_data
            if not data or data.get("DELETE"):
                continue
            fields.append(TemplateField(
                id=data.get("id") or f"field-{uuid.uuid4().hex[:8]}",
                label=data["label"],
                type=data["type"],
                required=data.get("required", False),
                visible=data.get("visible", False),
            ))
        return fields


TemplateFieldFormSet = forms.formset_factory(
    TemplateFieldForm, formset=BaseTemplateFieldFormSet, extra=0, can_delete=True,
)
