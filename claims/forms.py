from decimal import Decimal

from django import forms

from core.directory import patient_choices
from core.store import get_repository

from .models import ClaimStatus
from .services import parse_procedure_codes

STATUS_FILTER_CHOICES = [("all", "All Statuses")] + ClaimStatus.choices


class ClaimFilterForm(forms.Form):
    q = forms.CharField(required=False, widget=forms.TextInput(attrs={
        "placeholder": "Search by patient name, claim ID, or insurance provider...",
    }))
    status = forms.ChoiceField(choices=STATUS_FILTER_CHOICES, required=False)


class ClaimForm(forms.Form):
    """New claim submission."""

    patient = forms.ChoiceField(error_messages={"required": "Please select a patient"})
    insurance_provider = forms.ChoiceField(error_messages={"required": "Please select a provider"})
    service_date = forms.DateField(widget=forms.DateInput(attrs={"type": "date"}))
    claim_amount = forms.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal("0.01"),
        widget=forms.NumberInput(attrs={"step": "0.01", "placeholder": "0.00"}),
    )
    diagnosis = forms.CharField(max_length=255, widget=forms.TextInput(attrs={"placeholder": "Primary diagnosis"}))
    procedure_codes = forms.CharField(
        required=False,
        widget=forms.TextInput(attrs={
            "placeholder": "Enter CPT codes separated by commas (e.g., 99213, 90801)",
        }),
    )
    notes = forms.CharField(required=False, widget=forms.Textarea(attrs={
        "rows": 3,
        "placeholder": "Enter any additional information about this claim",
    }))

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["patient"].choices = [("", "Select Patient")] + patient_choices()
        self.fields["insurance_provider"].choices = [("", "Select Provider")] + [
            (p.id, p.name) for p in get_repository("providers").all()
        ]

    def clean_patient(self):
        return get_repository("patients").get(self.cleaned_data["patient"])

    def clean_insurance_provider(self):
        return get_repository("providers").get(self.cleaned_data["insurance_provider"])

    def clean_procedure_codes(self):
        codes = parse_procedure_codes(self.cleaned_data["procedure_codes"])
        bad = [c for c in codes if not c.isalnum()]
        if bad:
            raise forms.ValidationError(f"Invalid procedure code(s): {', '.join(bad)}")
        return codes


class ClaimStatusForm(forms.Form):
    status = forms.ChoiceField(choices=ClaimStatus.choices)
    approved_amount = forms.DecimalField(max_digits=12, decimal_places=2, required=False)
    denial_reason = forms.CharField(required=False, widget=forms.Textarea(attrs={"rows": 2}))

    def __init__(self, *args, claim=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.claim = claim

    def clean(self):
        data = super().clean()
        status = data.get("status")
        amount = data.get("approved_amount")
        if status == ClaimStatus.APPROVED:
            if amount is None or amount <= 0:
                self.add_error("approved_amount", "Approved amount must be greater than 0")
            elif self.claim is not None and amount > self.claim.claim_amount:
                self.add_error("approved_amount", "Approved amount cannot exceed the claim amount")
        if status == ClaimStatus.DENIED and not (data.get("denial_reason") or "").strip():
            self.add_error("denial_reason", "A denial reason is required")
        return data
