from django import forms

from .models import InventoryCategory


class InventoryFilterForm(forms.Form):
    q = forms.CharField(required=False, widget=forms.TextInput(attrs={"placeholder": "Search inventory..."}))
    category = forms.ChoiceField(required=False, choices=[("all", "All Categories")] + InventoryCategory.choices)
    sort = forms.ChoiceField(required=False, initial="name", choices=[
        ("name", "Sort by Name"),
        ("stock", "Sort by Stock"),
        ("expiry", "Sort by Expiry"),
        ("category", "Sort by Category"),
    ])
    low_stock = forms.BooleanField(required=False, label="Low Stock Only")
    expiring_soon = forms.BooleanField(required=False, label="Expiring Soon")
