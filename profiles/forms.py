from django import forms

from .models import SESSION_TIMEOUT_CHOICES

MIN_PASSWORD_LENGTH = 8


class ProfileForm(forms.Form):
    first_name = forms.CharField(max_length=64)
    last_name = forms.CharField(max_length=64)
    email = forms.EmailField()
    phone = forms.CharField(max_length=32, required=False)
    date_of_birth = forms.DateField(required=False, widget=forms.DateInput(attrs={"type": "date"}))
    address = forms.CharField(max_length=255, required=False)
    city = forms.CharField(max_length=64, required=False)
    state = forms.CharField(max_length=64, required=False)
    zip_code = forms.CharField(max_length=16, required=False)
    country = forms.CharField(max_length=64, required=False)


class SecuritySettingsForm(forms.Form):
    two_factor_enabled = forms.BooleanField(required=False, label="Two-Factor Authentication")
    login_notifications = forms.BooleanField(required=False)
    session_timeout = forms.TypedChoiceField(choices=SESSION_TIMEOUT_CHOICES, coerce=int)


class NotificationSettingsForm(forms.Form):
    email_notifications = forms.BooleanField(required=False)
    sms_notifications = forms.BooleanField(required=False, label="SMS notifications")
    push_notifications = forms.BooleanField(required=False)
    appointment_reminders = forms.BooleanField(required=False)
    payment_alerts = forms.BooleanField(required=False)
    system_updates = forms.BooleanField(required=False)


class PreferencesForm(forms.Form):
    language = forms.ChoiceField(choices=[
        ("en-us", "English (US)"), ("es", "Spanish"), ("fr", "French"), ("de", "German"),
    ])
    timezone = forms.ChoiceField(choices=[
        ("America/Los_Angeles", "Pacific Time (PT)"),
        ("America/Denver", "Mountain Time (MT)"),
        ("America/Chicago", "Central Time (CT)"),
        ("America/New_York", "Eastern Time (ET)"),
    ])
    date_format = forms.ChoiceField(choices=[
        ("MM/DD/YYYY", "MM/DD/YYYY"), ("DD/MM/YYYY", "DD/MM/YYYY"), ("YYYY-MM-DD", "YYYY-MM-DD"),
    ])


class PasswordChangeForm(forms.Form):
    current_password = forms.CharField(widget=forms.PasswordInput)
    new_password = forms.CharField(widget=forms.PasswordInput, min_length=MIN_PASSWORD_LENGTH)
    confirm_password = forms.CharField(widget=forms.PasswordInput, label="Confirm New Password")

    def clean(self):
        data = super().clean()
        new, confirm = data.get("new_password"), data.get("confirm_password")
        if new and confirm and new != confirm:
            self.add_error("confirm_password", "Passwords do not match")
        if new and new == data.get("current_password"):
            self.add_error("new_password", "New password must differ from the current one")
        return data
