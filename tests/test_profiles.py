"""Staff profile and settings."""

from datetime import date

from profiles.forms import PasswordChangeForm, ProfileForm, SecuritySettingsForm
from profiles.services import change_password, current_profile, update_profile, update_settings


class TestProfileServices:
    def test_current_profile(self):
        profile = current_profile()
        assert profile.full_name == "Dr. Sarah Johnson"
        assert profile.is_active

    def test_update_profile_only_touches_editable_fields(self):
        profile = current_profile()
        update_profile(profile, {"city": "Oakland", "role": "Intern"})
        stored = current_profile()
        assert stored.city == "Oakland"
        assert stored.role == "Senior Physician"

    def test_update_settings_replaces_section(self):
        profile = current_profile()
        update_settings(profile, "security", {"session_timeout": 120, "unknown": True})
        assert current_profile().security.session_timeout == 120
        assert current_profile().security.two_factor_enabled

    def test_change_password_tracks_date(self):
        change_password(current_profile(), today=date(2024, 11, 10))
        assert current_profile().security.last_password_change == date(2024, 11, 10)


class TestProfileForms:
    def test_profile_requires_names_and_valid_email(self):
        form = ProfileForm({"first_name": "", "last_name": "Johnson", "email": "not-an-email"})
        assert not form.is_valid()
        assert set(form.errors) == {"first_name", "email"}

    def test_session_timeout_is_coerced(self):
        form = SecuritySettingsForm({"session_timeout": "60", "two_factor_enabled": "on"})
        assert form.is_valid()
        assert form.cleaned_data == {"two_factor_enabled": True, "login_notifications": False, "session_timeout": 60}

    def test_password_rules(self):
        short = PasswordChangeForm({"current_password": "old-pass", "new_password": "short", "confirm_password": "short"})
        assert "new_password" in short.errors

        mismatch = PasswordChangeForm({
            "current_password": "old-pass", "new_password": "brand-new-1", "confirm_password": "brand-new-2",
        })
        assert mismatch.errors["confirm_password"] == ["Passwords do not match"]

        same = PasswordChangeForm({
            "current_password": "same-pass-1", "new_password": "same-pass-1", "confirm_password": "same-pass-1",
        })
        assert "new_password" in same.errors

        ok = PasswordChangeForm({
            "current_password": "old-pass", "new_password": "brand-new-1", "confirm_password": "brand-new-1",
        })
        assert ok.is_valid()
