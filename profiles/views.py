from dataclasses import asdict

from django.contrib import messages
from django.http import Http404
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_POST

from core.http import is_htmx

from .forms import (
    NotificationSettingsForm,
    PasswordChangeForm,
    PreferencesForm,
    ProfileForm,
    SecuritySettingsForm,
)
from .services import change_password, current_profile, update_profile, update_settings

TABS = (
    ("profile", "Profile Information"),
    ("security", "Security"),
    ("notifications", "Notifications"),
    ("preferences", "Preferences"),
)

SETTINGS_SECTIONS = {
    "security": (SecuritySettingsForm, "Security settings saved!"),
    "notifications": (NotificationSettingsForm, "Notification settings saved!"),
    "preferences": (PreferencesForm, "Preferences saved!"),
}


# ---------- helpers ----------
def _profile_initial(profile):
    return {name: getattr(profile, name) for name in profile.EDITABLE_FIELDS}


def _render(request, profile, tab, **forms):
    ctx = {
        "profile": profile,
        "tab": tab,
        "tabs": TABS,
        "editing": forms.pop("editing", False),
        "profile_form": forms.get("profile_form") or ProfileForm(initial=_profile_initial(profile)),
        "security_form": forms.get("security_form") or SecuritySettingsForm(initial=asdict(profile.security)),
        "notifications_form": forms.get("notifications_form")
        or NotificationSettingsForm(initial=asdict(profile.notifications)),
        "preferences_form": forms.get("preferences_form") or PreferencesForm(initial=asdict(profile.preferences)),
        "password_form": forms.get("password_form") or PasswordChangeForm(),
    }
    template = "includes/profile_tab.html" if is_htmx(request) else "profiles/profile.html"
    return render(request, template, ctx)


# ---------- views ----------
def profile_detail(request):
    tab = request.GET.get("tab") or "profile"
    if tab not in dict(TABS):
        tab = "profile"
    editing = request.GET.get("edit") == "1" and tab == "profile"
    return _render(request, current_profile(), tab, editing=editing)


@require_POST
def profile_update(request):
    profile = current_profile()
    form = ProfileForm(request.POST)
    if not form.is_valid():
        return _render(request, profile, "profile", editing=True, profile_form=form)
    update_profile(profile, form.cleaned_data)
    messages.success(request, "Profile updated successfully!")
    return redirect(f"{reverse('profile')}?tab=profile")


@require_POST
def settings_update(request, section):
    if section not in SETTINGS_SECTIONS:
        raise Http404(f"Unknown settings section {section!r}")
    profile = current_profile()
    form_class, success = SETTINGS_SECTIONS[section]
    form = form_class(request.POST)
    if not form.is_valid():
        return _render(request, profile, section, **{f"{section}_form": form})
    update_settings(profile, section, form.cleaned_data)
    messages.success(request, success)
    return redirect(f"{reverse('profile')}?tab={section}")


@require_POST
def password_change(request):
    profile = current_profile()
    form = PasswordChangeForm(request.POST)
    if not form.is_valid():
        return _render(request, profile, "security", password_form=form)
    change_password(profile)
    messages.success(request, "Password changed successfully!")
    return redirect(f"{reverse('profile')}?tab=security")
