from dataclasses import asdict, fields, replace

import structlog
from django.conf import settings
from django.utils import timezone

from core.store import get_repository

logger = structlog.get_logger(__name__)


def current_profile():
    return get_repository("profiles").get(settings.PRACTICE_CURRENT_USER_ID)


def update_profile(profile, data):
    for name in profile.EDITABLE_FIELDS:
        if name in data:
            setattr(profile, name, data[name])
    get_repository("profiles").save(profile)
    logger.info("profile saved", profile_id=profile.id)
    return profile


def update_settings(profile, section, data):
    """Replace one nested settings block (security, notifications or preferences)."""
    current = getattr(profile, section)
    known = {f.name for f in fields(current)}
    setattr(profile, section, replace(current, **{k: v for k, v in data.items() if k in known}))
    get_repository("profiles").save(profile)
    logger.info("settings saved", profile_id=profile.id, section=section,
                values=asdict(getattr(profile, section)))
    return profile


def change_password(profile, today=None):
    # no credential store: only the change date is tracked
    profile.security.last_password_change = today or timezone.localdate()
    get_repository("profiles").save(profile)
    logger.info("password changed", profile_id=profile.id)
    return profile
