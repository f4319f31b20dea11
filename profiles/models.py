from dataclasses import dataclass, field
from datetime import date

from django.db import models


class AccountStatus(models.TextChoices):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


SESSION_TIMEOUT_CHOICES = [
    (15, "15 minutes"),
    (30, "30 minutes"),
    (60, "1 hour"),
    (120, "2 hours"),
    (240, "4 hours"),
]


@dataclass
class SecuritySettings:
    two_factor_enabled: bool = False
    last_password_change: date = None
    login_notifications: bool = True
    session_timeout: int = 30


@dataclass
class NotificationSettings:
    email_notifications: bool = True
    sms_notifications: bool = False
    push_notifications: bool = False
    appointment_reminders: bool = True
    payment_alerts: bool = True
    system_updates: bool = False


@dataclass
class Preferences:
    language: str = "en-us"
    timezone: str = "America/Los_Angeles"
    date_format: str = "MM/DD/YYYY"


@dataclass
class UserProfile:
    id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    date_of_birth: date
    address: str
    city: str
    state: str
    zip_code: str
    country: str
    role: str
    department: str
    employee_id: str
    join_date: date
    license_number: str = ""
    specialization: str = ""
    status: str = AccountStatus.ACTIVE
    security: SecuritySettings = field(default_factory=SecuritySettings)
    notifications: NotificationSettings = field(default_factory=NotificationSettings)
    preferences: Preferences = field(default_factory=Preferences)

    EDITABLE_FIELDS = (
        "first_name", "last_name", "email", "phone", "date_of_birth",
        "address", "city", "state", "zip_code", "country",
    )

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"

    @property
    def is_active(self):
        return self.status == AccountStatus.ACTIVE
