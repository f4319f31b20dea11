"""Seed record for the signed-in staff member."""

from datetime import date

from .models import NotificationSettings, Preferences, SecuritySettings, UserProfile


def seed_profiles():
    return [
        UserProfile(
            id="EMP001",
            first_name="Dr. Sarah",
            last_name="Johnson",
            email="sarah.johnson@hospital.com",
            phone="+1 (555) 123-4567",
            date_of_birth=date(1985, 3, 15),
            address="123 Medical Center Drive",
            city="San Francisco",
            state="California",
            zip_code="94102",
            country="United States",
            role="Senior Physician",
            department="Cardiology",
            employee_id="DOC-2021-001",
            join_date=date(2021, 1, 15),
            license_number="CA-MD-123456",
            specialization="Interventional Cardiology",
            security=SecuritySettings(
                two_factor_enabled=True,
                last_password_change=date(2024, 10, 15),
                login_notifications=True,
                session_timeout=30,
            ),
            notifications=NotificationSettings(
                email_notifications=True,
                sms_notifications=True,
                push_notifications=False,
                appointment_reminders=True,
                payment_alerts=True,
                system_updates=False,
            ),
            preferences=Preferences(),
        ),
    ]
