"""Patient directory and billable service catalog shared by claims and invoices."""

from dataclasses import dataclass
from decimal import Decimal

from .filters import matches_search
from .store import get_repository


@dataclass
class Patient:
    id: str
    name: str
    insurance: str
    phone: str
    email: str = ""
    address: str = ""
    insurance_id: str = ""

    @property
    def label(self):
        return f"{self.name} ({self.id})"


@dataclass
class ServiceItem:
    code: str
    description: str
    price: Decimal
    category: str


def seed_patients():
    return [
        Patient("P-1001", "John Smith", "Blue Cross Blue Shield", "(555) 123-4567",
                "john.smith@email.com", "123 Main St, Anytown, ST 12345", "BC123456789"),
        Patient("P-1002", "Sarah Johnson", "Aetna Healthcare", "(555) 987-6543",
                "sarah.johnson@email.com", "789 Oak Street, Hometown, ST 54321", "AE987654321"),
        Patient("P-1003", "Michael Brown", "Humana", "(555) 456-7890",
                "michael.brown@email.com", "42 Elm Road, Lakeside, ST 24680", "HU456789123"),
    ]


def seed_services():
    rows = [
        ("99213", "Office Visit - Established Patient", "200.00", "Office Visits"),
        ("99214", "Office Visit - Detailed", "275.00", "Office Visits"),
        ("99215", "Office Visit - Comprehensive", "350.00", "Office Visits"),
        ("99285", "Emergency Department Visit - High Complexity", "800.00", "Emergency"),
        ("80053", "Comprehensive Metabolic Panel", "150.00", "Lab Tests"),
        ("85025", "Complete Blood Count", "100.00", "Lab Tests"),
        ("71020", "Chest X-Ray", "200.00", "Imaging"),
        ("36415", "Blood Draw", "50.00", "Procedures"),
        ("90471", "Immunization Administration", "25.00", "Procedures"),
        ("J3420", "B-12 Injection", "75.00", "Medications"),
    ]
    return [ServiceItem(code, desc, Decimal(price), cat) for code, desc, price, cat in rows]


def patient_choices():
    return [(p.id, p.label) for p in get_repository("patients").all()]


def search_patients(term):
    # phone numbers match on the raw digits/punctuation the user typed
    return [
        p for p in get_repository("patients").all()
        if matches_search(term, p.name) or (term or "").strip() in p.phone
    ]


def search_services(term):
    return [
        s for s in get_repository("services").all()
        if matches_search(term, s.code, s.description, s.category)
    ]
