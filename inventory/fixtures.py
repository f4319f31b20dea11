"""Seed records for the pharmacy inventory screen."""

from datetime import date
from decimal import Decimal

from .models import InventoryCategory, InventoryItem


def seed_inventory():
    rows = [
        ("1", "Paracetamol 500mg", "1234567890123", InventoryCategory.OTC, 150, 50, 500,
         "8.50", "12.50", "PharmaCorp Ltd", date(2025, 8, 15), "PC240815", "A1-01", date(2024, 11, 1)),
        ("2", "Amoxicillin 250mg", "2345678901234", InventoryCategory.PRESCRIPTION, 25, 30, 200,
         "18.00", "25.00", "MediLabs Inc", date(2025, 3, 20), "ML250320", "B2-15", date(2024, 10, 15)),
        ("3", "Vitamin C 1000mg", "3456789012345", InventoryCategory.SUPPLEMENT, 200, 75, 300,
         "12.25", "18.75", "HealthPlus", date(2026, 1, 10), "HP010126", "C3-08", date(2024, 11, 10)),
        ("4", "Digital Thermometer", "4567890123456", InventoryCategory.MEDICAL_DEVICE, 15, 10, 50,
         "45.00", "89.99", "MedTech Solutions", date(2027, 12, 31), "MT123456", "D1-03", date(2024, 9, 20)),
        ("5", "Cough Syrup 200ml", "5678901234567", InventoryCategory.OTC, 8, 20, 100,
         "9.80", "15.30", "ColdRelief Pharma", date(2024, 12, 15), "CR151224", "A2-12", date(2024, 8, 30)),
    ]
    return [
        InventoryItem(
            id=item_id, name=name, barcode=barcode, category=category,
            current_stock=stock, min_stock=min_stock, max_stock=max_stock,
            unit_cost=Decimal(cost), selling_price=Decimal(price), supplier=supplier,
            expiry_date=expiry, batch_number=batch, location=location, last_restocked=restocked,
        )
        for (item_id, name, barcode, category, stock, min_stock, max_stock, cost, price,
             supplier, expiry, batch, location, restocked) in rows
    ]
