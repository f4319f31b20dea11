from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from django.db import models


class InventoryCategory(models.TextChoices):
    PRESCRIPTION = "prescription", "Prescription"
    OTC = "otc", "OTC"
    SUPPLEMENT = "supplement", "Supplement"
    MEDICAL_DEVICE = "medical-device", "Medical Device"


class StockStatus(models.TextChoices):
    LOW = "low", "Low"
    NORMAL = "normal", "Normal"
    HIGH = "high", "High"


@dataclass
class InventoryItem:
    id: str
    name: str
    barcode: str
    category: str
    current_stock: int
    min_stock: int
    max_stock: int
    unit_cost: Decimal
    selling_price: Decimal
    supplier: str
    expiry_date: date
    batch_number: str
    location: str
    last_restocked: date

    @property
    def category_label(self):
        return InventoryCategory(self.category).label

    @property
    def stock_value(self):
        return self.current_stock * self.unit_cost

    def __str__(self):
        return self.name
