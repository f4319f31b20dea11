from dataclasses import dataclass
from decimal import Decimal

from django.utils import timezone

from core.filters import matches_choice, matches_search, sort_records

from .classification import is_expiring_soon, is_low_stock

SORT_KEYS = {
    "name": lambda item: item.name.lower(),
    "stock": lambda item: item.current_stock,
    "expiry": lambda item: item.expiry_date,
    "category": lambda item: item.category,
}


@dataclass
class InventorySummary:
    total_items: int
    low_stock: int
    expiring_soon: int
    total_value: Decimal


def filter_inventory(items, q="", category="all", low_stock_only=False, expiring_only=False, today=None):
    today = today or timezone.localdate()
    term = (q or "").strip()
    return [
        item for item in items
        if (matches_search(term, item.name, item.supplier, item.batch_number) or term in item.barcode)
        and matches_choice(category, item.category)
        and (not low_stock_only or is_low_stock(item))
        and (not expiring_only or is_expiring_soon(item.expiry_date, today))
    ]


def sort_inventory(items, sort_by="name"):
    return sort_records(items, SORT_KEYS, sort_by)


def inventory_summary(items, today=None):
    today = today or timezone.localdate()
    return InventorySummary(
        total_items=len(items),
        low_stock=sum(1 for item in items if is_low_stock(item)),
        expiring_soon=sum(1 for item in items if is_expiring_soon(item.expiry_date, today)),
        total_value=sum((item.stock_value for item in items), Decimal("0")),
    )
