"""Stock and expiry classification for a single inventory item."""

from django.conf import settings
from django.utils import timezone

from .models import StockStatus


def is_low_stock(item):
    return item.current_stock <= item.min_stock


def stock_status(item):
    # low wins when min and max overlap, keeping the classes exclusive
    if is_low_stock(item):
        return StockStatus.LOW
    if item.current_stock >= item.max_stock:
        return StockStatus.HIGH
    return StockStatus.NORMAL


def days_until_expiry(expiry_date, today=None):
    return (expiry_date - (today or timezone.localdate())).days


def is_expiring_soon(expiry_date, today=None, window_days=None):
    """True when ``expiry_date`` is within the window; expired stock counts too."""
    if window_days is None:
        window_days = getattr(settings, "PRACTICE_EXPIRING_SOON_DAYS", 90)
    return days_until_expiry(expiry_date, today) <= window_days
