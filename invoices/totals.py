"""
Invoice totals.

    subtotal     = sum of line item totals
    taxable base = subtotal - discount
    tax          = taxable base * tax rate / 100, rounded to the cent
    total        = taxable base + tax

The calculator does not clamp: a discount larger than the subtotal produces a
negative base and negative tax. Invoice forms refuse such a discount instead.
"""

from dataclasses import dataclass
from decimal import Decimal

ZERO = Decimal("0")
CENT = Decimal("0.01")
HUNDRED = Decimal("100")


def as_decimal(value):
    if value is None or value == "":
        return ZERO
    if isinstance(value, Decimal):
        return value
    # str() keeps floats such as 8.5 exact instead of their binary expansion
    return Decimal(str(value))


def to_money(value):
    return as_decimal(value).quantize(CENT)


def line_total(quantity, unit_price):
    return as_decimal(quantity) * as_decimal(unit_price)


@dataclass(frozen=True)
class InvoiceTotals:
    subtotal: Decimal
    discount: Decimal
    tax_rate: Decimal
    taxable_base: Decimal
    tax: Decimal
    total: Decimal
    item_count: int

    @property
    def average_item(self):
        return self.subtotal / self.item_count if self.item_count else ZERO


def compute_totals(line_items, discount=0, tax_rate=0):
    """Totals for ``line_items`` (anything with a ``total``)."""
    items = list(line_items)
    discount = as_decimal(discount)
    tax_rate = as_decimal(tax_rate)
    subtotal = sum((as_decimal(item.total) for item in items), ZERO)
    base = subtotal - discount
    tax = to_money(base * tax_rate / HUNDRED)
    return InvoiceTotals(
        subtotal=subtotal,
        discount=discount,
        tax_rate=tax_rate,
        taxable_base=base,
        tax=tax,
        total=base + tax,
        item_count=len(items),
    )
