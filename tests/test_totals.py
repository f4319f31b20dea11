"""Invoice totals calculator."""

from decimal import Decimal
from types import SimpleNamespace

from invoices.models import LineItem
from invoices.totals import as_decimal, compute_totals, line_total, to_money


def _items(*totals):
    return [SimpleNamespace(total=Decimal(t)) for t in totals]


class TestComputeTotals:
    def test_worked_example(self):
        totals = compute_totals(_items("200", "150", "100"), discount=50, tax_rate=Decimal("8.5"))
        assert totals.subtotal == Decimal("450")
        assert totals.taxable_base == Decimal("400")
        assert totals.tax == Decimal("34")
        assert totals.total == Decimal("434")
        assert totals.item_count == 3

    def test_no_items(self):
        totals = compute_totals([])
        assert totals.subtotal == 0
        assert totals.total == 0
        assert totals.average_item == 0

    def test_float_tax_rate_is_exact(self):
        totals = compute_totals(_items("100"), tax_rate=8.5)
        assert totals.tax == Decimal("8.5")

    def test_tax_rounded_to_cents(self):
        totals = compute_totals(_items("123.45"), tax_rate=Decimal("8.5"))
        assert totals.tax == Decimal("10.49")
        assert totals.total == Decimal("133.94")
        assert totals.total.as_tuple().exponent == -2

    def test_discount_above_subtotal_is_not_clamped(self):
        """The calculator reports a negative base; forms refuse such input."""
        totals = compute_totals(_items("100"), discount=150, tax_rate=10)
        assert totals.taxable_base == Decimal("-50")
        assert totals.tax == Decimal("-5")
        assert totals.total == Decimal("-55")

    def test_idempotent(self):
        items = _items("19.99", "5.01")
        assert compute_totals(items, 3, 7) == compute_totals(items, 3, 7)

    def test_total_formula_holds(self):
        items = _items("120.00", "33.33", "0.67")
        d, r = Decimal("4.00"), Decimal("12.5")
        totals = compute_totals(items, d, r)
        subtotal = Decimal("154.00")
        assert totals.total == subtotal - d + (subtotal - d) * r / 100

    def test_average_item(self):
        assert compute_totals(_items("10", "20", "30")).average_item == Decimal("20")


class TestLineItems:
    def test_line_total_defaults_to_quantity_times_price(self):
        item = LineItem(id="1", service_code="90471", description="Immunization", quantity=2, unit_price="25.00")
        assert item.total == Decimal("50.00")

    def test_line_total(self):
        assert line_total(3, "12.50") == Decimal("37.50")

    def test_money_helpers(self):
        assert as_decimal(None) == 0
        assert as_decimal("") == 0
        assert to_money("19.999") == Decimal("20.00")
        assert str(to_money(2)) == "2.00"
