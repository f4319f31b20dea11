from django.shortcuts import render
from django.utils import timezone

from core.http import is_htmx
from core.store import get_repository

from .classification import days_until_expiry, is_expiring_soon, stock_status
from .forms import InventoryFilterForm
from .services import filter_inventory, inventory_summary, sort_inventory


def inventory_list(request):
    today = timezone.localdate()
    filter_form = InventoryFilterForm(request.GET or None)
    opts = {"q": "", "category": "all", "sort": "name", "low_stock": False, "expiring_soon": False}
    if filter_form.is_valid():
        opts.update({k: v for k, v in filter_form.cleaned_data.items() if v not in (None, "")})

    items = get_repository("inventory").all()
    visible = sort_inventory(
        filter_inventory(
            items,
            q=opts["q"],
            category=opts["category"],
            low_stock_only=opts["low_stock"],
            expiring_only=opts["expiring_soon"],
            today=today,
        ),
        opts["sort"],
    )
    # classification is recomputed per render over the visible rows
    rows = [
        {
            "item": item,
            "stock_status": stock_status(item),
            "expiring_soon": is_expiring_soon(item.expiry_date, today),
            "days_left": days_until_expiry(item.expiry_date, today),
        }
        for item in visible
    ]
    ctx = {
        "rows": rows,
        "summary": inventory_summary(items, today),
        "filter_form": filter_form if filter_form.is_bound else InventoryFilterForm(),
        "opts": opts,
    }
    if is_htmx(request):
        return render(request, "includes/inventory_table.html", ctx)
    return render(request, "inventory/inventory_list.html", ctx)
