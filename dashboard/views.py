from django.shortcuts import render
from django.utils import timezone

from claims.services import claim_summary
from core.store import get_repository

from . import widgets


def dashboard(request):
    invoices = get_repository("invoices").all()
    claims = get_repository("claims").all()
    ctx = {
        "stat_cards": widgets.invoice_stat_cards(invoices),
        "recent_invoices": widgets.recent_invoices(invoices),
        "pending": widgets.pending_payments(invoices, timezone.localdate()),
        "claim_summary": claim_summary(claims),
    }
    return render(request, "dashboard/dashboard.html", ctx)


def reports(request):
    invoices = get_repository("invoices").all()
    ctx = {
        "stat_cards": widgets.invoice_stat_cards(invoices),
        "status_bars": widgets.status_breakdown(invoices),
        "collections": widgets.collections_by_method(invoices),
        "approval_bars": widgets.provider_approval_bars(get_repository("providers").all()),
    }
    return render(request, "dashboard/reports.html", ctx)
