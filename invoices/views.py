from datetime import timedelta
from types import SimpleNamespace

from django.contrib import messages
from django.shortcuts import redirect, render
from django.urls import reverse
from django.utils import timezone
from django.views.decorators.http import require_POST

from core.directory import search_patients, search_services
from core.http import is_htmx, render_not_found
from core.store import RecordNotFound, get_repository

from .forms import InvoiceFilterForm, InvoiceForm, InvoiceStatusForm, LineItemFormSet, PaymentForm
from .payments import record_payment, update_status
from .services import PAYMENT_TERMS_DAYS, create_invoice, filter_invoices, invoice_summary
from .totals import as_decimal, compute_totals, line_total

LINE_ITEMS_PREFIX = "items"


# ---------- helpers ----------
def _invoice_or_404(request, invoice_id):
    try:
        return get_repository("invoices").get(invoice_id), None
    except RecordNotFound:
        return None, render_not_found(request, "Invoice", reverse("invoice-list"), "Return to Invoices")


def _render_detail(request, invoice):
    ctx = {
        "invoice": invoice,
        "totals": invoice.totals,
        "payment_form": PaymentForm(invoice=invoice),
        "status_form": InvoiceStatusForm(initial={"status": invoice.status}),
    }
    template = "includes/invoice_detail.html" if is_htmx(request) else "invoices/invoice_detail.html"
    return render(request, template, ctx)


def _preview_rows(formset):
    """Line items usable for a totals preview, skipping rows that don't parse."""
    rows = []
    for form in formset.forms:
        if form.is_valid() and form.cleaned_data and not form.cleaned_data.get("DELETE"):
            data = form.cleaned_data
            rows.append(SimpleNamespace(total=line_total(data["quantity"], data["unit_price"])))
    return rows


# ---------- list & detail ----------
def invoice_list(request):
    filter_form = InvoiceFilterForm(request.GET or None)
    q, status_sel, date_sel = "", "all", "all"
    if filter_form.is_valid():
        q = filter_form.cleaned_data["q"].strip()
        status_sel = filter_form.cleaned_data["status"] or "all"
        date_sel = filter_form.cleaned_data["date"] or "all"

    all_invoices = get_repository("invoices").all()
    invoices = filter_invoices(all_invoices, q=q, status=status_sel, date_range=date_sel)
    ctx = {
        "invoices": invoices,
        "summary": invoice_summary(all_invoices),
        "filter_form": filter_form if filter_form.is_bound else InvoiceFilterForm(),
        "q": q,
        "status_sel": status_sel,
        "date_sel": date_sel,
    }
    if is_htmx(request):
        return render(request, "includes/invoice_table.html", ctx)
    return render(request, "invoices/invoice_list.html", ctx)


def invoice_detail(request, invoice_id):
    invoice, not_found = _invoice_or_404(request, invoice_id)
    if not_found:
        return not_found
    return _render_detail(request, invoice)


# ---------- payments & status ----------
def payment_create(request, invoice_id):
    invoice, not_found = _invoice_or_404(request, invoice_id)
    if not_found:
        return not_found

    if request.method == "POST":
        form = PaymentForm(request.POST, invoice=invoice)
        if form.is_valid():
            data = form.cleaned_data
            record_payment(invoice, data["amount"], data["method"], data["reference"], data["notes"])
            messages.success(request, "Payment recorded successfully!")
            if is_htmx(request):
                return _render_detail(request, invoice)
            return redirect("invoice-detail", invoice_id=invoice.id)
    else:
        form = PaymentForm(invoice=invoice)

    template = "includes/payment_form.html" if is_htmx(request) else "invoices/payment_form.html"
    return render(request, template, {"invoice": invoice, "form": form})


@require_POST
def invoice_status_update(request, invoice_id):
    invoice, not_found = _invoice_or_404(request, invoice_id)
    if not_found:
        return not_found
    form = InvoiceStatusForm(request.POST)
    if not form.is_valid():
        messages.error(request, "Only Sent or Overdue can be set manually.")
    else:
        try:
            update_status(invoice, form.cleaned_data["status"])
        except ValueError as exc:
            messages.error(request, str(exc))
        else:
            messages.success(request, f"Invoice marked {invoice.status}.")
    if is_htmx(request):
        return _render_detail(request, invoice)
    return redirect("invoice-detail", invoice_id=invoice.id)


# ---------- new invoice ----------
def invoice_create(request):
    if request.method == "POST":
        formset = LineItemFormSet(request.POST, prefix=LINE_ITEMS_PREFIX)
        subtotal = compute_totals(_preview_rows(formset)).subtotal
        form = InvoiceForm(request.POST, subtotal=subtotal)
        formset_ok = formset.is_valid()
        if form.is_valid() and formset_ok:
            action = "send" if request.POST.get("action") == "send" else "draft"
            invoice = create_invoice(form.cleaned_data["patient"], form.cleaned_data, formset.rows(), action=action)
            verb = "created and sent" if action == "send" else "saved as draft"
            messages.success(request, f"Invoice {invoice.id} {verb} successfully!")
            return redirect("invoice-detail", invoice_id=invoice.id)
    else:
        today = timezone.localdate()
        form = InvoiceForm(initial={
            "date_issued": today,
            "due_date": today + timedelta(days=PAYMENT_TERMS_DAYS),
        })
        formset = LineItemFormSet(prefix=LINE_ITEMS_PREFIX)

    data = form.data if form.is_bound else {}
    totals = compute_totals(
        _preview_rows(formset),
        discount=_safe_decimal(data.get("discount_amount")),
        tax_rate=_safe_decimal(data.get("tax_rate")),
    )
    return render(request, "invoices/invoice_form.html", {
        "form": form,
        "formset": formset,
        "totals": totals,
    })


def invoice_totals_preview(request):
    """HTMX: recompute the totals panel from the in-progress form."""
    formset = LineItemFormSet(request.POST or None, prefix=LINE_ITEMS_PREFIX)
    rows = _preview_rows(formset) if formset.is_bound else []
    totals = compute_totals(
        rows,
        discount=_safe_decimal(request.POST.get("discount_amount")),
        tax_rate=_safe_decimal(request.POST.get("tax_rate")),
    )
    return render(request, "includes/invoice_totals.html", {"totals": totals})


def _safe_decimal(raw):
    try:
        return as_decimal((raw or "").strip() or "0")
    except ArithmeticError:
        return as_decimal(0)


def service_search(request):
    q = (request.GET.get("q") or "").strip()
    return render(request, "includes/service_results.html", {"services": search_services(q), "q": q})


def patient_search(request):
    q = (request.GET.get("q") or "").strip()
    return render(request, "includes/patient_results.html", {"patients": search_patients(q), "q": q})
