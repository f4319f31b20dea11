from django.contrib import messages
from django.http import HttpResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_POST

from core.http import is_htmx, render_not_found
from core.store import RecordNotFound, get_repository
from dashboard.widgets import provider_approval_bars

from .forms import ClaimFilterForm, ClaimForm, ClaimStatusForm
from .services import claim_summary, filter_claims, submit_claim, update_claim_status, write_claims_csv

TABS = ("overview", "claims", "providers", "reports")


# ---------- helpers ----------
def _claim_not_found(request, claim_id):
    return render_not_found(request, f"Claim {claim_id}", reverse("claim-list"), "Return to Claims")


def _render_detail(request, claim, status_form=None):
    ctx = {"claim": claim, "status_form": status_form or ClaimStatusForm(initial={
        "status": claim.status,
        "approved_amount": claim.approved_amount or None,
        "denial_reason": claim.denial_reason,
    })}
    template = "includes/claim_detail.html" if is_htmx(request) else "claims/claim_detail.html"
    return render(request, template, ctx)


# ---------- list & detail ----------
def claim_list(request):
    tab = request.GET.get("tab") or "overview"
    if tab not in TABS:
        tab = "overview"

    filter_form = ClaimFilterForm(request.GET or None)
    q = status_sel = ""
    if filter_form.is_valid():
        q = filter_form.cleaned_data["q"].strip()
        status_sel = filter_form.cleaned_data["status"]

    all_claims = get_repository("claims").all()
    providers = get_repository("providers").all()
    claims = filter_claims(all_claims, q=q, status=status_sel)

    ctx = {
        "tab": tab,
        "tabs": TABS,
        "claims": claims,
        "q": q,
        "status_sel": status_sel or "all",
        "filter_form": filter_form if filter_form.is_bound else ClaimFilterForm(),
        "summary": claim_summary(all_claims),
        "recent_claims": all_claims[:3],
        "providers": providers,
        "approval_bars": provider_approval_bars(providers),
    }

    if is_htmx(request):
        # Return only the table for HTMX swaps
        return render(request, "includes/claim_table.html", ctx)

    return render(request, "claims/claim_list.html", ctx)


def claim_export(request):
    """Filtered claims list as a CSV download."""
    filter_form = ClaimFilterForm(request.GET or None)
    q = status_sel = ""
    if filter_form.is_valid():
        q = filter_form.cleaned_data["q"].strip()
        status_sel = filter_form.cleaned_data["status"]
    claims = filter_claims(get_repository("claims").all(), q=q, status=status_sel)
    response = HttpResponse(content_type="text/csv")
    response["Content-Disposition"] = 'attachment; filename="insurance-claims.csv"'
    write_claims_csv(response, claims)
    return response


def claim_detail(request, claim_id):
    """Detail card (full page or HTMX partial)."""
    try:
        claim = get_repository("claims").get(claim_id)
    except RecordNotFound:
        return _claim_not_found(request, claim_id)
    return _render_detail(request, claim)


# ---------- create / status ----------
def claim_create(request):
    if request.method == "POST":
        form = ClaimForm(request.POST)
        if form.is_valid():
            data = form.cleaned_data
            claim = submit_claim(
                patient=data["patient"],
                provider=data["insurance_provider"],
                service_date=data["service_date"],
                claim_amount=data["claim_amount"],
                diagnosis=data["diagnosis"],
                procedure_codes=data["procedure_codes"],
                notes=data["notes"],
            )
            messages.success(request, f"Claim {claim.id} submitted.")
            if is_htmx(request):
                return _render_detail(request, claim)
            return redirect("claim-detail", claim_id=claim.id)
    else:
        form = ClaimForm()

    template = "includes/claim_form.html" if is_htmx(request) else "claims/claim_form.html"
    return render(request, template, {"form": form})


@require_POST
def claim_status_update(request, claim_id):
    try:
        claim = get_repository("claims").get(claim_id)
    except RecordNotFound:
        return _claim_not_found(request, claim_id)

    form = ClaimStatusForm(request.POST, claim=claim)
    if not form.is_valid():
        return _render_detail(request, claim, status_form=form)

    data = form.cleaned_data
    update_claim_status(claim, data["status"], data["approved_amount"], data["denial_reason"])
    messages.success(request, f"Claim {claim.id} marked {claim.status_label.lower()}.")
    if is_htmx(request):
        return _render_detail(request, claim)
    return redirect("claim-detail", claim_id=claim.id)


def claim_form_close(request):
    """HTMX helper to clear the inline form panel."""
    return HttpResponse("")  # empty fragment -> panel becomes empty
