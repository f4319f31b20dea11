"""Invoice template library screens."""

from django.contrib import messages
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_POST

from core.http import is_htmx, render_not_found
from core.store import RecordNotFound, get_repository

from .fixtures import default_fields
from .forms import TemplateFieldFormSet, TemplateFilterForm, TemplateForm
from .library import (
    LAYOUT_DESCRIPTIONS,
    DefaultTemplateProtected,
    create_template,
    delete_template,
    duplicate_template,
    filter_templates,
    toggle_template,
    update_template,
)

FIELDS_PREFIX = "fields"


def _templates():
    return get_repository("templates")


def _template_not_found(request, template_id):
    return render_not_found(request, f"Template {template_id}", reverse("template-list"), "Return to Templates")


def _field_initial(fields):
    return [
        {"id": f.id, "label": f.label, "type": f.type, "required": f.required, "visible": f.visible}
        for f in fields
    ]


def _render_list(request):
    filter_form = TemplateFilterForm(request.GET or None)
    q, category = "", "All"
    if filter_form.is_valid():
        q = filter_form.cleaned_data["q"].strip()
        category = filter_form.cleaned_data["category"] or "All"
    ctx = {
        "templates": filter_templates(_templates().all(), q=q, category=category),
        "filter_form": filter_form if filter_form.is_bound else TemplateFilterForm(),
        "q": q,
        "category": category,
    }
    template = "includes/template_grid.html" if is_htmx(request) else "invoices/template_list.html"
    return render(request, template, ctx)


def _render_form(request, form, formset, template_obj=None):
    return render(request, "invoices/template_form.html", {
        "form": form,
        "formset": formset,
        "obj": template_obj,
        "layout_descriptions": LAYOUT_DESCRIPTIONS,
    })


# ---------- list ----------
def template_list(request):
    return _render_list(request)


# ---------- create / edit ----------
def template_create(request):
    if request.method == "POST":
        form = TemplateForm(request.POST)
        formset = TemplateFieldFormSet(request.POST, prefix=FIELDS_PREFIX)
        if form.is_valid() and formset.is_valid():
            obj = create_template(_templates(), form.cleaned_data, formset.template_fields())
            messages.success(request, f"Template {obj.name} created successfully!")
            return redirect("template-list")
    else:
        form = TemplateForm()
        formset = TemplateFieldFormSet(prefix=FIELDS_PREFIX, initial=_field_initial(default_fields()))
    return _render_form(request, form, formset)


def template_update(request, template_id):
    try:
        obj = _templates().get(template_id)
    except RecordNotFound:
        return _template_not_found(request, template_id)

    if request.method == "POST":
        form = TemplateForm(request.POST)
        formset = TemplateFieldFormSet(request.POST, prefix=FIELDS_PREFIX)
        if form.is_valid() and formset.is_valid():
            update_template(_templates(), obj, form.cleaned_data, formset.template_fields())
            messages.success(request, f"Template {obj.name} updated successfully!")
            return redirect("template-list")
    else:
        form = TemplateForm(initial={
            "name": obj.name,
            "description": obj.description,
            "category": obj.category,
            "layout": obj.layout,
            "header_color": obj.header_color,
            "accent_color": obj.accent_color,
            "font_family": obj.font_family,
        })
        formset = TemplateFieldFormSet(prefix=FIELDS_PREFIX, initial=_field_initial(obj.fields))
    return _render_form(request, form, formset, obj)


# ---------- actions ----------
@require_POST
def template_duplicate(request, template_id):
    try:
        obj = _templates().get(template_id)
    except RecordNotFound:
        return _template_not_found(request, template_id)
    clone = duplicate_template(_templates(), obj)
    messages.success(request, f"Created {clone.name}.")
    if is_htmx(request):
        return _render_list(request)
    return redirect("template-list")


def template_delete(request, template_id):
    try:
        obj = _templates().get(template_id)
    except RecordNotFound:
        return _template_not_found(request, template_id)

    if request.method == "POST":
        try:
            delete_template(_templates(), template_id)
        except DefaultTemplateProtected as exc:
            messages.error(request, str(exc))
        else:
            messages.success(request, f"Template {obj.name} deleted.")
        if is_htmx(request):
            return _render_list(request)  # return refreshed grid
        return redirect("template-list")
    return render(request, "invoices/template_confirm_delete.html", {"obj": obj})


@require_POST
def template_toggle(request, template_id):
    try:
        obj = _templates().get(template_id)
    except RecordNotFound:
        return _template_not_found(request, template_id)
    toggle_template(_templates(), obj)
    if is_htmx(request):
        return _render_list(request)
    return redirect("template-list")
