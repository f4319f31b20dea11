"""Invoice template library: search, create, edit, duplicate, delete."""

import copy
import uuid

import structlog
from django.utils import timezone

from core.filters import matches_choice, matches_search

from .models import InvoiceTemplate, TemplateLayout

logger = structlog.get_logger(__name__)

CATEGORIES = ["Medical", "Emergency", "Therapy", "Laboratory", "Surgery", "Dental"]
FONTS = ["Inter", "Roboto", "Open Sans", "Lato", "Montserrat", "Poppins"]
LAYOUT_DESCRIPTIONS = {
    TemplateLayout.STANDARD: "Traditional invoice format with header and line items",
    TemplateLayout.COMPACT: "Space-efficient design for simple invoices",
    TemplateLayout.DETAILED: "Comprehensive format with additional fields and sections",
}


class DefaultTemplateProtected(Exception):
    def __init__(self, template):
        super().__init__("Default templates cannot be deleted.")
        self.template = template


def new_template_id():
    return f"TPL-{uuid.uuid4().hex[:8].upper()}"


def filter_templates(templates, q="", category="All"):
    return [
        t for t in templates
        if matches_search(q, t.name, t.description) and matches_choice(_category(category), t.category)
    ]


def _category(category):
    # the library screen labels "no filter" as All
    return "" if (category or "").lower() == "all" else category


def create_template(repo, data, fields, today=None):
    template = InvoiceTemplate(
        id=new_template_id(),
        name=data["name"],
        description=data["description"],
        category=data["category"],
        fields=list(fields),
        is_default=False,
        is_active=True,
        usage_count=0,
        last_used=today or timezone.localdate(),
        layout=data["layout"],
        header_color=data["header_color"],
        accent_color=data["accent_color"],
        font_family=data["font_family"],
    )
    repo.save(template)
    logger.info("template created", template_id=template.id, name=template.name)
    return template


def update_template(repo, template, data, fields):
    """Replace the editable parts; id, usage and default flag are kept."""
    fields = list(fields)
    if not fields:
        raise ValueError("Template must have at least one field.")
    template.name = data["name"]
    template.description = data["description"]
    template.category = data["category"]
    template.layout = data["layout"]
    template.header_color = data["header_color"]
    template.accent_color = data["accent_color"]
    template.font_family = data["font_family"]
    template.fields = fields
    repo.save(template)
    logger.info("template updated", template_id=template.id)
    return template


def duplicate_template(repo, template, today=None):
    clone = copy.deepcopy(template)
    clone.id = new_template_id()
    clone.name = f"{template.name} (Copy)"
    clone.is_default = False
    clone.usage_count = 0
    clone.last_used = today or timezone.localdate()
    repo.save(clone)
    logger.info("template duplicated", source_id=template.id, template_id=clone.id)
    return clone


def delete_template(repo, template_id):
    template = repo.get(template_id)
    if template.is_default:
        logger.warning("default template delete refused", template_id=template_id)
        raise DefaultTemplateProtected(template)
    repo.delete(template_id)
    logger.info("template deleted", template_id=template_id)
    return template


def toggle_template(repo, template):
    template.is_active = not template.is_active
    repo.save(template)
    return template
