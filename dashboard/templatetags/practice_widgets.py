from django import template

from dashboard.widgets import format_money

register = template.Library()


@register.filter
def money(value):
    if value in (None, ""):
        return ""
    return format_money(value)


@register.inclusion_tag("widgets/stat_card.html")
def stat_card(card):
    return {"card": card}


@register.inclusion_tag("widgets/progress_bar.html")
def progress_bar(bar, show_percentage=False):
    return {"bar": bar, "show_percentage": show_percentage}


@register.inclusion_tag("widgets/metrics_list.html")
def metrics_list(title, items):
    return {"title": title, "items": items}


@register.inclusion_tag("widgets/pending_payments.html")
def pending_payments(payments):
    return {"payments": payments}
