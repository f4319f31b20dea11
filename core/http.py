from django.shortcuts import render


def is_htmx(request):
    """Works whether or not django-htmx middleware is installed."""
    return bool(getattr(request, "htmx", False)) or request.headers.get("HX-Request") == "true"


def render_not_found(request, what, back_url, back_label):
    """Static "not found" page with a link back to the listing."""
    return render(
        request,
        "includes/not_found.html",
        {"what": what, "back_url": back_url, "back_label": back_label},
        status=404,
    )
