from django.urls import path
from . import template_views, views

urlpatterns = [
    path("", views.invoice_list, name="invoice-list"),
    path("new/", views.invoice_create, name="invoice-create"),
    path("new/totals/", views.invoice_totals_preview, name="invoice-totals"),
    path("services/search/", views.service_search, name="service-search"),
    path("patients/search/", views.patient_search, name="patient-search"),

    # Templates
    path("templates/", template_views.template_list, name="template-list"),
    path("templates/new/", template_views.template_create, name="template-create"),
    path("templates/<str:template_id>/edit/", template_views.template_update, name="template-update"),
    path("templates/<str:template_id>/duplicate/", template_views.template_duplicate, name="template-duplicate"),
    path("templates/<str:template_id>/delete/", template_views.template_delete, name="template-delete"),
    path("templates/<str:template_id>/toggle/", template_views.template_toggle, name="template-toggle"),

    # Detail & payments
    path("<str:invoice_id>/", views.invoice_detail, name="invoice-detail"),
    path("<str:invoice_id>/payments/new/", views.payment_create, name="payment-create"),
    path("<str:invoice_id>/status/", views.invoice_status_update, name="invoice-status"),
]
