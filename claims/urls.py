from django.urls import path
from . import views

urlpatterns = [
    path("", views.claim_list, name="claim-list"),
    path("new/", views.claim_create, name="claim-create"),
    path("export/", views.claim_export, name="claim-export"),
    path("form/close/", views.claim_form_close, name="claim-form-close"),
    path("<str:claim_id>/", views.claim_detail, name="claim-detail"),
    path("<str:claim_id>/status/", views.claim_status_update, name="claim-status"),
]
