from django.urls import path, include

urlpatterns = [
    path("", include("dashboard.urls")),
    path("insurance/", include("claims.urls")),
    path("invoices/", include("invoices.urls")),
    path("inventory/", include("inventory.urls")),
    path("profile/", include("profiles.urls")),
]
