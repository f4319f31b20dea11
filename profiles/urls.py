from django.urls import path
from . import views

urlpatterns = [
    path("", views.profile_detail, name="profile"),
    path("update/", views.profile_update, name="profile-update"),
    path("password/", views.password_change, name="password-change"),
    path("settings/<str:section>/", views.settings_update, name="settings-update"),
]
