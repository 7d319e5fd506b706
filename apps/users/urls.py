# users/urls.py
from django.urls import path

from .views import (
    AvatarUploadView,
    SettingsView,
    SignOutAllDevicesView,
    UserProfileUpdateView,
    UserProfileView,
)

urlpatterns = [
    path('profile/', UserProfileView.as_view(), name='users_profile'),
    path('profile/edit/', UserProfileUpdateView.as_view(), name='users_profile_edit'),
    path('profile/avatar/', AvatarUploadView.as_view(), name='avatar_upload'),

    path('settings/', SettingsView.as_view(), name='settings'),
    path('settings/sessions/sign-out-all/', SignOutAllDevicesView.as_view(), name='sign_out_all_devices'),
]
