from django.urls import path

from . import views

urlpatterns = [
    path('', views.HomeView.as_view(), name='home'),
    path('onboarding/complete/', views.CompleteOnboardingView.as_view(), name='onboarding_complete'),
    path('more/', views.MoreView.as_view(), name='more'),
    path('digital-id/', views.DigitalIDView.as_view(), name='digital_id'),
    path('digital-id/qr.png', views.DigitalIDQRDownloadView.as_view(), name='digital_id_qr'),
    path('digital-id/card.png', views.DigitalIDCardDownloadView.as_view(), name='digital_id_card'),
    path('settings/preferences/', views.UpdatePreferencesView.as_view(), name='update_preferences'),
    path('settings/theme/', views.UpdateThemeView.as_view(), name='update_theme'),
]
