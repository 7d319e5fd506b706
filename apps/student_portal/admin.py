from django.contrib import admin

from .models import PortalSettings


@admin.register(PortalSettings)
class PortalSettingsAdmin(admin.ModelAdmin):
    list_display = ('user', 'theme', 'email_notifications', 'onboarding_completed', 'updated_at')
    list_filter = ('theme', 'onboarding_completed')
    search_fields = ('user__email',)
