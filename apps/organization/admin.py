# admin.py
from django.contrib import admin

from .models import Institution


@admin.register(Institution)
class InstitutionAdmin(admin.ModelAdmin):
    list_display = ('name', 'short_name', 'type', 'contact_email', 'is_active')
    list_filter = ('type', 'is_active')
    search_fields = ('name', 'short_name', 'contact_email')
    readonly_fields = ('created_at', 'updated_at')
