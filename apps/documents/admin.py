from django.contrib import admin

from .models import Document


@admin.register(Document)
class DocumentAdmin(admin.ModelAdmin):
    list_display = ('title', 'user', 'category', 'course', 'file_type', 'file_size', 'is_verified', 'created_at')
    list_filter = ('is_verified', 'category', 'file_type')
    search_fields = ('title', 'description', 'user__email')
    date_hierarchy = 'created_at'
    raw_id_fields = ('user', 'course')
    readonly_fields = ('file_size', 'file_type', 'created_at', 'updated_at')
