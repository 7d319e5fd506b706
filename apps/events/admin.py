from django.contrib import admin

from .models import CalendarEvent


@admin.register(CalendarEvent)
class CalendarEventAdmin(admin.ModelAdmin):
    list_display = ('title', 'user', 'event_date', 'event_type', 'priority', 'is_all_day', 'course')
    list_filter = ('event_type', 'priority', 'is_all_day')
    search_fields = ('title', 'description', 'user__email')
    date_hierarchy = 'event_date'
    raw_id_fields = ('user', 'course')
