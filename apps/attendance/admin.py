from django.contrib import admin

from .models import AttendanceRecord


@admin.register(AttendanceRecord)
class AttendanceRecordAdmin(admin.ModelAdmin):
    list_display = ('user', 'course', 'date', 'status')
    list_filter = ('status', 'date')
    search_fields = ('user__email', 'course__course_code', 'course__course_name')
    date_hierarchy = 'date'
    raw_id_fields = ('user', 'course')
