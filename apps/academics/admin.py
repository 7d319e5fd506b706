from django.contrib import admin

from .models import Course, Grade, Schedule


class ScheduleInline(admin.TabularInline):
    model = Schedule
    extra = 0


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = ('course_code', 'course_name', 'user', 'semester', 'academic_year', 'credits', 'status')
    list_filter = ('status', 'semester', 'academic_year')
    search_fields = ('course_code', 'course_name', 'instructor_name', 'user__email')
    raw_id_fields = ('user',)
    inlines = [ScheduleInline]


@admin.register(Schedule)
class ScheduleAdmin(admin.ModelAdmin):
    list_display = ('course', 'day_of_week', 'start_time', 'end_time', 'location')
    list_filter = ('day_of_week',)
    search_fields = ('course__course_code', 'course__course_name', 'location')


@admin.register(Grade)
class GradeAdmin(admin.ModelAdmin):
    list_display = ('course', 'user', 'grade_type', 'grade_value', 'max_value', 'letter_grade', 'date_received')
    list_filter = ('grade_type', 'letter_grade')
    search_fields = ('course__course_code', 'course__course_name', 'user__email')
    date_hierarchy = 'date_received'
    raw_id_fields = ('user', 'course')
