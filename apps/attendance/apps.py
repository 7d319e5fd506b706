from django.apps import AppConfig


class AttendanceConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.attendance'

    def ready(self):
        from apps.core.realtime import register_model

        from .models import AttendanceRecord

        register_model(AttendanceRecord, 'attendance')
