from django.apps import AppConfig


class AcademicsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.academics'

    def ready(self):
        from apps.core.realtime import register_model

        from .models import Course, Grade, Schedule

        register_model(Course, 'courses')
        register_model(Schedule, 'schedules', owner_field='course.user_id')
        register_model(Grade, 'grades')
