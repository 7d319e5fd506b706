from django.apps import AppConfig


class StudentPortalConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.student_portal'
    verbose_name = 'Student Portal'
