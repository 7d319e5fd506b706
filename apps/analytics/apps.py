from django.apps import AppConfig


class AnalyticsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.analytics'

    def ready(self):
        from apps.core.realtime import feed

        from .services import invalidate_standing

        for table in ('courses', 'grades', 'attendance'):
            feed.subscribe(table, None, invalidate_standing)
