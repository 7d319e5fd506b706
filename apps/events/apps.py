from django.apps import AppConfig


class EventsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.events'

    def ready(self):
        from apps.core.realtime import register_model

        from .models import CalendarEvent

        register_model(CalendarEvent, 'calendar_events')
