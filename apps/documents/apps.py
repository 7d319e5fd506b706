from django.apps import AppConfig


class DocumentsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.documents'

    def ready(self):
        from apps.core.realtime import register_model

        from .models import Document

        register_model(Document, 'documents')
