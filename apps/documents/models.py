import os
import time
import uuid

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q
from django.utils.translation import gettext_lazy as _


def document_upload_path(instance, filename):
    """documents/<user id>/<epoch millis>.<ext>"""
    ext = os.path.splitext(filename)[1].lstrip('.').lower()
    name = str(int(time.time() * 1000))
    if ext:
        name = f"{name}.{ext}"
    return f"documents/{instance.user_id}/{name}"


class DocumentQuerySet(models.QuerySet):

    def tag_match_ids(self, term):
        """Ids of documents with at least one tag containing ``term``, case-insensitively."""
        term = (term or '').lower()
        return [
            pk for pk, tags in self.values_list('id', 'tags')
            if any(term in str(tag).lower() for tag in tags or [])
        ]

    def containing_text(self, term):
        """Title, description or any single tag contains ``term``."""
        return self.filter(
            Q(title__icontains=term) | Q(description__icontains=term)
            | Q(id__in=self.tag_match_ids(term))
        )


class Document(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='documents')
    course = models.ForeignKey('academics.Course', on_delete=models.SET_NULL, null=True, blank=True,
                               related_name='documents')
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    file = models.FileField(upload_to=document_upload_path, max_length=255)
    file_size = models.BigIntegerField(default=0)
    file_type = models.CharField(max_length=100, blank=True)
    category = models.CharField(max_length=100, blank=True)
    tags = models.JSONField(default=list, blank=True)
    is_verified = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = DocumentQuerySet.as_manager()

    class Meta:
        db_table = 'documents_document'
        ordering = ['-created_at']

    def __str__(self):
        return self.title

    @property
    def filename(self):
        return os.path.basename(self.file.name) if self.file else ''

    @property
    def extension(self):
        return os.path.splitext(self.file.name)[1].lstrip('.').lower() if self.file else ''

    def clean(self):
        if self.course_id and self.user_id and self.course.user_id != self.user_id:
            raise ValidationError({'course': _('Select one of your own courses.')})
