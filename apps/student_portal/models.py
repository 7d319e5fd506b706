# student_portal/models.py
import uuid

from django.conf import settings
from django.db import models


class PortalSettings(models.Model):
    """Per-student preferences: theme, notification toggles and onboarding state."""

    THEME_CHOICES = [
        ('light', 'Light'),
        ('dark', 'Dark'),
        ('system', 'System'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="portal_settings"
    )
    theme = models.CharField(max_length=10, choices=THEME_CHOICES, default='system')

    email_notifications = models.BooleanField(default=True)
    grade_updates = models.BooleanField(default=True)
    attendance_alerts = models.BooleanField(default=True)
    upcoming_classes = models.BooleanField(default=True)
    assignment_due_dates = models.BooleanField(default=True)
    calendar_reminders = models.BooleanField(default=True)

    onboarding_completed = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "student_portal_settings"
        verbose_name = "Portal Settings"
        verbose_name_plural = "Portal Settings"

    def __str__(self):
        return f"Portal settings for {self.user.email}"

    @classmethod
    def for_user(cls, user):
        portal_settings, _ = cls.objects.get_or_create(user=user)
        return portal_settings
