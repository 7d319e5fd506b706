import uuid

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext_lazy as _


class CalendarEvent(models.Model):
    EVENT_TYPE_CHOICES = [
        ('exam', 'Exam'),
        ('assignment', 'Assignment'),
        ('deadline', 'Deadline'),
        ('class', 'Class'),
        ('personal', 'Personal'),
        ('other', 'Other'),
    ]
    PRIORITY_CHOICES = [
        ('low', 'Low'),
        ('normal', 'Normal'),
        ('high', 'High'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='calendar_events')
    course = models.ForeignKey('academics.Course', on_delete=models.SET_NULL, null=True, blank=True,
                               related_name='calendar_events')
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    event_date = models.DateField()
    event_type = models.CharField(max_length=20, choices=EVENT_TYPE_CHOICES, default='other')
    is_all_day = models.BooleanField(default=True)
    start_time = models.TimeField(null=True, blank=True)
    end_time = models.TimeField(null=True, blank=True)
    priority = models.CharField(max_length=10, choices=PRIORITY_CHOICES, default='normal')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'events_calendar_event'
        ordering = ['event_date', 'start_time']

    def __str__(self):
        return f"{self.title} ({self.event_date})"

    def clean(self):
        errors = {}
        if self.course_id and self.user_id and self.course.user_id != self.user_id:
            errors['course'] = _('Select one of your own courses.')
        if not self.is_all_day and not self.start_time:
            errors['start_time'] = _('Set a start time or mark the event as all day.')
        if self.start_time and self.end_time and self.end_time <= self.start_time:
            errors['end_time'] = _('End time must be after start time.')
        if errors:
            raise ValidationError(errors)
