from django import forms
from django.utils.translation import gettext_lazy as _

from .models import PortalSettings


class NotificationPreferencesForm(forms.ModelForm):
    """Email switch plus the five notification toggles"""

    class Meta:
        model = PortalSettings
        fields = [
            'email_notifications',
            'grade_updates',
            'attendance_alerts',
            'upcoming_classes',
            'assignment_due_dates',
            'calendar_reminders',
        ]
        labels = {
            'email_notifications': _('Email Notifications'),
            'grade_updates': _('Grade Updates'),
            'attendance_alerts': _('Attendance Alerts'),
            'upcoming_classes': _('Upcoming Classes'),
            'assignment_due_dates': _('Assignment Due Dates'),
            'calendar_reminders': _('Calendar Reminders'),
        }
        help_texts = {
            'email_notifications': _('Receive notifications via email'),
            'grade_updates': _('Get notified when new grades are posted'),
            'attendance_alerts': _('Alerts when attendance falls below threshold'),
            'upcoming_classes': _('Reminders before your classes start'),
            'assignment_due_dates': _('Reminders for upcoming assignment deadlines'),
            'calendar_reminders': _('Notifications for calendar events'),
        }
        widgets = {
            name: forms.CheckboxInput(attrs={'class': 'form-check-input', 'role': 'switch'})
            for name in fields
        }


class ThemeForm(forms.ModelForm):
    class Meta:
        model = PortalSettings
        fields = ['theme']
        widgets = {
            'theme': forms.RadioSelect(attrs={'class': 'form-check-input'}),
        }
