from django import forms
from django.utils.translation import gettext_lazy as _

from apps.core.mixins import UserCoursesFormMixin

from .models import CalendarEvent


class CalendarEventForm(UserCoursesFormMixin, forms.ModelForm):
    class Meta:
        model = CalendarEvent
        fields = [
            'title', 'description', 'event_date', 'event_type', 'priority',
            'is_all_day', 'start_time', 'end_time', 'course',
        ]
        widgets = {
            'title': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'e.g., Midterm exam'}),
            'description': forms.Textarea(attrs={'class': 'form-control', 'rows': 2}),
            'event_date': forms.DateInput(attrs={'type': 'date', 'class': 'form-control'}),
            'event_type': forms.Select(attrs={'class': 'form-select'}),
            'priority': forms.Select(attrs={'class': 'form-select'}),
            'is_all_day': forms.CheckboxInput(attrs={'class': 'form-check-input'}),
            'start_time': forms.TimeInput(attrs={'type': 'time', 'class': 'form-control'}),
            'end_time': forms.TimeInput(attrs={'type': 'time', 'class': 'form-control'}),
            'course': forms.Select(attrs={'class': 'form-select'}),
        }
        labels = {
            'is_all_day': _('All day'),
        }

    def __init__(self, *args, **kwargs):
        self.user = kwargs.pop('user', None)
        super().__init__(*args, **kwargs)
        if self.user is not None:
            self.instance.user = self.user
        self.limit_courses(self.user)
        self.fields['course'].required = False
        self.fields['course'].empty_label = _('None')
