from django import forms
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from apps.core.mixins import UserCoursesFormMixin

from .models import AttendanceRecord


class AttendanceForm(UserCoursesFormMixin, forms.ModelForm):
    """Form for marking attendance for one class"""

    class Meta:
        model = AttendanceRecord
        fields = ['course', 'date', 'status', 'notes']
        widgets = {
            'course': forms.Select(attrs={'class': 'form-select'}),
            'date': forms.DateInput(attrs={'type': 'date', 'class': 'form-control'}),
            'status': forms.Select(attrs={'class': 'form-select'}),
            'notes': forms.Textarea(attrs={'class': 'form-control', 'rows': 2}),
        }
        labels = {
            'course': _('Course'),
            'date': _('Date'),
            'status': _('Status'),
            'notes': _('Notes'),
        }

    def __init__(self, *args, **kwargs):
        self.user = kwargs.pop('user', None)
        super().__init__(*args, **kwargs)
        if self.user is not None:
            self.instance.user = self.user
        self.fields['date'].initial = timezone.now().date()
        self.limit_courses(self.user)

    def clean(self):
        cleaned_data = super().clean()
        course = cleaned_data.get('course')
        date = cleaned_data.get('date')

        if date and date > timezone.now().date():
            self.add_error('date', _('Attendance cannot be marked for a future date.'))

        if course and date and self.user is not None:
            existing = AttendanceRecord.objects.filter(user=self.user, course=course, date=date)
            if self.instance.pk:
                existing = existing.exclude(pk=self.instance.pk)
            if existing.exists():
                raise forms.ValidationError(
                    _('Attendance for %(course)s on %(date)s is already recorded.')
                    % {'course': course.course_code, 'date': date}
                )
        return cleaned_data
