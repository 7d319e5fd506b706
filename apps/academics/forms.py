from django import forms
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from apps.core.mixins import UserCoursesFormMixin
from apps.core.schemas import COURSE_SCHEMA, apply_schema

from .models import Course, Grade, Schedule
from .services import GRADE_POINTS


class CourseForm(forms.ModelForm):
    """Add/edit a course"""

    class Meta:
        model = Course
        fields = [
            'course_code', 'course_name', 'description',
            'instructor_name', 'instructor_email', 'instructor_phone',
            'semester', 'academic_year', 'credits', 'status',
            'location', 'syllabus_url',
        ]
        widgets = {
            'course_code': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'e.g., CS101'}),
            'course_name': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'e.g., Intro to Programming'}),
            'description': forms.Textarea(attrs={'class': 'form-control', 'rows': 3}),
            'instructor_name': forms.TextInput(attrs={'class': 'form-control'}),
            'instructor_email': forms.EmailInput(attrs={'class': 'form-control'}),
            'instructor_phone': forms.TextInput(attrs={'class': 'form-control'}),
            'semester': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'e.g., Fall 2024'}),
            'academic_year': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'e.g., 2024-2025'}),
            'credits': forms.NumberInput(attrs={'class': 'form-control', 'step': '0.5', 'min': 0}),
            'status': forms.Select(attrs={'class': 'form-select'}),
            'location': forms.TextInput(attrs={'class': 'form-control'}),
            'syllabus_url': forms.URLInput(attrs={'class': 'form-control'}),
        }
        labels = {
            'course_code': _('Course Code'),
            'course_name': _('Course Name'),
            'syllabus_url': _('Syllabus URL'),
        }

    def __init__(self, *args, **kwargs):
        self.user = kwargs.pop('user', None)
        super().__init__(*args, **kwargs)
        if self.user is not None:
            self.instance.user = self.user

    def clean(self):
        cleaned_data = super().clean()
        data = {name: cleaned_data.get(name, self.data.get(name)) for name in self.fields}
        apply_schema(self, COURSE_SCHEMA, data=data)
        return cleaned_data


class ScheduleForm(UserCoursesFormMixin, forms.ModelForm):
    class Meta:
        model = Schedule
        fields = ['course', 'day_of_week', 'start_time', 'end_time', 'location']
        widgets = {
            'course': forms.Select(attrs={'class': 'form-select'}),
            'day_of_week': forms.Select(attrs={'class': 'form-select'}),
            'start_time': forms.TimeInput(attrs={'type': 'time', 'class': 'form-control'}),
            'end_time': forms.TimeInput(attrs={'type': 'time', 'class': 'form-control'}),
            'location': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'e.g., Room 204'}),
        }

    def __init__(self, *args, **kwargs):
        self.user = kwargs.pop('user', None)
        super().__init__(*args, **kwargs)
        self.limit_courses(self.user)


class GradeForm(UserCoursesFormMixin, forms.ModelForm):
    class Meta:
        model = Grade
        fields = [
            'course', 'grade_type', 'grade_value', 'max_value',
            'letter_grade', 'weight', 'date_received', 'notes',
        ]
        widgets = {
            'course': forms.Select(attrs={'class': 'form-select'}),
            'grade_type': forms.Select(attrs={'class': 'form-select'}),
            'grade_value': forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01'}),
            'max_value': forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01'}),
            'letter_grade': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'e.g., A-'}),
            'weight': forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01'}),
            'date_received': forms.DateInput(attrs={'type': 'date', 'class': 'form-control'}),
            'notes': forms.Textarea(attrs={'class': 'form-control', 'rows': 2}),
        }

    def __init__(self, *args, **kwargs):
        self.user = kwargs.pop('user', None)
        super().__init__(*args, **kwargs)
        if self.user is not None:
            self.instance.user = self.user
        self.limit_courses(self.user)
        self.fields['date_received'].initial = timezone.now().date()

    def clean_letter_grade(self):
        letter = (self.cleaned_data.get('letter_grade') or '').strip().upper()
        if letter and letter not in GRADE_POINTS:
            raise forms.ValidationError(
                _('Enter a letter grade such as A, B+ or C-.')
            )
        return letter

    def clean(self):
        cleaned_data = super().clean()
        if cleaned_data.get('grade_value') is None and not cleaned_data.get('letter_grade'):
            raise forms.ValidationError(_('Enter a score or a letter grade.'))
        grade_value = cleaned_data.get('grade_value')
        max_value = cleaned_data.get('max_value')
        if grade_value is not None and max_value and grade_value > max_value:
            self.add_error('grade_value', _('Score cannot exceed the maximum.'))
        return cleaned_data
