import uuid
from decimal import Decimal

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _


class Course(models.Model):
    STATUS_CHOICES = [
        ('active', 'Active'),
        ('completed', 'Completed'),
        ('dropped', 'Dropped'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='courses')
    course_code = models.CharField(max_length=20)
    course_name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    instructor_name = models.CharField(max_length=150, blank=True)
    instructor_email = models.EmailField(blank=True)
    instructor_phone = models.CharField(max_length=20, blank=True)
    semester = models.CharField(max_length=50)
    academic_year = models.CharField(max_length=20)
    credits = models.DecimalField(
        max_digits=4, decimal_places=1, default=Decimal('3.0'),
        validators=[MinValueValidator(0), MaxValueValidator(30)],
    )
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='active')
    location = models.CharField(max_length=150, blank=True)
    syllabus_url = models.URLField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'academics_course'
        ordering = ['course_code']
        indexes = [models.Index(fields=['user', 'semester'], name='academics_course_user_sem_idx')]

    def __str__(self):
        return f"{self.course_code} - {self.course_name}"


class Schedule(models.Model):
    # 0 = Sunday, matching the weekly schedule screen
    DAY_CHOICES = [
        (0, 'Sunday'),
        (1, 'Monday'),
        (2, 'Tuesday'),
        (3, 'Wednesday'),
        (4, 'Thursday'),
        (5, 'Friday'),
        (6, 'Saturday'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name='schedules')
    day_of_week = models.PositiveSmallIntegerField(choices=DAY_CHOICES)
    start_time = models.TimeField()
    end_time = models.TimeField()
    location = models.CharField(max_length=150, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'academics_schedule'
        ordering = ['day_of_week', 'start_time']

    def __str__(self):
        return f"{self.course.course_code} {self.get_day_of_week_display()} {self.start_time:%H:%M}"

    def clean(self):
        if self.start_time and self.end_time and self.end_time <= self.start_time:
            raise ValidationError({'end_time': _('End time must be after start time.')})


class Grade(models.Model):
    GRADE_TYPE_CHOICES = [
        ('exam', 'Exam'),
        ('quiz', 'Quiz'),
        ('assignment', 'Assignment'),
        ('project', 'Project'),
        ('midterm', 'Midterm'),
        ('final', 'Final'),
        ('other', 'Other'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='grades')
    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name='grades')
    grade_type = models.CharField(max_length=20, choices=GRADE_TYPE_CHOICES, default='exam')
    grade_value = models.DecimalField(max_digits=6, decimal_places=2, null=True, blank=True,
                                      validators=[MinValueValidator(0)])
    max_value = models.DecimalField(max_digits=6, decimal_places=2, default=Decimal('100'),
                                    validators=[MinValueValidator(Decimal('0.01'))])
    letter_grade = models.CharField(max_length=3, blank=True)
    weight = models.DecimalField(max_digits=5, decimal_places=2, null=True, blank=True)
    date_received = models.DateField(null=True, blank=True)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'academics_grade'
        ordering = ['-date_received', '-created_at']

    def __str__(self):
        return f"{self.course.course_code} {self.get_grade_type_display()}: {self.display_value}"

    @property
    def percentage(self):
        if self.grade_value is None or not self.max_value:
            return None
        return float(self.grade_value) / float(self.max_value) * 100

    @property
    def display_value(self):
        if self.letter_grade:
            return self.letter_grade
        if self.grade_value is not None:
            return f"{float(self.grade_value):g}/{float(self.max_value):g}"
        return "-"

    def clean(self):
        if self.course_id and self.user_id and self.course.user_id != self.user_id:
            raise ValidationError({'course': _('Select one of your own courses.')})
