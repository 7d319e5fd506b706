# academics/services.py
"""
Filtering, grouping and grading helpers for the course, schedule and grade
screens. Grade-point tables live here so the analytics functions and the
grade pages agree on them.
"""
from collections import OrderedDict

from django.db.models import Q

from .models import Course, Grade, Schedule

# Letter grade -> grade points on a 4.0 scale
GRADE_POINTS = {
    'A+': 4.0, 'A': 4.0, 'A-': 3.7,
    'B+': 3.3, 'B': 3.0, 'B-': 2.7,
    'C+': 2.3, 'C': 2.0, 'C-': 1.7,
    'D+': 1.3, 'D': 1.0, 'D-': 0.7,
    'F': 0.0,
}

# (minimum percentage, letter), highest first
PERCENTAGE_BANDS = (
    (93, 'A'), (90, 'A-'), (87, 'B+'), (83, 'B'), (80, 'B-'),
    (77, 'C+'), (73, 'C'), (70, 'C-'), (67, 'D+'), (63, 'D'), (60, 'D-'),
)


def letter_for_percentage(percentage):
    for minimum, letter in PERCENTAGE_BANDS:
        if percentage >= minimum:
            return letter
    return 'F'


def grade_points(grade):
    """Grade points for one Grade row, or None when it carries no score at all."""
    letter = (grade.letter_grade or '').strip().upper()
    if letter in GRADE_POINTS:
        return GRADE_POINTS[letter]
    percentage = grade.percentage
    if percentage is None:
        return None
    return GRADE_POINTS[letter_for_percentage(percentage)]


# ---------------------------------------------------------------------------
# Courses
# ---------------------------------------------------------------------------

class CourseFilterService:
    """Search and semester filtering for the courses list."""

    @staticmethod
    def apply_search_filter(queryset, search_query):
        search_query = (search_query or '').strip()
        if not search_query:
            return queryset
        return queryset.filter(
            Q(course_name__icontains=search_query) |
            Q(course_code__icontains=search_query) |
            Q(instructor_name__icontains=search_query)
        )

    @staticmethod
    def apply_semester_filter(queryset, semester):
        if not semester or semester == 'all':
            return queryset
        return queryset.filter(semester=semester)

    @classmethod
    def filter_courses(cls, queryset, search_query=None, semester=None):
        queryset = cls.apply_search_filter(queryset, search_query)
        return cls.apply_semester_filter(queryset, semester)


def available_semesters(user):
    return list(
        Course.objects.filter(user=user)
        .order_by('semester')
        .values_list('semester', flat=True)
        .distinct()
    )


# ---------------------------------------------------------------------------
# Schedule
# ---------------------------------------------------------------------------

def schedule_by_day(user):
    """
    OrderedDict of day name -> list of Schedule rows, Sunday first, for every
    day of the week (empty days included).
    """
    days = OrderedDict((label, []) for _, label in Schedule.DAY_CHOICES)
    schedules = (
        Schedule.objects.filter(course__user=user)
        .select_related('course')
        .order_by('day_of_week', 'start_time')
    )
    for entry in schedules:
        days[entry.get_day_of_week_display()].append(entry)
    return days


def format_time_12h(value):
    """``14:05`` -> ``2:05 PM``."""
    if value is None:
        return ''
    hour = value.hour % 12 or 12
    suffix = 'AM' if value.hour < 12 else 'PM'
    return f"{hour}:{value.minute:02d} {suffix}"


# ---------------------------------------------------------------------------
# Grades
# ---------------------------------------------------------------------------

def course_average(grades):
    """Mean percentage over grades with both a value and a maximum, or None."""
    percentages = [g.percentage for g in grades if g.percentage is not None]
    if not percentages:
        return None
    return round(sum(percentages) / len(percentages), 1)


def grades_by_course(user):
    """
    Group the user's grades per course for the grades page.

    Returns a list of dicts: ``course``, ``grades`` and ``average``.
    """
    grades = (
        Grade.objects.filter(user=user)
        .select_related('course')
        .order_by('course__course_code', '-date_received', '-created_at')
    )
    groups = OrderedDict()
    for grade in grades:
        groups.setdefault(grade.course, []).append(grade)

    return [
        {'course': course, 'grades': items, 'average': course_average(items)}
        for course, items in groups.items()
    ]
