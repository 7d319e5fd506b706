# analytics/services.py
"""
Academic aggregation functions.

These are the server-side functions behind the dashboard, grades, analytics
and insights screens and the ``/api/rpc/`` endpoints. Each takes the owning
user and only ever reads that user's rows.
"""
import datetime
import logging
from collections import Counter

from django.conf import settings
from django.core.cache import cache
from django.db import connection
from django.db.models import Avg, Count, Q
from django.db.models.functions import TruncWeek
from django.utils import timezone

from apps.academics.models import Course, Grade
from apps.academics.services import grade_points
from apps.attendance.models import AttendanceRecord
from apps.documents.models import Document

logger = logging.getLogger(__name__)

STANDING_CACHE_KEY = "analytics:standing:{user_id}"

GOOD_STANDING = "Good Standing"
WARNING = "Warning"
CRITICAL = "Critical"


def months_ago(today, months):
    """Same day ``months`` calendar months before ``today`` (clamped to month end)."""
    month_index = today.year * 12 + (today.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    next_month = datetime.date(year + (month // 12), month % 12 + 1, 1)
    last_day = (next_month - datetime.timedelta(days=1)).day
    return datetime.date(year, month, min(today.day, last_day))


# ---------------------------------------------------------------------------
# GPA
# ---------------------------------------------------------------------------

def calculate_gpa(user):
    """
    Credit-weighted GPA on a 4.0 scale over courses with at least one grade.
    Dropped courses are left out. 0.0 when nothing is graded.
    """
    courses = (
        Course.objects.filter(user=user)
        .exclude(status='dropped')
        .prefetch_related('grades')
    )

    weighted_points = 0.0
    total_credits = 0.0
    for course in courses:
        points = [p for p in (grade_points(g) for g in course.grades.all()) if p is not None]
        if not points:
            continue
        credits = float(course.credits or 0)
        weighted_points += (sum(points) / len(points)) * credits
        total_credits += credits

    if not total_credits:
        return 0.0
    return round(weighted_points / total_credits, 2)


# ---------------------------------------------------------------------------
# Attendance
# ---------------------------------------------------------------------------

def calculate_attendance_percentage(user, course=None):
    """(present + late) / total * 100, rounded to 2 decimals; 0.0 with no records."""
    records = AttendanceRecord.objects.filter(user=user)
    if course is not None:
        records = records.filter(course=course)

    stats = records.aggregate(
        total=Count('id'),
        attended=Count('id', filter=Q(status__in=AttendanceRecord.ATTENDED)),
    )
    if not stats['total']:
        return 0.0
    return round(stats['attended'] / stats['total'] * 100, 2)


def attendance_band(percentage):
    if percentage >= 80:
        return GOOD_STANDING
    if percentage >= 70:
        return WARNING
    return CRITICAL


def course_attendance(user):
    """Per-course attendance rows for the attendance overview."""
    rows = (
        AttendanceRecord.objects.filter(user=user)
        .values('course_id', 'course__course_code', 'course__course_name')
        .annotate(
            total=Count('id'),
            attended=Count('id', filter=Q(status__in=AttendanceRecord.ATTENDED)),
            absent=Count('id', filter=Q(status='absent')),
            late=Count('id', filter=Q(status='late')),
            excused=Count('id', filter=Q(status='excused')),
        )
        .order_by('course__course_code')
    )

    summary = []
    for row in rows:
        percentage = round(row['attended'] / row['total'] * 100, 2) if row['total'] else 0.0
        summary.append({
            'course_id': row['course_id'],
            'course_code': row['course__course_code'],
            'course_name': row['course__course_name'],
            'total': row['total'],
            'attended': row['attended'],
            'absent': row['absent'],
            'late': row['late'],
            'excused': row['excused'],
            'percentage': percentage,
            'band': attendance_band(percentage),
        })
    return summary


# ---------------------------------------------------------------------------
# Trends
# ---------------------------------------------------------------------------

def get_grade_trends(user, months=6):
    """Monthly mean grade percentage over the last ``months`` months, oldest first."""
    since = months_ago(timezone.localdate(), months)
    grades = Grade.objects.filter(
        user=user,
        date_received__gte=since,
        grade_value__isnull=False,
        max_value__gt=0,
    ).only('grade_value', 'max_value', 'date_received')

    by_month = {}
    for grade in grades:
        by_month.setdefault(grade.date_received.strftime('%Y-%m'), []).append(grade.percentage)

    return [
        {
            'month': month,
            'average_grade': round(sum(values) / len(values), 1),
            'total_grades': len(values),
        }
        for month, values in sorted(by_month.items())
    ]


def get_attendance_patterns(user, months=3):
    """Weekly attendance (weeks start on Monday) over the last ``months`` months."""
    since = months_ago(timezone.localdate(), months)

    rows = (
        AttendanceRecord.objects.filter(user=user, date__gte=since)
        .annotate(week=TruncWeek('date'))
        .values('week')
        .annotate(
            total_classes=Count('id'),
            present_count=Count('id', filter=Q(status__in=AttendanceRecord.ATTENDED)),
        )
        .order_by('week')
    )

    patterns = []
    for row in rows:
        week = row['week']
        if isinstance(week, datetime.datetime):
            week = week.date()
        patterns.append({
            'week_start': week.isoformat(),
            'attendance_rate': round(row['present_count'] / row['total_classes'] * 100, 2),
            'total_classes': row['total_classes'],
            'present_count': row['present_count'],
        })
    return patterns


# ---------------------------------------------------------------------------
# Standing
# ---------------------------------------------------------------------------

def _compute_academic_standing(user):
    counts = Course.objects.filter(user=user).aggregate(
        completed_courses=Count('id', filter=Q(status='completed')),
        active_courses=Count('id', filter=Q(status='active')),
    )
    total_credits = sum(
        float(c) for c in Course.objects.filter(user=user, status='completed').values_list('credits', flat=True)
    )
    return {
        'gpa': calculate_gpa(user),
        'total_credits': round(total_credits, 1),
        'completed_courses': counts['completed_courses'],
        'active_courses': counts['active_courses'],
        'attendance_percentage': calculate_attendance_percentage(user),
    }


def get_academic_standing(user):
    """GPA, credits, course counts and attendance; cached until the user's data changes."""
    key = STANDING_CACHE_KEY.format(user_id=user.pk)
    standing = cache.get(key)
    if standing is None:
        standing = _compute_academic_standing(user)
        cache.set(key, standing, settings.ANALYTICS_CACHE_TIMEOUT)
    return standing


def invalidate_standing(event):
    """Change-feed subscriber: drop the cached standing of the affected owner."""
    if event.owner_id is not None:
        cache.delete(STANDING_CACHE_KEY.format(user_id=event.owner_id))
        logger.debug(f"Academic standing invalidated for {event.owner_id} ({event.table} {event.event})")


# ---------------------------------------------------------------------------
# Charts
# ---------------------------------------------------------------------------

def grade_distribution(user):
    """Letter grade -> count, over grades that carry a letter."""
    letters = Grade.objects.filter(user=user).exclude(letter_grade='').values_list('letter_grade', flat=True)
    counts = Counter(letters)
    return [{'grade': letter, 'count': count} for letter, count in sorted(counts.items())]


def course_performance(user):
    """Course code -> mean grade value (0 when the course has no grades)."""
    rows = (
        Course.objects.filter(user=user)
        .annotate(avg_grade=Avg('grades__grade_value'))
        .order_by('course_code')
    )
    return [
        {'name': row.course_code, 'performance': round(float(row.avg_grade or 0), 1)}
        for row in rows
    ]


# ---------------------------------------------------------------------------
# Document search
# ---------------------------------------------------------------------------

def search_documents(user, query):
    """
    Server-side document search. PostgreSQL uses full-text search over title
    and description; other databases require every query term to appear in
    the title, description or tags.
    """
    query = (query or '').strip()
    documents = Document.objects.filter(user=user)
    if not query:
        return documents.none()

    if connection.vendor == 'postgresql':
        from django.contrib.postgres.search import SearchQuery, SearchRank, SearchVector

        vector = SearchVector('title', weight='A') + SearchVector('description', weight='B')
        search_query = SearchQuery(query, search_type='websearch')
        return (
            documents.annotate(search=vector, rank=SearchRank(vector, search_query))
            .filter(search=search_query)
            .order_by('-rank', '-created_at')
        )

    for term in query.split():
        documents = documents.containing_text(term)
    return documents.order_by('-created_at')
