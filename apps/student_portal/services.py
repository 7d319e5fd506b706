# student_portal/services.py
import logging

from django.utils import timezone

from apps.academics.models import Course, Grade, Schedule
from apps.core.utils import get_user_profile
from apps.events.services import upcoming_events
from utils.utils import generate_qr_code_base64, qr_png_bytes

logger = logging.getLogger(__name__)

ONBOARDING_STEPS = (
    {
        "icon": "bi-person-badge",
        "title": "Digital Student ID",
        "description": "Access your student ID card anytime, anywhere with QR code verification.",
    },
    {
        "icon": "bi-book",
        "title": "Academic Management",
        "description": "Track your courses, grades, and GPA all in one place.",
    },
    {
        "icon": "bi-calendar3",
        "title": "Schedule & Attendance",
        "description": "Never miss a class with smart scheduling and attendance tracking.",
    },
    {
        "icon": "bi-graph-up",
        "title": "Progress Analytics",
        "description": "Visualize your academic progress and get personalized insights.",
    },
)


def onboarding_step(value):
    """Zero-based onboarding step from the query string, clamped to the known steps."""
    try:
        step = int(value)
    except (TypeError, ValueError):
        return 0
    return max(0, min(step, len(ONBOARDING_STEPS) - 1))


def digital_id_payload(user):
    """What the ID QR code encodes."""
    profile = get_user_profile(user)
    return {
        "student_id": profile.student_id or str(user.pk),
        "name": profile.full_name,
        "email": user.email,
    }


def digital_id_qr(user):
    return generate_qr_code_base64(digital_id_payload(user))


def digital_id_png(user):
    return qr_png_bytes(digital_id_payload(user), size=10)


def todays_classes(user, today=None):
    """Schedule slots for today's weekday (0 = Sunday)."""
    today = today or timezone.localdate()
    day_of_week = today.isoweekday() % 7
    return (
        Schedule.objects.filter(course__user=user, day_of_week=day_of_week)
        .select_related('course')
        .order_by('start_time')
    )


def dashboard_summary(user):
    today = timezone.localdate()
    return {
        "active_course_count": Course.objects.filter(user=user, status='active').count(),
        "todays_classes": list(todays_classes(user, today)),
        "upcoming_events": list(upcoming_events(user, today)),
        "recent_grades": list(
            Grade.objects.filter(user=user).select_related('course').order_by('-date_received', '-created_at')[:5]
        ),
    }
