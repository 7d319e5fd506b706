# analytics/insights.py
"""AI study insights from the student's standing, grade trends and attendance."""
import logging

import requests
from django.conf import settings

from .services import get_academic_standing, get_attendance_patterns, get_grade_trends

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an academic advisor AI assistant. Provide concise, actionable study advice "
    "based on student data. Focus on specific recommendations for improving performance, "
    "attendance, and study habits. Keep responses under 150 words total, organized in 3 "
    "brief sections: Performance Analysis, Study Recommendations, and Action Items."
)

EMPTY_REPLY = "Unable to generate insights at this time."


class InsightsError(Exception):
    status_code = 500

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InsightsRateLimited(InsightsError):
    status_code = 429

    def __init__(self):
        super().__init__("Rate limit exceeded. Please try again later.")


class InsightsCreditsExhausted(InsightsError):
    status_code = 402

    def __init__(self):
        super().__init__("AI credits exhausted. Please add credits to continue.")


def build_context(standing, trends, patterns):
    """Plain-text academic profile sent to the model."""
    trend_lines = "\n".join(
        f"- {t['month']}: {t['average_grade']}% ({t['total_grades']} grades)" for t in trends
    ) or "No recent grades"
    pattern_lines = "\n".join(
        f"- Week of {p['week_start']}: {p['attendance_rate']}% ({p['total_classes']} classes)"
        for p in patterns
    ) or "No attendance data"

    return (
        "Student Academic Profile:\n"
        f"- GPA: {standing.get('gpa') or 0}\n"
        f"- Total Credits: {standing.get('total_credits') or 0}\n"
        f"- Completed Courses: {standing.get('completed_courses') or 0}\n"
        f"- Active Courses: {standing.get('active_courses') or 0}\n"
        f"- Attendance: {standing.get('attendance_percentage') or 0}%\n"
        "\n"
        "Recent Grade Trends (Last 6 months):\n"
        f"{trend_lines}\n"
        "\n"
        "Attendance Patterns (Last 3 months):\n"
        f"{pattern_lines}\n"
    )


def request_completion(context):
    """POST the context to the chat-completions endpoint and return the reply text."""
    try:
        response = requests.post(
            settings.AI_GATEWAY_URL,
            headers={
                "Authorization": f"Bearer {settings.AI_GATEWAY_API_KEY}",
                "Content-Type": "application/json",
            },
            json={
                "model": settings.AI_MODEL,
                "messages": [
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {
                        "role": "user",
                        "content": "Based on this student's academic data, provide personalized "
                                   f"study insights:\n\n{context}",
                    },
                ],
            },
            timeout=settings.AI_REQUEST_TIMEOUT,
        )
    except requests.RequestException as e:
        logger.error(f"AI gateway request failed: {e}")
        raise InsightsError(f"AI Gateway error: {e}") from e

    if response.status_code == 429:
        raise InsightsRateLimited()
    if response.status_code == 402:
        raise InsightsCreditsExhausted()
    if not response.ok:
        logger.error(f"AI gateway returned {response.status_code}")
        raise InsightsError(f"AI Gateway error: {response.status_code}")

    try:
        payload = response.json()
        content = payload["choices"][0]["message"]["content"]
    except (ValueError, KeyError, IndexError, TypeError):
        content = None
    return content or EMPTY_REPLY


def generate_study_insights(user):
    standing = get_academic_standing(user)
    trends = get_grade_trends(user, months=6)
    patterns = get_attendance_patterns(user, months=3)

    insights = request_completion(build_context(standing, trends, patterns))
    logger.info(f"Study insights generated for {user.email}")
    return {
        "insights": insights,
        "academicStanding": standing,
        "gradeTrends": trends,
        "attendancePatterns": patterns,
    }
