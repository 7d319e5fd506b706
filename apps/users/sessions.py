# users/sessions.py
"""Helpers for the "Active sessions" card on the settings page."""
import logging
import re

from django.contrib.auth import SESSION_KEY
from django.contrib.sessions.models import Session
from django.utils import timezone

logger = logging.getLogger(__name__)

TABLET_RE = re.compile(r"(tablet|ipad|playbook|silk)|(android(?!.*mobi))", re.IGNORECASE)
MOBILE_RE = re.compile(
    r"Mobile|Android|iP(hone|od)|IEMobile|BlackBerry|Kindle|Silk-Accelerated|(hpw|web)OS|Opera M(obi|ini)"
)


def device_type(user_agent):
    user_agent = user_agent or ""
    if TABLET_RE.search(user_agent):
        return "Tablet"
    if MOBILE_RE.search(user_agent):
        return "Mobile"
    return "Desktop"


def current_session_info(request):
    return {
        "device": device_type(request.META.get("HTTP_USER_AGENT")),
        "last_active": timezone.now(),
        "expires_at": request.session.get_expiry_date(),
    }


def user_sessions(user):
    """Unexpired sessions belonging to ``user``."""
    sessions = []
    for session in Session.objects.filter(expire_date__gt=timezone.now()):
        if session.get_decoded().get(SESSION_KEY) == str(user.pk):
            sessions.append(session)
    return sessions


def sign_out_everywhere(user):
    """Delete every session of ``user``; returns how many were removed."""
    sessions = user_sessions(user)
    for session in sessions:
        session.delete()
    logger.info(f"Signed out {len(sessions)} session(s) for {user.email}")
    return len(sessions)
