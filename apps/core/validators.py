# core/validators.py
"""
Small pure checks shared by forms and services.

None of these touch the database; they return a number, a boolean or a list
of messages, and the ``validate_*`` variants raise Django's
``ValidationError`` so they can be used as model/form field validators.
"""
import os
import re

from django.core.exceptions import ValidationError
from django.template.defaultfilters import filesizeformat
from django.utils.translation import gettext_lazy as _

PASSWORD_SYMBOLS = '!@#$%^&*(),.?":{}|<>'

MAX_TAGS_LENGTH = 500
MAX_TAGS = 20
MAX_TAG_LENGTH = 50
TAG_PATTERN = re.compile(r"^[A-Za-z0-9 _-]+$")

MAX_UPLOAD_SIZE = 52428800  # 50 MB
ALLOWED_UPLOAD_EXTENSIONS = (
    "pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx",
    "jpg", "jpeg", "png", "gif", "txt",
)


# ---------------------------------------------------------------------------
# Password strength
# ---------------------------------------------------------------------------

PASSWORD_LENGTH_STEPS = (8, 12)
PASSWORD_POINTS = {"length": 25, "mixed_case": 25, "digit": 12.5, "symbol": 12.5}
# (score below, label, bootstrap tone); the last band has no upper bound
PASSWORD_BANDS = (
    (50, _("Weak"), "danger"),
    (75, _("Medium"), "warning"),
    (None, _("Strong"), "success"),
)


def password_strength(password):
    """
    Score a password from 0 to 100 for the signup strength meter.

    Each length step adds 25, mixed case adds 25, a digit and a symbol add
    12.5 each. This drives a progress bar only; it is not a policy.
    """
    password = password or ""
    strength = 0.0
    for step in PASSWORD_LENGTH_STEPS:
        if len(password) >= step:
            strength += PASSWORD_POINTS["length"]
    if re.search(r"[a-z]", password) and re.search(r"[A-Z]", password):
        strength += PASSWORD_POINTS["mixed_case"]
    if re.search(r"\d", password):
        strength += PASSWORD_POINTS["digit"]
    if any(ch in PASSWORD_SYMBOLS for ch in password):
        strength += PASSWORD_POINTS["symbol"]
    return min(strength, 100.0)


def _password_band(score):
    for below, label, tone in PASSWORD_BANDS:
        if below is None or score < below:
            return label, tone


def password_strength_label(score):
    return _password_band(score)[0]


def password_strength_display(password):
    """Score, label and tone for rendering the meter server-side."""
    score = password_strength(password)
    label, tone = _password_band(score)
    return {"score": score, "label": label, "tone": tone}


def password_meter_config():
    """The scoring rules above, for the browser-side meter (``json_script``)."""
    return {
        "symbols": PASSWORD_SYMBOLS,
        "lengthSteps": list(PASSWORD_LENGTH_STEPS),
        "points": PASSWORD_POINTS,
        "bands": [{"below": below, "label": str(label), "tone": tone} for below, label, tone in PASSWORD_BANDS],
    }


# ---------------------------------------------------------------------------
# Document tags
# ---------------------------------------------------------------------------

def parse_tags(value):
    """Split a comma-separated tag string into trimmed, non-empty tags."""
    return [tag.strip() for tag in (value or "").split(",") if tag.strip()]


def tag_errors(value):
    """Return the list of problems with a raw tag string (empty when valid)."""
    value = value or ""
    if len(value) > MAX_TAGS_LENGTH:
        return [_("Tags must be %(max)d characters or fewer.") % {"max": MAX_TAGS_LENGTH}]

    tags = parse_tags(value)
    errors = []
    if len(tags) > MAX_TAGS:
        errors.append(_("You can add at most %(max)d tags.") % {"max": MAX_TAGS})
    for tag in tags:
        if len(tag) > MAX_TAG_LENGTH:
            errors.append(
                _("Tag '%(tag)s…' is longer than %(max)d characters.") % {"tag": tag[:20], "max": MAX_TAG_LENGTH}
            )
        elif not TAG_PATTERN.match(tag):
            errors.append(
                _("Tag '%(tag)s' may only contain letters, numbers, spaces, hyphens and underscores.") % {"tag": tag}
            )
    return errors


def is_valid_tags(value):
    return not tag_errors(value)


# ---------------------------------------------------------------------------
# Uploads
# ---------------------------------------------------------------------------

def is_allowed_upload_size(size):
    return size is not None and 0 <= size <= MAX_UPLOAD_SIZE


def validate_upload_size(size):
    if not is_allowed_upload_size(size):
        raise ValidationError(
            _("File size must be less than %(max)s.") % {"max": filesizeformat(MAX_UPLOAD_SIZE)},
            code="file_too_large",
        )


def upload_extension(name):
    return os.path.splitext(name or "")[1].lstrip(".").lower()


def validate_upload_type(name):
    ext = upload_extension(name)
    if ext not in ALLOWED_UPLOAD_EXTENSIONS:
        raise ValidationError(
            _("Unsupported file type '.%(ext)s'. Allowed: %(allowed)s.")
            % {"ext": ext or "?", "allowed": ", ".join(ALLOWED_UPLOAD_EXTENSIONS)},
            code="file_type",
        )
