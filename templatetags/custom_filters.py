from django import template

from apps.academics.services import format_time_12h
from apps.analytics.services import attendance_band as _attendance_band

register = template.Library()


@register.filter
def divide(value, arg):
    """Divide value by arg safely."""
    try:
        return float(value) / float(arg)
    except (TypeError, ValueError, ZeroDivisionError):
        return 0


@register.filter
def percentage(part, total):
    try:
        return (float(part) / float(total)) * 100
    except (TypeError, ValueError, ZeroDivisionError):
        return 0


@register.filter
def get_item(dictionary, key):
    """Access dictionary item by key in template"""
    if not dictionary:
        return ""
    return dictionary.get(key, "")


@register.filter
def underscore_to_space(value):
    return str(value).replace("_", " ")


@register.filter
def file_size(num_bytes):
    """1536 -> '1.50 KB'"""
    try:
        size = float(num_bytes)
    except (TypeError, ValueError):
        return ""
    for unit in ("Bytes", "KB", "MB"):
        if size < 1024:
            return f"{size:.0f} {unit}" if unit == "Bytes" else f"{size:.2f} {unit}"
        size /= 1024
    return f"{size:.2f} GB"


@register.filter
def time_12h(value):
    return format_time_12h(value)


@register.filter
def attendance_band(value):
    try:
        return _attendance_band(float(value))
    except (TypeError, ValueError):
        return ""


@register.filter
def band_tone(band):
    """Bootstrap colour for an attendance band."""
    return {
        "Good Standing": "success",
        "Warning": "warning",
        "Critical": "danger",
    }.get(band, "secondary")


@register.filter
def grade_tone(percentage_value):
    """Bootstrap colour for a grade percentage."""
    if percentage_value is None or percentage_value == "":
        return "secondary"
    value = float(percentage_value)
    if value >= 90:
        return "success"
    if value >= 80:
        return "primary"
    if value >= 70:
        return "warning"
    return "danger"


@register.filter
def status_tone(status):
    return {
        "active": "primary",
        "completed": "success",
        "dropped": "secondary",
        "present": "success",
        "late": "warning",
        "absent": "danger",
        "excused": "info",
        "high": "danger",
        "normal": "primary",
        "low": "secondary",
    }.get(status, "secondary")
