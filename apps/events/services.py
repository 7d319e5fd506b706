# events/services.py
import calendar
import datetime

from .models import CalendarEvent

UPCOMING_LIMIT = 5


def parse_selected_date(value, default=None):
    """``YYYY-MM-DD`` from the query string, or ``default`` when missing or malformed."""
    try:
        return datetime.date.fromisoformat(value) if value else default
    except ValueError:
        return default


def events_on(user, day):
    return CalendarEvent.objects.filter(user=user, event_date=day).select_related('course')


def upcoming_events(user, today, limit=UPCOMING_LIMIT):
    return (
        CalendarEvent.objects.filter(user=user, event_date__gte=today)
        .select_related('course')
        .order_by('event_date', 'start_time')[:limit]
    )


def month_grid(user, year, month):
    """
    Weeks (Sunday first) of the month as lists of ``{date, in_month, count}``
    so the template can mark days that have events.
    """
    cal = calendar.Calendar(firstweekday=calendar.SUNDAY)
    days = list(cal.itermonthdates(year, month))
    counts = {}
    for event_date in CalendarEvent.objects.filter(
        user=user, event_date__gte=days[0], event_date__lte=days[-1]
    ).values_list('event_date', flat=True):
        counts[event_date] = counts.get(event_date, 0) + 1

    cells = [{'date': d, 'in_month': d.month == month, 'count': counts.get(d, 0)} for d in days]
    return [cells[i:i + 7] for i in range(0, len(cells), 7)]
