import calendar
import logging

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.urls import reverse
from django.utils import timezone
from django.views.generic import CreateView, TemplateView

from apps.core.mixins import OwnerFormMixin

from .forms import CalendarEventForm
from .models import CalendarEvent
from .services import events_on, month_grid, parse_selected_date, upcoming_events

logger = logging.getLogger(__name__)


class CalendarView(LoginRequiredMixin, TemplateView):
    """Month grid, the selected day's events and the next five upcoming events."""
    template_name = 'events/calendar.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        user = self.request.user
        today = timezone.localdate()
        selected = parse_selected_date(self.request.GET.get('date'), default=today)

        try:
            context.update({
                'weeks': month_grid(user, selected.year, selected.month),
                'selected_events': events_on(user, selected),
                'upcoming_events': upcoming_events(user, today),
            })
        except Exception:
            logger.exception(f"Error fetching events for {user.email}")
            messages.error(self.request, 'Failed to load calendar events')

        context.update({
            'today': today,
            'selected_date': selected,
            'month_label': f"{calendar.month_name[selected.month]} {selected.year}",
            'weekday_labels': ['Sun', 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat'],
        })
        return context


class CalendarEventCreateView(OwnerFormMixin, CreateView):
    model = CalendarEvent
    form_class = CalendarEventForm
    template_name = 'events/event_form.html'
    success_message = 'Event added to your calendar.'

    def get_initial(self):
        initial = super().get_initial()
        initial['event_date'] = parse_selected_date(self.request.GET.get('date'), default=timezone.localdate())
        return initial

    def get_success_url(self):
        return f"{reverse('calendar')}?date={self.object.event_date.isoformat()}"
