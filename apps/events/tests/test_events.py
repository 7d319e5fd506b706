import datetime

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse

from apps.events.models import CalendarEvent
from apps.events.services import month_grid, parse_selected_date, upcoming_events

User = get_user_model()


class CalendarServiceTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(email="cal@example.com", password="secret123")

    def event(self, day, title="Event", **extra):
        extra.setdefault("is_all_day", True)
        return CalendarEvent.objects.create(user=self.user, title=title, event_date=day, **extra)

    def test_parse_selected_date(self):
        default = datetime.date(2024, 1, 1)
        self.assertEqual(parse_selected_date("2024-03-05", default), datetime.date(2024, 3, 5))
        self.assertEqual(parse_selected_date("garbage", default), default)
        self.assertEqual(parse_selected_date(None, default), default)

    def test_month_grid_starts_on_sunday_and_counts_events(self):
        self.event(datetime.date(2024, 9, 10))
        self.event(datetime.date(2024, 9, 10), title="Second")
        weeks = month_grid(self.user, 2024, 9)
        self.assertTrue(all(len(week) == 7 for week in weeks))
        self.assertEqual(weeks[0][0]["date"].weekday(), 6)
        cell = next(c for week in weeks for c in week if c["date"] == datetime.date(2024, 9, 10))
        self.assertEqual(cell["count"], 2)
        self.assertTrue(cell["in_month"])

    def test_upcoming_limited_to_five_future_events(self):
        today = datetime.date(2024, 9, 1)
        self.event(today - datetime.timedelta(days=1), title="Past")
        for offset in range(7):
            self.event(today + datetime.timedelta(days=offset), title=f"E{offset}")
        titles = [e.title for e in upcoming_events(self.user, today)]
        self.assertEqual(titles, ["E0", "E1", "E2", "E3", "E4"])


class CalendarViewTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(email="calview@example.com", password="secret123")
        self.client.force_login(self.user)

    def test_add_event_redirects_to_its_day(self):
        response = self.client.post(reverse("event_create"), {
            "title": "Midterm", "event_date": "2024-10-15", "event_type": "exam",
            "priority": "high", "start_time": "09:00", "end_time": "11:00",
        })
        self.assertRedirects(response, f"{reverse('calendar')}?date=2024-10-15", fetch_redirect_response=False)
        self.assertEqual(CalendarEvent.objects.get().user, self.user)

    def test_timed_event_needs_start_time(self):
        response = self.client.post(reverse("event_create"), {
            "title": "Study", "event_date": "2024-10-15", "event_type": "personal", "priority": "normal",
        })
        self.assertEqual(response.status_code, 200)
        self.assertIn("start_time", response.context["form"].errors)

    def test_selected_day_events(self):
        CalendarEvent.objects.create(user=self.user, title="Quiz", event_date=datetime.date(2024, 10, 2),
                                     is_all_day=True)
        response = self.client.get(reverse("calendar"), {"date": "2024-10-02"})
        self.assertEqual([e.title for e in response.context["selected_events"]], ["Quiz"])
        self.assertEqual(response.context["month_label"], "October 2024")
