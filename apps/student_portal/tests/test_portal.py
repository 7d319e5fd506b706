import datetime
import json
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse

from apps.academics.models import Course, Schedule
from apps.student_portal.models import PortalSettings
from apps.student_portal.services import (
    ONBOARDING_STEPS, digital_id_payload, digital_id_qr, onboarding_step, todays_classes,
)
from apps.users.models import Profile

User = get_user_model()


class PortalSettingsTests(TestCase):
    def test_for_user_creates_defaults_once(self):
        user = User.objects.create_user(email="prefs@example.com", password="secret123")
        first = PortalSettings.for_user(user)
        second = PortalSettings.for_user(user)
        self.assertEqual(first.pk, second.pk)
        self.assertEqual(first.theme, "system")
        self.assertTrue(first.grade_updates)
        self.assertFalse(first.onboarding_completed)


class ServiceTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(email="idcard@example.com", password="secret123")
        Profile.objects.filter(user=self.user).update(full_name="Jordan Smith")
        self.user.refresh_from_db()

    def test_onboarding_step_is_clamped(self):
        self.assertEqual(onboarding_step(None), 0)
        self.assertEqual(onboarding_step("x"), 0)
        self.assertEqual(onboarding_step("-3"), 0)
        self.assertEqual(onboarding_step("2"), 2)
        self.assertEqual(onboarding_step("99"), len(ONBOARDING_STEPS) - 1)

    def test_payload_falls_back_to_user_id(self):
        self.assertEqual(digital_id_payload(self.user), {
            "student_id": str(self.user.pk),
            "name": "Jordan Smith",
            "email": "idcard@example.com",
        })
        Profile.objects.filter(user=self.user).update(student_id="S7654321")
        self.user.refresh_from_db()
        self.assertEqual(digital_id_payload(self.user)["student_id"], "S7654321")

    def test_qr_is_png_data_uri(self):
        self.assertTrue(digital_id_qr(self.user).startswith("data:image/png;base64,"))

    def test_todays_classes_uses_sunday_first_days(self):
        course = Course.objects.create(user=self.user, course_code="CS101", course_name="Intro",
                                       semester="Fall 2024", academic_year="2024-2025", credits=Decimal("3.0"))
        sunday = Schedule.objects.create(course=course, day_of_week=0,
                                         start_time=datetime.time(9), end_time=datetime.time(10))
        Schedule.objects.create(course=course, day_of_week=1,
                                start_time=datetime.time(9), end_time=datetime.time(10))
        self.assertEqual(list(todays_classes(self.user, datetime.date(2024, 9, 8))), [sunday])


class HomeViewTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(email="home@example.com", password="secret123")
        self.client.force_login(self.user)

    def test_onboarding_until_completed(self):
        response = self.client.get(reverse("home"), {"step": 3})
        self.assertTemplateUsed(response, "student_portal/onboarding.html")
        self.assertTrue(response.context["onboarding_is_last"])
        self.assertEqual(response.context["onboarding_progress"], 100)

        response = self.client.post(reverse("onboarding_complete"))
        self.assertRedirects(response, reverse("home"), fetch_redirect_response=False)
        self.assertTrue(PortalSettings.for_user(self.user).onboarding_completed)

        response = self.client.get(reverse("home"))
        self.assertTemplateUsed(response, "student_portal/home.html")
        self.assertEqual(response.context["active_course_count"], 0)
        self.assertEqual(response.context["recent_grades"], [])

    def test_more_menu(self):
        response = self.client.get(reverse("more"))
        urls = [item["url"] for item in response.context["menu_items"]]
        self.assertIn(reverse("digital_id"), urls)
        self.assertIn(reverse("settings"), urls)


class DigitalIDViewTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(email="digital@example.com", password="secret123")
        Profile.objects.filter(user=self.user).update(full_name="Sam Rivera", student_id="S1000001",
                                                      program="BSc", major="Physics")
        self.client.force_login(self.user)

    def test_page(self):
        response = self.client.get(reverse("digital_id"))
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.context["qr_code"].startswith("data:image/png;base64,"))
        self.assertIsNone(response.context["institution"])

    def test_page_offers_share(self):
        response = self.client.get(reverse("digital_id"))
        self.assertContains(response, 'id="share-id"')
        self.assertContains(response, 'data-student-id="S1000001"')
        self.assertContains(response, "navigator.clipboard.writeText")

    def test_qr_download(self):
        response = self.client.get(reverse("digital_id_qr"))
        self.assertEqual(response["Content-Type"], "image/png")
        self.assertEqual(response["Content-Disposition"], 'attachment; filename="student-id-S1000001.png"')
        self.assertTrue(response.content.startswith(b"\x89PNG"))

    def test_card_download(self):
        response = self.client.get(reverse("digital_id_card"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response["Content-Type"], "image/png")
        self.assertIn("S1000001_student_id_card.png", response["Content-Disposition"])
        self.assertTrue(response.content.startswith(b"\x89PNG"))


class PreferenceViewTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(email="toggles@example.com", password="secret123")
        self.client.force_login(self.user)

    def test_notification_toggles(self):
        # Unchecked boxes are absent from the POST
        response = self.client.post(reverse("update_preferences"), {"email_notifications": "on"})
        self.assertRedirects(response, reverse("settings"), fetch_redirect_response=False)
        prefs = PortalSettings.for_user(self.user)
        self.assertTrue(prefs.email_notifications)
        self.assertFalse(prefs.grade_updates)
        self.assertFalse(prefs.calendar_reminders)

    def test_theme_ajax(self):
        response = self.client.post(reverse("update_theme"), {"theme": "dark"},
                                    HTTP_X_REQUESTED_WITH="XMLHttpRequest")
        self.assertEqual(json.loads(response.content), {"success": True})
        self.assertEqual(PortalSettings.for_user(self.user).theme, "dark")

    def test_invalid_theme_ajax(self):
        response = self.client.post(reverse("update_theme"), {"theme": "neon"},
                                    HTTP_X_REQUESTED_WITH="XMLHttpRequest")
        self.assertEqual(response.status_code, 400)
        self.assertIn("theme", response.json()["errors"])
