import datetime

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse
from django.utils import timezone

from apps.academics.models import Course
from apps.attendance.forms import AttendanceForm
from apps.attendance.models import AttendanceRecord

User = get_user_model()


class AttendanceFormTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(email="att@example.com", password="secret123")
        self.course = Course.objects.create(user=self.user, course_code="CS101", course_name="Intro",
                                            semester="Fall 2024", academic_year="2024-2025")
        self.today = timezone.now().date()

    def test_future_date_rejected(self):
        form = AttendanceForm(
            data={"course": self.course.pk, "date": self.today + datetime.timedelta(days=1), "status": "present"},
            user=self.user,
        )
        self.assertFalse(form.is_valid())
        self.assertIn("date", form.errors)

    def test_second_record_for_same_day_rejected(self):
        AttendanceRecord.objects.create(user=self.user, course=self.course, date=self.today, status="present")
        form = AttendanceForm(
            data={"course": self.course.pk, "date": self.today, "status": "late"},
            user=self.user,
        )
        self.assertFalse(form.is_valid())
        self.assertTrue(form.non_field_errors())

    def test_other_users_course_not_offered(self):
        other = User.objects.create_user(email="att2@example.com", password="secret123")
        form = AttendanceForm(user=other)
        self.assertFalse(form.fields["course"].queryset.exists())


class AttendanceViewTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(email="attview@example.com", password="secret123")
        self.course = Course.objects.create(user=self.user, course_code="CS101", course_name="Intro",
                                            semester="Fall 2024", academic_year="2024-2025")
        self.client.force_login(self.user)

    def test_mark_attendance(self):
        response = self.client.post(reverse("attendance_mark"), {
            "course": self.course.pk, "date": timezone.now().date().isoformat(), "status": "late",
        })
        self.assertRedirects(response, reverse("attendance"), fetch_redirect_response=False)
        record = AttendanceRecord.objects.get()
        self.assertEqual(record.user, self.user)
        self.assertEqual(record.status, "late")

    def test_overview_percentages(self):
        today = timezone.now().date()
        for offset, status in enumerate(["present", "late", "absent", "excused"]):
            AttendanceRecord.objects.create(user=self.user, course=self.course,
                                            date=today - datetime.timedelta(days=offset), status=status)
        response = self.client.get(reverse("attendance"))
        self.assertEqual(response.context["overall_percentage"], 50.0)
        self.assertEqual(response.context["overall_band"], "Critical")
        row = response.context["course_rows"][0]
        self.assertEqual((row["attended"], row["absent"], row["late"], row["excused"]), (2, 1, 1, 1))
        self.assertEqual(response.context["total_records"], 4)
