import csv
import datetime
import io
import json
from decimal import Decimal
from unittest import mock

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse

from apps.academics.models import Course, Grade
from apps.analytics.exports import ExportFormatError, build_export_response, collect_user_data

User = get_user_model()


class ExportTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(email="export@example.com", password="secret123")
        self.course = Course.objects.create(
            user=self.user, course_code="CS101", course_name="Intro to CS",
            semester="Fall 2024", academic_year="2024-2025", credits=Decimal("3.0"),
        )
        Grade.objects.create(user=self.user, course=self.course, letter_grade="A")
        other = User.objects.create_user(email="notme@example.com", password="secret123")
        Course.objects.create(user=other, course_code="BIO1", course_name="Other",
                              semester="Fall 2024", academic_year="2024-2025")

    def test_collects_only_own_records(self):
        data = collect_user_data(self.user)
        self.assertEqual([c["course_code"] for c in data["courses"]], ["CS101"])
        self.assertEqual(data["grades"][0]["course"], {"course_code": "CS101", "course_name": "Intro to CS"})
        self.assertEqual(data["profile"]["email"], "export@example.com")
        self.assertIn("exported_at", data)

    @mock.patch("apps.analytics.exports.timezone.localdate", return_value=datetime.date(2024, 10, 1))
    def test_json_attachment(self, _localdate):
        response = build_export_response(self.user, "json")
        self.assertEqual(response["Content-Type"], "application/json")
        self.assertEqual(response["Content-Disposition"], 'attachment; filename="academic-data-2024-10-01.json"')
        payload = json.loads(response.content)
        self.assertEqual(set(payload), {"profile", "courses", "grades", "attendance",
                                        "documents", "calendar_events", "exported_at"})

    def test_csv_lists_courses(self):
        response = build_export_response(self.user, "CSV")
        self.assertEqual(response["Content-Type"], "text/csv")
        rows = list(csv.reader(io.StringIO(response.content.decode())))
        self.assertEqual(rows[0], ["Course Code", "Course Name", "Credits", "Status", "Semester"])
        self.assertEqual(rows[1], ["CS101", "Intro to CS", "3.0", "active", "Fall 2024"])
        self.assertEqual(len(rows), 2)

    def test_xlsx_is_a_zip_workbook(self):
        response = build_export_response(self.user, "xlsx")
        self.assertTrue(response["Content-Disposition"].endswith('.xlsx"'))
        self.assertTrue(response.content.startswith(b"PK"))

    def test_unknown_format(self):
        with self.assertRaises(ExportFormatError):
            build_export_response(self.user, "pdf")


class ExportViewTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(email="exportview@example.com", password="secret123")
        self.client.force_login(self.user)

    def test_download(self):
        response = self.client.get(reverse("export_data"), {"format": "csv"})
        self.assertEqual(response.status_code, 200)
        self.assertIn("attachment;", response["Content-Disposition"])

    def test_bad_format_redirects_with_message(self):
        response = self.client.get(reverse("export_data"), {"format": "pdf"}, follow=True)
        self.assertRedirects(response, reverse("analytics"))
        messages = [str(m) for m in response.context["messages"]]
        self.assertTrue(any("Unsupported export format" in m for m in messages))
