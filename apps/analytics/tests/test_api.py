from decimal import Decimal
from unittest import mock

from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework.authtoken.models import Token
from rest_framework.test import APITestCase

from apps.academics.models import Course, Grade
from apps.documents.models import Document

User = get_user_model()


class TokenTests(APITestCase):
    def test_obtain_token_with_email(self):
        user = User.objects.create_user(email="token@example.com", password="secret123")
        response = self.client.post(reverse("api_token"),
                                    {"username": "token@example.com", "password": "secret123"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["token"], Token.objects.get(user=user).key)

    def test_bad_credentials(self):
        response = self.client.post(reverse("api_token"), {"username": "nobody@example.com", "password": "x"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"], "Invalid request")


class RpcTests(APITestCase):
    def setUp(self):
        self.user = User.objects.create_user(email="rpc@example.com", password="secret123")
        self.token = Token.objects.create(user=self.user)
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {self.token.key}")

    def rpc(self, name, data=None):
        return self.client.post(reverse("api_rpc", args=[name]), data or {}, format="json")

    def test_requires_token(self):
        self.client.credentials()
        response = self.rpc("calculate_gpa")
        self.assertEqual(response.status_code, 401)
        self.assertIn("error", response.data)

    def test_unknown_function(self):
        response = self.rpc("drop_tables")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data, {"error": "Unknown function: drop_tables"})

    def test_calculate_gpa(self):
        course = Course.objects.create(user=self.user, course_code="CS101", course_name="Intro",
                                       semester="Fall 2024", academic_year="2024-2025", credits=Decimal("3.0"))
        Grade.objects.create(user=self.user, course=course, letter_grade="B+")
        response = self.rpc("calculate_gpa")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data, 3.3)

    def test_attendance_for_foreign_course(self):
        other = User.objects.create_user(email="rpc2@example.com", password="secret123")
        course = Course.objects.create(user=other, course_code="X1", course_name="X",
                                       semester="Fall 2024", academic_year="2024-2025")
        response = self.rpc("calculate_attendance_percentage", {"course_id": str(course.pk)})
        self.assertEqual(response.status_code, 404)

    def test_invalid_months(self):
        response = self.rpc("get_grade_trends", {"months": 0})
        self.assertEqual(response.status_code, 400)
        self.assertIn("months", response.data["details"])

    def test_academic_standing(self):
        response = self.rpc("get_academic_standing")
        self.assertEqual(response.data["active_courses"], 0)

    def test_search_documents(self):
        Document.objects.create(user=self.user, title="Physics notes", file="documents/x/1.pdf")
        response = self.rpc("search_documents", {"query": "physics"})
        self.assertEqual([d["title"] for d in response.data], ["Physics notes"])


class FunctionTests(APITestCase):
    def setUp(self):
        self.user = User.objects.create_user(email="functions@example.com", password="secret123")
        token = Token.objects.create(user=self.user)
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token.key}")

    def test_export(self):
        response = self.client.post(reverse("api_export_data"), {"format": "csv"}, format="json")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response["Content-Type"], "text/csv")

    def test_export_bad_format(self):
        response = self.client.post(reverse("api_export_data"), {"format": "pdf"}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertIn("Unsupported export format", response.data["error"])

    @mock.patch("apps.analytics.insights.requests.post")
    def test_insights_credits_exhausted(self, post):
        post.return_value = mock.Mock(status_code=402, ok=False)
        response = self.client.post(reverse("api_study_insights"))
        self.assertEqual(response.status_code, 402)
        self.assertEqual(response.data, {"error": "AI credits exhausted. Please add credits to continue."})
