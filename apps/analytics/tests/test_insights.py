from unittest import mock

import requests
from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings
from django.urls import reverse

from apps.analytics.insights import (
    InsightsCreditsExhausted, InsightsError, InsightsRateLimited, build_context, generate_study_insights,
)

User = get_user_model()


def gateway_response(status_code, payload=None):
    response = mock.Mock(status_code=status_code, ok=200 <= status_code < 400)
    response.json.return_value = payload if payload is not None else {}
    return response


def reply(text):
    return {"choices": [{"message": {"content": text}}]}


@override_settings(AI_GATEWAY_URL="https://gateway.test/v1/chat/completions", AI_GATEWAY_API_KEY="key")
class StudyInsightsTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(email="insights@example.com", password="secret123")

    @mock.patch("apps.analytics.insights.requests.post")
    def test_success(self, post):
        post.return_value = gateway_response(200, reply("Study more."))

        result = generate_study_insights(self.user)

        self.assertEqual(result["insights"], "Study more.")
        self.assertEqual(set(result), {"insights", "academicStanding", "gradeTrends", "attendancePatterns"})
        args, kwargs = post.call_args
        self.assertEqual(args[0], "https://gateway.test/v1/chat/completions")
        self.assertEqual(kwargs["headers"]["Authorization"], "Bearer key")
        self.assertEqual(kwargs["json"]["messages"][0]["role"], "system")
        self.assertIn("Student Academic Profile", kwargs["json"]["messages"][1]["content"])

    @mock.patch("apps.analytics.insights.requests.post")
    def test_empty_reply(self, post):
        post.return_value = gateway_response(200, {"choices": []})
        self.assertEqual(generate_study_insights(self.user)["insights"],
                         "Unable to generate insights at this time.")

    @mock.patch("apps.analytics.insights.requests.post")
    def test_rate_limited(self, post):
        post.return_value = gateway_response(429)
        with self.assertRaises(InsightsRateLimited) as ctx:
            generate_study_insights(self.user)
        self.assertEqual(ctx.exception.status_code, 429)
        self.assertEqual(ctx.exception.message, "Rate limit exceeded. Please try again later.")

    @mock.patch("apps.analytics.insights.requests.post")
    def test_credits_exhausted(self, post):
        post.return_value = gateway_response(402)
        with self.assertRaises(InsightsCreditsExhausted) as ctx:
            generate_study_insights(self.user)
        self.assertEqual(ctx.exception.status_code, 402)

    @mock.patch("apps.analytics.insights.requests.post")
    def test_gateway_error(self, post):
        post.return_value = gateway_response(503)
        with self.assertLogs("apps.analytics.insights", level="ERROR"):
            with self.assertRaises(InsightsError) as ctx:
                generate_study_insights(self.user)
        self.assertEqual(ctx.exception.message, "AI Gateway error: 503")
        self.assertEqual(ctx.exception.status_code, 500)

    @mock.patch("apps.analytics.insights.requests.post", side_effect=requests.ConnectionError("down"))
    def test_network_failure(self, _post):
        with self.assertLogs("apps.analytics.insights", level="ERROR"):
            with self.assertRaises(InsightsError):
                generate_study_insights(self.user)

    def test_context_without_data(self):
        text = build_context({"gpa": 0}, [], [])
        self.assertIn("No recent grades", text)
        self.assertIn("No attendance data", text)


class StudyInsightsViewTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(email="insightsview@example.com", password="secret123")
        self.client.force_login(self.user)

    @mock.patch("apps.analytics.insights.requests.post")
    def test_json_reply(self, post):
        post.return_value = gateway_response(200, reply("Keep going."))
        response = self.client.post(reverse("study_insights"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["insights"], "Keep going.")

    @mock.patch("apps.analytics.insights.requests.post")
    def test_error_status_passed_through(self, post):
        post.return_value = gateway_response(429)
        response = self.client.post(reverse("study_insights"))
        self.assertEqual(response.status_code, 429)
        self.assertEqual(response.json(), {"error": "Rate limit exceeded. Please try again later."})

    def test_page_renders(self):
        response = self.client.get(reverse("analytics"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["standing"]["gpa"], 0.0)
        self.assertEqual(response.context["attendance_band"], "Critical")
