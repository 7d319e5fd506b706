from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse

from apps.academics.models import Course, Grade, Schedule

User = get_user_model()


class CourseViewTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(email="views@example.com", password="secret123")
        self.other = User.objects.create_user(email="intruder@example.com", password="secret123")
        self.client.force_login(self.user)

    def course_data(self, **overrides):
        data = {
            "course_code": "CS101",
            "course_name": "Intro to Programming",
            "semester": "Fall 2024",
            "academic_year": "2024-2025",
            "credits": "3.0",
            "status": "active",
        }
        data.update(overrides)
        return data

    def test_create_course_sets_owner(self):
        response = self.client.post(reverse("course_create"), self.course_data())
        self.assertRedirects(response, reverse("courses"), fetch_redirect_response=False)
        course = Course.objects.get()
        self.assertEqual(course.user, self.user)

    def test_invalid_course_shows_inline_errors_and_writes_nothing(self):
        response = self.client.post(
            reverse("course_create"),
            self.course_data(course_code="", instructor_email="nope"),
        )
        self.assertEqual(response.status_code, 200)
        form = response.context["form"]
        self.assertIn("course_code", form.errors)
        self.assertIn("instructor_email", form.errors)
        self.assertFalse(Course.objects.exists())

    def test_cannot_edit_another_users_course(self):
        theirs = Course.objects.create(
            user=self.other, course_code="X1", course_name="Not yours",
            semester="Fall 2024", academic_year="2024-2025",
        )
        response = self.client.get(reverse("course_update", args=[theirs.pk]))
        self.assertEqual(response.status_code, 404)

    def test_list_filters_by_search(self):
        Course.objects.create(user=self.user, course_code="CS101", course_name="Intro",
                              semester="Fall 2024", academic_year="2024-2025")
        Course.objects.create(user=self.user, course_code="BIO110", course_name="Biology",
                              semester="Fall 2024", academic_year="2024-2025")
        response = self.client.get(reverse("courses"), {"search": "bio"})
        self.assertEqual([c.course_code for c in response.context["courses"]], ["BIO110"])
        self.assertEqual(response.context["total_courses"], 2)

    def test_academics_alias(self):
        self.assertEqual(self.client.get("/academics/").status_code, 200)


class ScheduleAndGradeViewTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(email="sched@example.com", password="secret123")
        self.other = User.objects.create_user(email="other2@example.com", password="secret123")
        self.course = Course.objects.create(user=self.user, course_code="CS101", course_name="Intro",
                                            semester="Fall 2024", academic_year="2024-2025")
        self.foreign = Course.objects.create(user=self.other, course_code="ZZ9", course_name="Foreign",
                                             semester="Fall 2024", academic_year="2024-2025")
        self.client.force_login(self.user)

    def test_schedule_end_must_follow_start(self):
        response = self.client.post(reverse("schedule_create"), {
            "course": self.course.pk, "day_of_week": 1,
            "start_time": "10:00", "end_time": "09:00",
        })
        self.assertEqual(response.status_code, 200)
        self.assertIn("end_time", response.context["form"].errors)
        self.assertFalse(Schedule.objects.exists())

    def test_schedule_only_offers_own_courses(self):
        response = self.client.post(reverse("schedule_create"), {
            "course": self.foreign.pk, "day_of_week": 1,
            "start_time": "09:00", "end_time": "10:00",
        })
        self.assertIn("course", response.context["form"].errors)

    def test_add_class(self):
        response = self.client.post(reverse("schedule_create"), {
            "course": self.course.pk, "day_of_week": 2,
            "start_time": "09:00", "end_time": "10:30", "location": "Room 204",
        })
        self.assertRedirects(response, reverse("schedule"), fetch_redirect_response=False)
        self.assertEqual(Schedule.objects.get().location, "Room 204")

    def test_record_grade(self):
        response = self.client.post(reverse("grade_create"), {
            "course": self.course.pk, "grade_type": "quiz",
            "grade_value": "18", "max_value": "20", "letter_grade": "a-",
        })
        self.assertRedirects(response, reverse("grades"), fetch_redirect_response=False)
        grade = Grade.objects.get()
        self.assertEqual(grade.user, self.user)
        self.assertEqual(grade.letter_grade, "A-")

    def test_grade_needs_score_or_letter(self):
        response = self.client.post(reverse("grade_create"), {
            "course": self.course.pk, "grade_type": "quiz", "max_value": "100",
        })
        self.assertEqual(response.status_code, 200)
        self.assertFalse(Grade.objects.exists())

    def test_grades_page_shows_gpa(self):
        Grade.objects.create(user=self.user, course=self.course, letter_grade="B")
        response = self.client.get(reverse("grades"))
        self.assertEqual(response.context["gpa"], 3.0)
        self.assertEqual(len(response.context["course_groups"]), 1)

    def test_schedule_page(self):
        Schedule.objects.create(course=self.course, day_of_week=3,
                                start_time="13:00", end_time="14:00")
        response = self.client.get(reverse("schedule"))
        self.assertEqual(len(response.context["days"]["Wednesday"]), 1)
        self.assertContains(response, "1:00 PM")
