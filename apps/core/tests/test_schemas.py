from django import forms
from django.test import SimpleTestCase

from apps.core.schemas import (
    COURSE_SCHEMA,
    DOCUMENT_SCHEMA,
    LOGIN_SCHEMA,
    SIGNUP_SCHEMA,
    FieldError,
    apply_schema,
)


def valid_signup(**overrides):
    data = {
        "full_name": "Ada Lovelace",
        "email": "ada@example.com",
        "password": "secret123",
        "confirm_password": "secret123",
        "terms": True,
    }
    data.update(overrides)
    return data


class SignupSchemaTests(SimpleTestCase):
    def test_valid_data(self):
        self.assertEqual(SIGNUP_SCHEMA.validate(valid_signup()), [])

    def test_password_mismatch_lands_on_confirmation(self):
        errors = SIGNUP_SCHEMA.validate(valid_signup(confirm_password="other123"))
        self.assertEqual(errors, [FieldError("confirm_password", "Passwords don't match")])

    def test_name_is_trimmed_before_length_check(self):
        errors = SIGNUP_SCHEMA.validate(valid_signup(full_name="  A  "))
        self.assertEqual(errors, [FieldError("full_name", "Name must be at least 2 characters")])

    def test_terms_must_be_accepted(self):
        errors = SIGNUP_SCHEMA.validate(valid_signup(terms=False))
        self.assertEqual([e.field for e in errors], ["terms"])

    def test_short_password(self):
        errors = SIGNUP_SCHEMA.validate(valid_signup(password="short", confirm_password="short"))
        self.assertEqual(errors, [FieldError("password", "Password must be at least 8 characters")])


class LoginSchemaTests(SimpleTestCase):
    def test_invalid_email_and_short_password(self):
        errors = LOGIN_SCHEMA.validate({"email": "not-an-email", "password": "12345"})
        self.assertEqual(
            errors,
            [
                FieldError("email", "Invalid email address"),
                FieldError("password", "Password must be at least 6 characters"),
            ],
        )


class CourseSchemaTests(SimpleTestCase):
    def course(self, **overrides):
        data = {
            "course_code": "CS101",
            "course_name": "Intro to Programming",
            "instructor_email": "",
            "semester": "Fall 2024",
            "academic_year": "2024-2025",
            "credits": "3",
            "status": "active",
        }
        data.update(overrides)
        return data

    def test_blank_instructor_email_allowed(self):
        self.assertTrue(COURSE_SCHEMA.is_valid(self.course()))

    def test_bad_instructor_email(self):
        errors = COURSE_SCHEMA.validate(self.course(instructor_email="nope"))
        self.assertEqual(errors, [FieldError("instructor_email", "Invalid email")])

    def test_code_length_and_status(self):
        errors = COURSE_SCHEMA.validate(self.course(course_code="X" * 21, status="paused"))
        self.assertEqual([e.field for e in errors], ["course_code", "status"])


class DocumentTitleForm(forms.Form):
    title = forms.CharField(required=False)


class ApplySchemaTests(SimpleTestCase):
    def test_errors_attach_to_form_fields(self):
        form = DocumentTitleForm(data={"title": "   "})
        form.is_valid()
        errors = apply_schema(form, DOCUMENT_SCHEMA)
        self.assertEqual(len(errors), 1)
        self.assertEqual(form.errors["title"], ["Please enter a title"])

    def test_unknown_fields_become_non_field_errors(self):
        form = DocumentTitleForm(data={"title": "ok"})
        form.is_valid()
        apply_schema(form, LOGIN_SCHEMA, data={"email": "bad", "password": "123456"})
        self.assertIn("Invalid email address", form.non_field_errors())
