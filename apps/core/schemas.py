# core/schemas.py
"""
Declarative validation schemas for the portal's forms.

A schema is a plain, typed description of the fields a form accepts. Calling
``schema.validate(data)`` returns a list of ``FieldError`` and never touches
the database, so the same rules serve HTML forms, the JSON API and tests.
``apply_schema`` copies those errors onto a Django form so they show inline.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from django.core.exceptions import ValidationError
from django.core.validators import validate_email


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


@dataclass(frozen=True)
class TextField:
    name: str
    required: bool = False
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    email: bool = False
    choices: Optional[Sequence[str]] = None
    trim: bool = True
    messages: Dict[str, str] = field(default_factory=dict)

    def check(self, value) -> List[str]:
        value = "" if value is None else str(value)
        if self.trim:
            value = value.strip()

        if not value:
            if self.required:
                return [self.messages.get("required", "This field is required.")]
            return []

        errors = []
        if self.min_length is not None and len(value) < self.min_length:
            errors.append(self.messages.get(
                "min_length", f"Must be at least {self.min_length} characters."))
        if self.max_length is not None and len(value) > self.max_length:
            errors.append(self.messages.get(
                "max_length", f"Must be at most {self.max_length} characters."))
        if self.email:
            try:
                validate_email(value)
            except ValidationError:
                errors.append(self.messages.get("email", "Invalid email address"))
        if self.choices is not None and value not in self.choices:
            errors.append(self.messages.get(
                "choices", f"Select one of: {', '.join(self.choices)}."))
        return errors


@dataclass(frozen=True)
class BooleanField:
    name: str
    must_be_true: bool = False
    messages: Dict[str, str] = field(default_factory=dict)

    def check(self, value) -> List[str]:
        if self.must_be_true and value not in (True, "true", "True", "on", "1", 1):
            return [self.messages.get("must_be_true", "This must be accepted.")]
        return []


@dataclass(frozen=True)
class NumberField:
    name: str
    required: bool = False
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    messages: Dict[str, str] = field(default_factory=dict)

    def check(self, value) -> List[str]:
        if value is None or value == "":
            if self.required:
                return [self.messages.get("required", "This field is required.")]
            return []
        try:
            number = float(value)
        except (TypeError, ValueError):
            return [self.messages.get("invalid", "Enter a number.")]
        if self.min_value is not None and number < self.min_value:
            return [self.messages.get("min_value", f"Must be at least {self.min_value:g}.")]
        if self.max_value is not None and number > self.max_value:
            return [self.messages.get("max_value", f"Must be at most {self.max_value:g}.")]
        return []


# A cross-field check receives the whole data dict and returns errors.
Check = Callable[[Dict[str, Any]], Iterable[FieldError]]


@dataclass(frozen=True)
class FormSchema:
    name: str
    fields: Sequence[Any]
    checks: Sequence[Check] = ()

    def validate(self, data: Dict[str, Any]) -> List[FieldError]:
        errors = []
        for field in self.fields:
            for message in field.check(data.get(field.name)):
                errors.append(FieldError(field.name, message))
        for check in self.checks:
            errors.extend(check(data))
        return errors

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return not self.validate(data)


def fields_match(first, second, message):
    """Cross-field check: ``second`` must equal ``first``; error lands on ``second``."""
    def check(data):
        if data.get(first) != data.get(second):
            return [FieldError(second, message)]
        return []
    return check


def apply_schema(form, schema, data=None, field_map=None):
    """
    Validate ``data`` (defaults to ``form.cleaned_data``) against ``schema``
    and attach each error to the matching form field.

    ``field_map`` renames schema fields to form fields where they differ.
    Errors for fields the form does not have become non-field errors.
    Returns the list of ``FieldError``.
    """
    field_map = field_map or {}
    data = form.cleaned_data if data is None else data
    errors = schema.validate(data)
    for error in errors:
        name = field_map.get(error.field, error.field)
        target = name if name in form.fields else None
        if target and target not in form.cleaned_data and target in form.errors:
            # Field already failed its own validation; keep the first message.
            continue
        form.add_error(target, error.message)
    return errors


COURSE_STATUSES = ("active", "completed", "dropped")

SIGNUP_SCHEMA = FormSchema(
    name="signup",
    fields=(
        TextField("full_name", required=True, min_length=2, max_length=100,
                  messages={"min_length": "Name must be at least 2 characters",
                            "required": "Name must be at least 2 characters"}),
        TextField("email", required=True, max_length=255, email=True,
                  messages={"email": "Invalid email address", "required": "Invalid email address"}),
        TextField("password", required=True, min_length=8, max_length=100, trim=False,
                  messages={"min_length": "Password must be at least 8 characters",
                            "required": "Password must be at least 8 characters"}),
        BooleanField("terms", must_be_true=True,
                     messages={"must_be_true": "You must accept the terms and conditions"}),
    ),
    checks=(fields_match("password", "confirm_password", "Passwords don't match"),),
)

LOGIN_SCHEMA = FormSchema(
    name="login",
    fields=(
        TextField("email", required=True, email=True,
                  messages={"email": "Invalid email address", "required": "Invalid email address"}),
        TextField("password", required=True, min_length=6, trim=False,
                  messages={"min_length": "Password must be at least 6 characters",
                            "required": "Password must be at least 6 characters"}),
    ),
)

PASSWORD_RESET_SCHEMA = FormSchema(
    name="password_reset",
    fields=(
        TextField("email", required=True, email=True,
                  messages={"email": "Invalid email address", "required": "Invalid email address"}),
    ),
)

COURSE_SCHEMA = FormSchema(
    name="course",
    fields=(
        TextField("course_code", required=True, min_length=1, max_length=20,
                  messages={"required": "Course code is required"}),
        TextField("course_name", required=True, min_length=1, max_length=200,
                  messages={"required": "Course name is required"}),
        TextField("instructor_email", email=True, messages={"email": "Invalid email"}),
        TextField("semester", required=True, messages={"required": "Semester is required"}),
        TextField("academic_year", required=True, messages={"required": "Academic year is required"}),
        NumberField("credits", required=True, min_value=0, max_value=30,
                    messages={"required": "Credits is required"}),
        TextField("status", required=True, choices=COURSE_STATUSES),
    ),
)

DOCUMENT_SCHEMA = FormSchema(
    name="document",
    fields=(
        TextField("title", required=True, max_length=255,
                  messages={"required": "Please enter a title"}),
    ),
)
