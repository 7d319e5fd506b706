# core/mixins.py
import logging

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin

logger = logging.getLogger(__name__)


class OwnerQuerysetMixin(LoginRequiredMixin):
    """
    Scope a generic view to the signed-in student's own rows.

    ``owner_field`` is the lookup from the model to the owning user; rows
    reached through a course use ``course__user``.
    """

    owner_field = "user"

    def get_queryset(self):
        return super().get_queryset().filter(**{self.owner_field: self.request.user})


class OwnerFormMixin(OwnerQuerysetMixin):
    """Create/update views: pass the user to the form and stamp ownership on save."""

    success_message = None

    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        kwargs["user"] = self.request.user
        return kwargs

    def form_valid(self, form):
        if self.owner_field == "user":
            form.instance.user = self.request.user
        response = super().form_valid(form)
        if self.success_message:
            messages.success(self.request, self.success_message)
        logger.info(f"{self.model.__name__} saved by {self.request.user.email}: {self.object.pk}")
        return response

    def form_invalid(self, form):
        messages.error(self.request, "Please correct the errors below.")
        return super().form_invalid(form)


class UserCoursesFormMixin:
    """Forms with a ``course`` field only offer the user's own courses."""

    course_field = "course"

    def limit_courses(self, user):
        from apps.academics.models import Course

        if self.course_field in self.fields:
            self.fields[self.course_field].queryset = Course.objects.filter(user=user).order_by("course_code")
