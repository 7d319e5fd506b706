# users/models.py
import uuid

from django.contrib.auth.models import AbstractUser
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from .managers import StudentUserManager


class User(AbstractUser):
    """Custom User model using email as the primary identifier"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    username = None  # disable username field
    email = models.EmailField(_("email address"), unique=True)
    last_seen = models.DateTimeField(blank=True, null=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    # Login with email
    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = []

    objects = StudentUserManager()

    class Meta:
        db_table = "auth_user"
        verbose_name = "User"
        verbose_name_plural = "Users"
        ordering = ["-date_joined"]

    def __str__(self):
        return self.get_full_name() or self.email

    def get_full_name(self):
        """Profile name first, then first_name + last_name, then email."""
        profile = getattr(self, "profile", None)
        if profile and profile.full_name:
            return profile.full_name
        full_name = f"{self.first_name} {self.last_name}".strip()
        return full_name if full_name else self.email


class Profile(models.Model):
    """Student identity attributes shown on the profile, settings and digital ID."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name="profile")
    institution = models.ForeignKey(
        "organization.Institution", on_delete=models.SET_NULL, null=True, blank=True,
        related_name="profiles",
    )
    full_name = models.CharField(_("full name"), max_length=100)
    student_id = models.CharField(_("student ID"), max_length=50, blank=True)
    phone = models.CharField(_("phone number"), max_length=20, blank=True)
    program = models.CharField(max_length=150, blank=True)
    major = models.CharField(max_length=150, blank=True)
    year_of_study = models.PositiveSmallIntegerField(
        null=True, blank=True,
        validators=[MinValueValidator(1), MaxValueValidator(10)],
    )
    avatar = models.ImageField(upload_to="avatars/", blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "users_profile"

    def __str__(self):
        return self.full_name or self.user.email

    @property
    def email(self):
        return self.user.email

    @property
    def display_id(self):
        """Student number, or the first 8 characters of the account id."""
        return self.student_id or str(self.user_id)[:8]

    @property
    def initials(self):
        parts = [p for p in self.full_name.split() if p]
        return "".join(p[0] for p in parts[:2]).upper() or "?"
