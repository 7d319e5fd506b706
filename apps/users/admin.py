# users/admin.py
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.translation import gettext_lazy as _

from .models import Profile, User


class ProfileInline(admin.StackedInline):
    """Inline Profile in User admin"""
    model = Profile
    can_delete = False
    verbose_name_plural = "Profile"
    fk_name = "user"


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Custom User admin"""
    model = User
    list_display = (
        "email",
        "get_full_name",
        "is_active",
        "is_staff",
        "last_login",
        "last_seen",
        "created_at",
    )
    list_filter = ("is_active", "is_staff", "is_superuser", "created_at")
    search_fields = ("email", "first_name", "last_name", "profile__full_name", "profile__student_id")
    ordering = ("-created_at",)
    readonly_fields = ("last_login", "last_seen", "created_at", "updated_at")
    inlines = [ProfileInline]

    fieldsets = (
        (None, {"fields": ("email", "password")}),
        (_("Personal info"), {"fields": ("first_name", "last_name")}),
        (_("Permissions"), {"fields": ("is_active", "is_staff", "is_superuser", "groups", "user_permissions")}),
        (_("Important dates"), {"fields": ("last_login", "last_seen", "created_at", "updated_at")}),
    )

    add_fieldsets = (
        (None, {
            "classes": ("wide",),
            "fields": ("email", "first_name", "last_name", "password1", "password2"),
        }),
    )


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ("full_name", "user", "student_id", "program", "major", "year_of_study", "institution")
    list_filter = ("institution", "year_of_study")
    search_fields = ("full_name", "user__email", "student_id", "program", "major")
    raw_id_fields = ("user",)
