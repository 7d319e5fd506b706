import uuid
from django.db import models
from django.utils.translation import gettext_lazy as _


class Institution(models.Model):
    TYPE_CHOICES = [
        ("school", "School"),
        ("college", "College"),
        ("university", "University"),
        ("institute", "Institute"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    short_name = models.CharField(max_length=50, blank=True)
    type = models.CharField(max_length=20, choices=TYPE_CHOICES, default="university")
    website = models.URLField(blank=True)
    contact_email = models.EmailField(blank=True)

    # Branding used on the digital ID card
    logo = models.ImageField(upload_to="institution_logos/", blank=True, null=True)
    primary_color = models.CharField(max_length=7, default='#1E40AF',
                                     help_text="Primary color (e.g., #1E40AF)")
    secondary_color = models.CharField(max_length=7, default='#3B82F6',
                                       help_text="Secondary color (e.g., #3B82F6)")

    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        verbose_name = _("Institution")
        verbose_name_plural = _("Institutions")

    def __str__(self):
        return self.name

    @property
    def display_name(self):
        return self.short_name or self.name
