# core/signals.py
import logging

from django.contrib.auth.signals import user_logged_in, user_logged_out
from django.db.models.signals import post_save
from django.dispatch import receiver
from django.utils import timezone

from apps.users.models import Profile, User

logger = logging.getLogger(__name__)


@receiver(post_save, sender=User)
def create_profile_for_user(sender, instance, created, **kwargs):
    """
    Every account gets a Profile as soon as it is created so pages can rely
    on ``request.user.profile`` existing.
    """
    if created:
        Profile.objects.get_or_create(
            user=instance,
            defaults={"full_name": f"{instance.first_name} {instance.last_name}".strip()},
        )


@receiver(user_logged_in)
def on_user_logged_in(sender, request, user, **kwargs):
    User.objects.filter(pk=user.pk).update(last_seen=timezone.now())
    logger.info(f"User signed in: {user.email}")


@receiver(user_logged_out)
def on_user_logged_out(sender, request, user, **kwargs):
    if user is not None:
        User.objects.filter(pk=user.pk).update(last_seen=timezone.now())
        logger.info(f"User signed out: {user.email}")
