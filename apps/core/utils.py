# core/utils.py
from django.contrib import messages

from apps.users.models import Profile


def get_user_profile(user, request=None):
    """
    Return the user's Profile, creating it when an older account has none.
    If request is provided, add a warning when the profile is incomplete.
    """
    if not user.is_authenticated:
        return None

    profile = getattr(user, "profile", None)
    if profile is None:
        profile, _ = Profile.objects.get_or_create(user=user, defaults={"full_name": ""})

    if request and not profile.full_name:
        messages.warning(request, "Add your name in Settings to complete your profile.")

    return profile


def get_user_institution(user):
    profile = get_user_profile(user)
    return profile.institution if profile else None
