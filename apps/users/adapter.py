# users/adapter.py
import logging

from allauth.account.adapter import DefaultAccountAdapter
from django.urls import reverse

logger = logging.getLogger(__name__)


class CustomAccountAdapter(DefaultAccountAdapter):

    def get_login_redirect_url(self, request):
        """
        allauth applies ``?next=`` before asking; everything else lands home.
        """
        return reverse('home')

    def save_user(self, request, user, form, commit=True):
        """
        Split the signup full name into first/last name on the User; the
        untouched full name goes to the Profile once the user exists.
        """
        user = super().save_user(request, user, form, commit=False)
        full_name = (form.cleaned_data.get('full_name') or '').strip()
        if full_name:
            first, _, last = full_name.partition(' ')
            user.first_name = first[:150]
            user.last_name = last.strip()[:150]
        if commit:
            user.save()
            logger.info(f"New account registered: {user.email}")
        return user
