from urllib.parse import urlencode

from django.conf import settings
from django.shortcuts import redirect, resolve_url

# Auth views a signed-in user should never land on.
AUTH_ONLY_URL_NAMES = (
    "account_login",
    "account_signup",
    "account_reset_password",
    "account_reset_password_done",
)


class AuthRouteGuardMiddleware:
    """
    Keep anonymous visitors on the auth pages and signed-in users off them.

    Anonymous requests to anything that is not public are sent to the login
    page with ``?next=``. Signed-in requests to ``/auth/`` or to the login,
    signup and password-reset pages are sent home.
    """

    public_prefixes = ("/auth/", "/admin/", "/api/", "/healthz/")

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        path = request.path_info
        user = getattr(request, "user", None)

        if user is not None and user.is_authenticated:
            if self.is_auth_only(path):
                return redirect("home")
        elif not self.is_public(path):
            login_url = resolve_url(settings.LOGIN_URL)
            return redirect(f"{login_url}?{urlencode({'next': request.get_full_path()})}")

        return self.get_response(request)

    def is_public(self, path):
        prefixes = self.public_prefixes + tuple(
            p for p in (settings.STATIC_URL, settings.MEDIA_URL) if p
        )
        return path.startswith(prefixes)

    def is_auth_only(self, path):
        if path == "/auth/":
            return True
        return path in {resolve_url(name) for name in AUTH_ONLY_URL_NAMES}
