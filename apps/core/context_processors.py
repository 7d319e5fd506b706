from django.urls import reverse

from apps.core.utils import get_user_profile

# (url name, label, bootstrap icon) for the bottom navigation bar
BOTTOM_NAV = (
    ("home", "Home", "bi-house"),
    ("courses", "Courses", "bi-book"),
    ("calendar", "Calendar", "bi-calendar3"),
    ("digital_id", "ID", "bi-person-badge"),
    ("more", "More", "bi-grid"),
)


def auth_context(request):
    user = request.user
    if not user.is_authenticated:
        return {"current_profile": None, "portal_theme": "system"}

    settings_obj = getattr(user, "portal_settings", None)
    return {
        "current_profile": get_user_profile(user),
        "portal_theme": settings_obj.theme if settings_obj else "system",
    }


def navigation(request):
    if not request.user.is_authenticated:
        return {"nav_items": []}

    path = request.path
    items = []
    for name, label, icon in BOTTOM_NAV:
        url = reverse(name)
        active = path == url if url == "/" else path.startswith(url)
        items.append({"url": url, "label": label, "icon": icon, "active": active})
    return {"nav_items": items}
