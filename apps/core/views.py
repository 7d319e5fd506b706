from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import Http404, JsonResponse
from django.shortcuts import render
from django.views import View

from apps.core.realtime import change_version

# Tables a page may poll, see ``register_model`` calls in each app's ready().
POLLABLE_TABLES = ("courses", "schedules", "grades", "attendance", "documents", "calendar_events")


def handler404(request, exception):
    return render(request, 'errors/404.html', status=404)


def handler500(request):
    return render(request, 'errors/500.html', status=500)


def healthz(request):
    return JsonResponse({"status": "ok"})


class ChangesView(LoginRequiredMixin, View):
    """Current change version of one table for the signed-in user."""

    def get(self, request, table):
        if table not in POLLABLE_TABLES:
            raise Http404(f"Unknown table: {table}")
        return JsonResponse({
            "table": table,
            "version": change_version(table, str(request.user.pk)),
        })
