import logging

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import JsonResponse
from django.shortcuts import redirect
from django.views import View
from django.views.generic import TemplateView

from . import services
from .exports import EXPORT_FORMATS, ExportFormatError, build_export_response
from .insights import InsightsError, generate_study_insights

logger = logging.getLogger(__name__)


class AnalyticsView(LoginRequiredMixin, TemplateView):
    template_name = 'analytics/analytics.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        user = self.request.user
        try:
            standing = services.get_academic_standing(user)
            context.update({
                'standing': standing,
                'attendance_band': services.attendance_band(standing['attendance_percentage']),
                'grade_trends': services.get_grade_trends(user, months=6),
                'attendance_patterns': services.get_attendance_patterns(user, months=3),
                'grade_distribution': services.grade_distribution(user),
                'course_performance': services.course_performance(user),
            })
        except Exception:
            logger.exception(f"Error fetching analytics for {user.email}")
            messages.error(self.request, 'Failed to load analytics data')
        context['export_formats'] = EXPORT_FORMATS
        return context


class ExportDataView(LoginRequiredMixin, View):
    """Download the signed-in user's data (``?format=json|csv|xlsx``)."""

    def get(self, request):
        try:
            return build_export_response(request.user, request.GET.get('format', 'json'))
        except ExportFormatError as e:
            messages.error(request, str(e))
        except Exception:
            logger.exception(f"Error exporting data for {request.user.email}")
            messages.error(request, 'Failed to export data')
        return redirect('analytics')


class StudyInsightsView(LoginRequiredMixin, View):
    """Session-authenticated twin of the study insights API for the analytics page."""

    def post(self, request):
        try:
            return JsonResponse(generate_study_insights(request.user))
        except InsightsError as e:
            logger.warning(f"Study insights failed for {request.user.email}: {e.message}")
            return JsonResponse({'error': e.message}, status=e.status_code)
