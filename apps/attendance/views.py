import logging

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.urls import reverse_lazy
from django.views.generic import CreateView, TemplateView

from apps.analytics.services import attendance_band, calculate_attendance_percentage, course_attendance
from apps.core.mixins import OwnerFormMixin

from .forms import AttendanceForm
from .models import AttendanceRecord

logger = logging.getLogger(__name__)


class AttendanceOverviewView(LoginRequiredMixin, TemplateView):
    """Overall and per-course attendance with the latest records."""
    template_name = 'attendance/overview.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        user = self.request.user
        try:
            overall = calculate_attendance_percentage(user)
            records = AttendanceRecord.objects.filter(user=user).select_related('course')
            context.update({
                'overall_percentage': overall,
                'overall_band': attendance_band(overall),
                'course_rows': course_attendance(user),
                'recent_records': records[:20],
                'total_records': records.count(),
            })
        except Exception:
            logger.exception(f"Error fetching attendance for {user.email}")
            messages.error(self.request, 'Failed to load attendance data')
        context['form'] = AttendanceForm(user=user)
        return context


class MarkAttendanceView(OwnerFormMixin, CreateView):
    model = AttendanceRecord
    form_class = AttendanceForm
    template_name = 'attendance/mark.html'
    success_url = reverse_lazy('attendance')

    def form_valid(self, form):
        response = super().form_valid(form)
        messages.success(
            self.request,
            f'Marked {self.object.get_status_display().lower()} for {self.object.course.course_code} on {self.object.date}.'
        )
        return response
