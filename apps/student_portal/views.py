# student_portal/views.py
import logging

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import HttpResponse, JsonResponse
from django.shortcuts import redirect
from django.urls import reverse
from django.utils.translation import gettext_lazy as _
from django.views import View
from django.views.generic import TemplateView

from apps.analytics.services import get_academic_standing
from apps.core.utils import get_user_profile

from .forms import NotificationPreferencesForm, ThemeForm
from .idcard import StudentIDCardGenerator
from .models import PortalSettings
from .services import (
    ONBOARDING_STEPS,
    dashboard_summary,
    digital_id_payload,
    digital_id_png,
    digital_id_qr,
    onboarding_step,
)

logger = logging.getLogger(__name__)


def _is_ajax(request):
    return request.headers.get('X-Requested-With') == 'XMLHttpRequest'


class HomeView(LoginRequiredMixin, TemplateView):
    """Dashboard; first-time students see the onboarding walkthrough instead."""
    template_name = 'student_portal/home.html'
    onboarding_template_name = 'student_portal/onboarding.html'

    def get_template_names(self):
        if not PortalSettings.for_user(self.request.user).onboarding_completed:
            return [self.onboarding_template_name]
        return [self.template_name]

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        user = self.request.user
        context['profile'] = get_user_profile(user)

        step = onboarding_step(self.request.GET.get('step'))
        context.update({
            'onboarding_step': step,
            'onboarding_feature': ONBOARDING_STEPS[step],
            'onboarding_total': len(ONBOARDING_STEPS),
            'onboarding_progress': round((step + 1) / len(ONBOARDING_STEPS) * 100),
            'onboarding_is_last': step == len(ONBOARDING_STEPS) - 1,
        })

        try:
            context['standing'] = get_academic_standing(user)
            context.update(dashboard_summary(user))
        except Exception:
            logger.exception(f"Failed to load dashboard for {user.email}")
            messages.error(self.request, _('Failed to load your dashboard.'))
            context['standing'] = None
        return context


class CompleteOnboardingView(LoginRequiredMixin, View):
    """Finish or skip the walkthrough."""

    def post(self, request, *args, **kwargs):
        portal_settings = PortalSettings.for_user(request.user)
        portal_settings.onboarding_completed = True
        portal_settings.save(update_fields=['onboarding_completed', 'updated_at'])
        logger.info(f"Onboarding completed for {request.user.email}")
        return redirect('home')


class MoreView(LoginRequiredMixin, TemplateView):
    template_name = 'student_portal/more.html'

    menu_items = (
        ('digital_id', 'Digital ID Card', 'View your student ID with QR code', 'bi-person-badge'),
        ('users_profile', 'Profile', 'Manage your personal information', 'bi-person'),
        ('documents', 'Documents', 'Access your academic documents', 'bi-file-earmark-text'),
        ('calendar', 'Calendar', 'View academic events and deadlines', 'bi-calendar3'),
        ('attendance', 'Attendance', 'Track your class attendance', 'bi-check2-square'),
        ('grades', 'Grades', 'Review grades and GPA', 'bi-mortarboard'),
        ('schedule', 'Schedule', 'Your weekly class timetable', 'bi-clock'),
        ('analytics', 'Analytics', 'View your performance insights', 'bi-bar-chart'),
        ('settings', 'Settings', 'Customize your preferences', 'bi-gear'),
    )

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['menu_items'] = [
            {'url': reverse(name), 'title': title, 'description': description, 'icon': icon}
            for name, title, description, icon in self.menu_items
        ]
        return context


class DigitalIDView(LoginRequiredMixin, TemplateView):
    template_name = 'student_portal/digital_id.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        user = self.request.user
        profile = get_user_profile(user, self.request)
        context['profile'] = profile
        context['institution'] = profile.institution
        try:
            context['qr_code'] = digital_id_qr(user)
        except Exception:
            logger.exception(f"QR code generation failed for {user.email}")
            messages.error(self.request, _('Could not generate your QR code.'))
            context['qr_code'] = None
        return context


class DigitalIDQRDownloadView(LoginRequiredMixin, View):
    def get(self, request, *args, **kwargs):
        payload = digital_id_payload(request.user)
        response = HttpResponse(digital_id_png(request.user), content_type='image/png')
        response['Content-Disposition'] = f'attachment; filename="student-id-{payload["student_id"]}.png"'
        return response


class DigitalIDCardDownloadView(LoginRequiredMixin, View):
    def get(self, request, *args, **kwargs):
        profile = get_user_profile(request.user)
        try:
            generator = StudentIDCardGenerator(profile, digital_id_payload(request.user))
            return generator.get_id_card_response()
        except Exception:
            logger.exception(f"ID card generation failed for {request.user.email}")
            messages.error(request, _('Could not generate your ID card.'))
            return redirect('digital_id')


class UpdatePreferencesView(LoginRequiredMixin, View):
    """Save notification toggles from the settings page."""
    form_class = NotificationPreferencesForm
    success_message = _('Notification preferences saved.')

    def post(self, request, *args, **kwargs):
        form = self.form_class(request.POST, instance=PortalSettings.for_user(request.user))
        if form.is_valid():
            form.save()
            logger.info(f"{self.form_class.__name__} saved for {request.user.email}")
            if _is_ajax(request):
                return JsonResponse({'success': True})
            messages.success(request, self.success_message)
        else:
            if _is_ajax(request):
                return JsonResponse({'success': False, 'errors': form.errors}, status=400)
            messages.error(request, _('Could not save your preferences.'))
        return redirect('settings')


class UpdateThemeView(UpdatePreferencesView):
    form_class = ThemeForm
    success_message = _('Theme updated.')
