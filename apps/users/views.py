# users/views.py
import logging

from django.contrib import messages
from django.contrib.auth import logout
from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import JsonResponse
from django.shortcuts import redirect
from django.urls import reverse_lazy
from django.utils.translation import gettext_lazy as _
from django.views import View
from django.views.generic import TemplateView, UpdateView

from apps.analytics.services import get_academic_standing
from apps.core.utils import get_user_profile
from apps.student_portal.forms import NotificationPreferencesForm, ThemeForm
from apps.student_portal.models import PortalSettings

from .forms import AvatarForm, ProfileForm
from .sessions import current_session_info, sign_out_everywhere

logger = logging.getLogger(__name__)


class UserProfileView(LoginRequiredMixin, TemplateView):
    """The student's own profile with a short academic summary."""
    template_name = 'users/profile.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['profile'] = get_user_profile(self.request.user, self.request)
        context['page_title'] = _('My Profile')
        try:
            context['standing'] = get_academic_standing(self.request.user)
        except Exception:
            logger.exception(f"Could not load standing for {self.request.user.email}")
            messages.error(self.request, _('Could not load your academic summary.'))
            context['standing'] = None
        return context


class UserProfileUpdateView(LoginRequiredMixin, UpdateView):
    """Edit personal information"""
    form_class = ProfileForm
    template_name = 'users/profile_edit.html'
    success_url = reverse_lazy('users_profile')

    def get_object(self, queryset=None):
        return get_user_profile(self.request.user)

    def form_valid(self, form):
        response = super().form_valid(form)
        messages.success(self.request, _('Profile updated successfully!'))
        logger.info(f"Profile updated for {self.request.user.email}")
        return response

    def form_invalid(self, form):
        messages.error(self.request, _('Please correct the errors below.'))
        return super().form_invalid(form)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['page_title'] = _('Edit Profile')
        return context


class AvatarUploadView(LoginRequiredMixin, UpdateView):
    """Handle avatar upload"""
    form_class = AvatarForm
    template_name = 'users/profile_edit.html'

    def get_object(self, queryset=None):
        return get_user_profile(self.request.user)

    def form_valid(self, form):
        form.save()
        if self.request.headers.get('X-Requested-With') == 'XMLHttpRequest':
            return JsonResponse({
                'success': True,
                'avatar_url': self.object.avatar.url,
                'message': 'Avatar uploaded successfully!'
            })
        messages.success(self.request, 'Avatar uploaded successfully!')
        return redirect('users_profile')

    def form_invalid(self, form):
        if self.request.headers.get('X-Requested-With') == 'XMLHttpRequest':
            return JsonResponse({
                'success': False,
                'errors': form.errors,
                'message': 'Error uploading avatar.'
            }, status=400)
        messages.error(self.request, 'Error uploading avatar.')
        return redirect('users_profile_edit')


class SettingsView(LoginRequiredMixin, TemplateView):
    """Profile, notifications, appearance, sessions and data export in one page."""
    template_name = 'users/settings.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        user = self.request.user
        portal_settings = PortalSettings.for_user(user)
        context.update({
            'page_title': _('Settings'),
            'profile_form': ProfileForm(instance=get_user_profile(user)),
            'preferences_form': NotificationPreferencesForm(instance=portal_settings),
            'theme_form': ThemeForm(instance=portal_settings),
            'session_info': current_session_info(self.request),
        })
        return context


class SignOutAllDevicesView(LoginRequiredMixin, View):
    """Delete every session of the user, this browser included."""

    def post(self, request, *args, **kwargs):
        user = request.user
        try:
            count = sign_out_everywhere(user)
        except Exception:
            logger.exception(f"Sign out everywhere failed for {user.email}")
            messages.error(request, _('Could not sign out other devices. Please try again.'))
            return redirect('settings')

        logout(request)
        messages.success(
            request,
            _('Signed out from all devices. %(count)d session(s) ended.') % {'count': count},
        )
        return redirect('account_login')
