# users/forms.py
from allauth.account.forms import LoginForm as AllAuthLoginForm
from allauth.account.forms import ResetPasswordForm as AllAuthResetPasswordForm
from allauth.account.forms import SignupForm as AllAuthSignupForm
from django import forms
from django.utils.translation import gettext_lazy as _

from apps.core.schemas import (
    LOGIN_SCHEMA,
    PASSWORD_RESET_SCHEMA,
    SIGNUP_SCHEMA,
    apply_schema,
)
from apps.core.utils import get_user_profile
from apps.core.validators import password_meter_config, password_strength_display

from .models import Profile


def _submitted(form, names):
    """Cleaned values where a field passed, raw POST values where it did not."""
    cleaned = getattr(form, 'cleaned_data', {})
    return {name: cleaned.get(name, form.data.get(name)) for name in names}


class SignupForm(AllAuthSignupForm):
    full_name = forms.CharField(
        max_length=100,
        label=_('Full Name'),
        widget=forms.TextInput(attrs={
            'class': 'form-control',
            'placeholder': _('John Doe'),
            'autocomplete': 'name',
        }),
    )
    terms = forms.BooleanField(
        required=False,
        label=_('I agree to the Terms of Service and Privacy Policy'),
    )

    field_order = ['full_name', 'email', 'password1', 'password2', 'terms']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['email'].widget.attrs.update({
            'class': 'form-control',
            'placeholder': _('you@university.edu'),
        })
        self.fields['password1'].widget.attrs.update({
            'class': 'form-control',
            'placeholder': _('Create a password'),
            'data-strength-meter': 'true',
        })
        self.fields['password2'].widget.attrs.update({
            'class': 'form-control',
            'placeholder': _('Confirm your password'),
        })
        self.fields['password2'].label = _('Confirm Password')

    @property
    def strength_meter_config(self):
        return password_meter_config()

    @property
    def password_strength(self):
        """Meter state for a re-displayed form; None before anything was typed."""
        if not self.is_bound or not self.data.get('password1'):
            return None
        return password_strength_display(self.data['password1'])

    def clean(self):
        data = _submitted(self, ['full_name', 'email', 'password1', 'password2', 'terms'])
        errors = apply_schema(
            self,
            SIGNUP_SCHEMA,
            data={
                'full_name': data['full_name'],
                'email': data['email'],
                'password': data['password1'],
                'confirm_password': data['password2'],
                'terms': data['terms'],
            },
            field_map={'password': 'password1', 'confirm_password': 'password2'},
        )
        cleaned_data = super().clean()

        mismatch = [e.message for e in errors if e.field == 'confirm_password']
        if mismatch:
            # allauth reports its own mismatch message; keep only ours
            self.errors['password2'] = self.error_class(mismatch)
        return cleaned_data

    def save(self, request):
        user = super().save(request)
        profile = get_user_profile(user)
        profile.full_name = self.cleaned_data['full_name'].strip()
        profile.save(update_fields=['full_name', 'updated_at'])
        return user


class LoginForm(AllAuthLoginForm):

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['login'].label = _('Email')
        self.fields['login'].widget.attrs.update({
            'class': 'form-control',
            'placeholder': _('you@university.edu'),
        })
        self.fields['password'].widget.attrs.update({
            'class': 'form-control',
            'placeholder': _('Enter your password'),
        })

    def clean(self):
        data = _submitted(self, ['login', 'password'])
        errors = apply_schema(
            self,
            LOGIN_SCHEMA,
            data={'email': data['login'], 'password': data['password']},
            field_map={'email': 'login'},
        )
        if errors:
            return self.cleaned_data
        return super().clean()


class PasswordResetForm(AllAuthResetPasswordForm):

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['email'].widget.attrs.update({
            'class': 'form-control',
            'placeholder': _('you@university.edu'),
        })

    def clean(self):
        apply_schema(self, PASSWORD_RESET_SCHEMA, data=_submitted(self, ['email']))
        return super().clean()


class ProfileForm(forms.ModelForm):
    """Personal details edited from Settings and the profile page."""

    class Meta:
        model = Profile
        fields = ['full_name', 'student_id', 'phone', 'program', 'major', 'year_of_study']
        widgets = {
            'full_name': forms.TextInput(attrs={'class': 'form-control'}),
            'student_id': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'e.g. S1234567'}),
            'phone': forms.TextInput(attrs={'class': 'form-control', 'placeholder': '+1 555 0100'}),
            'program': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'e.g. BSc'}),
            'major': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'e.g. Computer Science'}),
            'year_of_study': forms.NumberInput(attrs={'class': 'form-control', 'min': 1, 'max': 10}),
        }

    def clean_full_name(self):
        full_name = (self.cleaned_data.get('full_name') or '').strip()
        if len(full_name) < 2:
            raise forms.ValidationError(_('Name must be at least 2 characters'))
        return full_name


class AvatarForm(forms.ModelForm):
    class Meta:
        model = Profile
        fields = ['avatar']
