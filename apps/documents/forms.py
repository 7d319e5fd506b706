from django import forms
from django.utils.translation import gettext_lazy as _

from apps.core.mixins import UserCoursesFormMixin
from apps.core.schemas import DOCUMENT_SCHEMA, apply_schema
from apps.core.validators import (
    ALLOWED_UPLOAD_EXTENSIONS,
    MAX_TAGS_LENGTH,
    is_valid_tags,
    parse_tags,
    tag_errors,
    validate_upload_size,
    validate_upload_type,
)

from .models import Document


class DocumentUploadForm(UserCoursesFormMixin, forms.ModelForm):
    tags = forms.CharField(
        required=False,
        max_length=MAX_TAGS_LENGTH,
        label=_('Tags'),
        help_text=_('Comma separated, e.g. notes, midterm, week-3'),
        widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'notes, midterm'}),
    )

    class Meta:
        model = Document
        fields = ['title', 'description', 'category', 'course', 'file']
        widgets = {
            'title': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'e.g., Transcript Fall 2024'}),
            'description': forms.Textarea(attrs={'class': 'form-control', 'rows': 2}),
            'category': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'e.g., Transcripts'}),
            'course': forms.Select(attrs={'class': 'form-select'}),
            'file': forms.ClearableFileInput(attrs={
                'class': 'form-control',
                'accept': ','.join(f'.{ext}' for ext in ALLOWED_UPLOAD_EXTENSIONS),
            }),
        }

    def __init__(self, *args, **kwargs):
        self.user = kwargs.pop('user', None)
        super().__init__(*args, **kwargs)
        if self.user is not None:
            self.instance.user = self.user
        self.limit_courses(self.user)
        self.fields['course'].empty_label = _('None')
        self.fields['course'].required = False

    def clean_file(self):
        uploaded = self.cleaned_data.get('file')
        if uploaded is not None:
            validate_upload_size(uploaded.size)
            validate_upload_type(uploaded.name)
        return uploaded

    def clean_tags(self):
        raw = self.cleaned_data.get('tags') or ''
        if not is_valid_tags(raw):
            raise forms.ValidationError(tag_errors(raw))
        return parse_tags(raw)

    def clean(self):
        cleaned_data = super().clean()
        apply_schema(self, DOCUMENT_SCHEMA, data={'title': cleaned_data.get('title', self.data.get('title'))})
        return cleaned_data
