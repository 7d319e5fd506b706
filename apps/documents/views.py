import logging
import os

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.db import DatabaseError
from django.http import FileResponse, Http404
from django.shortcuts import get_object_or_404, redirect
from django.urls import reverse_lazy
from django.views import View
from django.views.generic import FormView, ListView

from apps.core.mixins import OwnerQuerysetMixin

from .forms import DocumentUploadForm
from .models import Document
from .services import DocumentSearch, available_categories, delete_document, upload_document

logger = logging.getLogger(__name__)


class DocumentListView(OwnerQuerysetMixin, ListView):
    model = Document
    template_name = 'documents/document_list.html'
    context_object_name = 'documents'

    def get_queryset(self):
        queryset = super().get_queryset().select_related('course')
        self.search = DocumentSearch(self.request.user)
        return self.search.run(
            queryset,
            self.request.GET.get('search', ''),
            self.request.GET.get('category', 'all'),
        )

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update({
            'search_query': self.request.GET.get('search', ''),
            'search_fallback': self.search.used_fallback,
            'selected_category': self.request.GET.get('category', 'all'),
            'categories': available_categories(self.request.user),
            'upload_form': DocumentUploadForm(user=self.request.user),
        })
        return context


class DocumentUploadView(LoginRequiredMixin, FormView):
    form_class = DocumentUploadForm
    template_name = 'documents/document_upload.html'
    success_url = reverse_lazy('documents')

    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        kwargs['user'] = self.request.user
        return kwargs

    def form_valid(self, form):
        data = form.cleaned_data
        try:
            upload_document(
                self.request.user,
                data['file'],
                title=data['title'],
                description=data.get('description', ''),
                category=data.get('category', ''),
                course=data.get('course'),
                tags=data.get('tags', []),
            )
        except (DatabaseError, OSError):
            logger.exception(f"Document upload failed for {self.request.user.email}")
            messages.error(self.request, 'Failed to upload document. Please try again.')
            return self.form_invalid(form)

        messages.success(self.request, 'Document uploaded successfully!')
        return super().form_valid(form)


class DocumentDeleteView(LoginRequiredMixin, View):

    def post(self, request, pk):
        document = get_object_or_404(Document, pk=pk, user=request.user)
        title = document.title
        try:
            delete_document(document)
        except DatabaseError:
            logger.exception(f"Deleting document {pk} failed")
            messages.error(request, 'Failed to delete document')
        else:
            messages.success(request, f'"{title}" deleted.')
        return redirect('documents')


class DocumentDownloadView(LoginRequiredMixin, View):

    def get(self, request, pk):
        document = get_object_or_404(Document, pk=pk, user=request.user)
        try:
            handle = document.file.open('rb')
        except (FileNotFoundError, ValueError):
            raise Http404('File not found')

        ext = os.path.splitext(document.file.name)[1]
        return FileResponse(handle, as_attachment=True, filename=f"{document.title}{ext}")
