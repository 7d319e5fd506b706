# documents/services.py
import logging
import mimetypes

from django.core.files.storage import default_storage
from django.db import DatabaseError, transaction

from apps.analytics.services import search_documents

from .models import Document, document_upload_path

logger = logging.getLogger(__name__)


def upload_document(user, uploaded_file, title, description='', category='', course=None, tags=None):
    """
    Store ``uploaded_file`` and record it. If the database insert fails the
    stored file is removed again before the error propagates.
    """
    document = Document(
        user=user,
        course=course,
        title=title.strip(),
        description=description or '',
        category=category or '',
        tags=list(tags or []),
        file_size=uploaded_file.size,
        file_type=(getattr(uploaded_file, 'content_type', None)
                   or mimetypes.guess_type(uploaded_file.name)[0] or ''),
    )

    stored_name = default_storage.save(document_upload_path(document, uploaded_file.name), uploaded_file)
    document.file.name = stored_name
    try:
        with transaction.atomic():
            document.save()
    except DatabaseError:
        logger.exception(f"Saving document record failed, removing stored file {stored_name}")
        default_storage.delete(stored_name)
        raise

    logger.info(f"Document uploaded by {user.email}: {stored_name} ({document.file_size} bytes)")
    return document


def delete_document(document):
    """Delete the record, then its stored file."""
    stored_name = document.file.name
    document.delete()
    if stored_name:
        try:
            default_storage.delete(stored_name)
        except OSError:
            logger.exception(f"Could not remove stored file {stored_name}")


def filter_documents_by_text(documents, query):
    """Case-insensitive substring match on title, description or any tag."""
    query = (query or '').strip()
    if not query:
        return documents
    return documents.containing_text(query)


def filter_documents_by_category(documents, category):
    if not category or category == 'all':
        return documents
    return documents.filter(category=category)


def available_categories(user):
    return list(
        Document.objects.filter(user=user)
        .exclude(category='')
        .order_by('category')
        .values_list('category', flat=True)
        .distinct()
    )


class DocumentSearch:
    """
    Search the listed documents, preferring server-side search for queries
    of three or more characters and falling back to substring matching when
    that search fails.
    """

    server_search_min_length = 3

    def __init__(self, user):
        self.user = user
        self.used_fallback = False

    def run(self, documents, query='', category='all'):
        query = (query or '').strip()
        if len(query) >= self.server_search_min_length:
            documents = self._server_search(documents, query)
        elif query:
            documents = filter_documents_by_text(documents, query)
        return filter_documents_by_category(documents, category)

    def _server_search(self, documents, query):
        try:
            ids = list(search_documents(self.user, query).values_list('id', flat=True))
        except DatabaseError:
            logger.exception(f"Document search failed for {self.user.email}, using substring match")
            self.used_fallback = True
            return filter_documents_by_text(documents, query)
        return documents.filter(id__in=ids)
