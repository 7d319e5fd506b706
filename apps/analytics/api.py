# analytics/api.py
"""
Token-authenticated JSON API.

``/api/functions/`` mirrors the two callable functions of the analytics page
(data export and study insights); ``/api/rpc/<name>/`` exposes the
aggregation functions for the calling user.
"""
import logging

from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.exceptions import APIException, NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView, exception_handler

from apps.academics.models import Course

from . import services
from .exports import ExportFormatError, build_export_response
from .insights import InsightsError, generate_study_insights
from .serializers import DocumentSearchResultSerializer, ExportParamsSerializer, RpcParamsSerializer

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    """Every API error is rendered as ``{"error": message}``."""
    if isinstance(exc, InsightsError):
        return Response({"error": exc.message}, status=exc.status_code)
    if isinstance(exc, ExportFormatError):
        return Response({"error": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

    response = exception_handler(exc, context)
    if response is None:
        logger.exception(f"Unhandled API error in {context['view'].__class__.__name__}", exc_info=exc)
        return Response({"error": "Internal server error"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, APIException):
        detail = exc.detail
        if isinstance(detail, (list, dict)):
            response.data = {"error": "Invalid request", "details": response.data}
        else:
            response.data = {"error": str(detail)}
    return response


class ExportDataAPIView(APIView):
    permission_classes = (IsAuthenticated,)

    def post(self, request):
        params = ExportParamsSerializer(data=request.data)
        params.is_valid(raise_exception=True)
        return build_export_response(request.user, params.validated_data["format"])


class StudyInsightsAPIView(APIView):
    permission_classes = (IsAuthenticated,)

    def post(self, request):
        return Response(generate_study_insights(request.user))


class RpcAPIView(APIView):
    """Call one of the aggregation functions by name."""
    permission_classes = (IsAuthenticated,)

    functions = (
        "calculate_gpa",
        "calculate_attendance_percentage",
        "get_grade_trends",
        "get_attendance_patterns",
        "get_academic_standing",
        "search_documents",
    )

    def post(self, request, name):
        if name not in self.functions:
            raise NotFound(f"Unknown function: {name}")

        params = RpcParamsSerializer(data=request.data)
        params.is_valid(raise_exception=True)
        handler = getattr(self, f"call_{name}")
        return Response(handler(request.user, params.validated_data))

    def call_calculate_gpa(self, user, params):
        return services.calculate_gpa(user)

    def call_calculate_attendance_percentage(self, user, params):
        course = None
        if params.get("course_id"):
            course = get_object_or_404(Course, pk=params["course_id"], user=user)
        return services.calculate_attendance_percentage(user, course)

    def call_get_grade_trends(self, user, params):
        return services.get_grade_trends(user, params.get("months", 6))

    def call_get_attendance_patterns(self, user, params):
        return services.get_attendance_patterns(user, params.get("months", 3))

    def call_get_academic_standing(self, user, params):
        return services.get_academic_standing(user)

    def call_search_documents(self, user, params):
        documents = services.search_documents(user, params.get("query", ""))
        return DocumentSearchResultSerializer(documents, many=True).data
