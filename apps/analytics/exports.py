# analytics/exports.py
"""Download a copy of everything a student has stored, as JSON, CSV or Excel."""
import csv
import json
import logging
from io import BytesIO, StringIO

import xlsxwriter
from django.core.serializers.json import DjangoJSONEncoder
from django.http import HttpResponse
from django.utils import timezone

from apps.academics.models import Course, Grade
from apps.attendance.models import AttendanceRecord
from apps.documents.models import Document
from apps.events.models import CalendarEvent
from apps.users.models import Profile

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("json", "csv", "xlsx")

COURSE_CSV_HEADERS = ["Course Code", "Course Name", "Credits", "Status", "Semester"]

CONTENT_TYPES = {
    "json": "application/json",
    "csv": "text/csv",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}


class ExportFormatError(ValueError):
    """Raised for an export format other than json, csv or xlsx."""

    def __init__(self, export_format):
        self.export_format = export_format
        super().__init__(
            f"Unsupported export format '{export_format}'. Use one of: {', '.join(EXPORT_FORMATS)}."
        )


def _with_course(rows):
    """Move the flattened ``course__*`` keys of a values() row under ``course``."""
    for row in rows:
        code = row.pop("course__course_code", None)
        name = row.pop("course__course_name", None)
        row["course"] = {"course_code": code, "course_name": name} if code is not None else None
    return rows


def collect_user_data(user):
    """Every record the user owns, ready for JSON encoding. Document files are not included."""
    profile = (
        Profile.objects.filter(user=user)
        .values("id", "full_name", "student_id", "phone", "program", "major",
                "year_of_study", "created_at", "updated_at")
        .first()
    )
    if profile is not None:
        profile["email"] = user.email

    grade_fields = [f.attname for f in Grade._meta.concrete_fields]
    attendance_fields = [f.attname for f in AttendanceRecord._meta.concrete_fields]

    return {
        "profile": profile,
        "courses": list(Course.objects.filter(user=user).values()),
        "grades": _with_course(list(
            Grade.objects.filter(user=user)
            .values(*grade_fields, "course__course_code", "course__course_name")
        )),
        "attendance": _with_course(list(
            AttendanceRecord.objects.filter(user=user)
            .values(*attendance_fields, "course__course_code", "course__course_name")
        )),
        "documents": list(
            Document.objects.filter(user=user)
            .values("id", "title", "description", "category", "tags", "created_at", "course_id")
        ),
        "calendar_events": list(CalendarEvent.objects.filter(user=user).values()),
        "exported_at": timezone.now().isoformat(),
    }


def export_json(data):
    return json.dumps(data, cls=DjangoJSONEncoder, indent=2)


def export_courses_csv(courses):
    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(COURSE_CSV_HEADERS)
    for course in courses:
        writer.writerow([
            course["course_code"],
            course["course_name"],
            course["credits"],
            course["status"],
            course["semester"],
        ])
    return buffer.getvalue()


def _cell(value):
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value, cls=DjangoJSONEncoder)
    if isinstance(value, (int, float, str, bool)):
        return value
    return str(value)


def export_xlsx(data):
    """One worksheet per entity; the profile sheet is a two-column key/value list."""
    buffer = BytesIO()
    with xlsxwriter.Workbook(buffer, {"in_memory": True}) as workbook:
        header_format = workbook.add_format({"bold": True, "bg_color": "#1E40AF", "font_color": "white"})

        ws = workbook.add_worksheet("Profile")
        for row_idx, (key, value) in enumerate((data.get("profile") or {}).items()):
            ws.write(row_idx, 0, key, header_format)
            ws.write(row_idx, 1, _cell(value))

        for sheet, key in (
            ("Courses", "courses"),
            ("Grades", "grades"),
            ("Attendance", "attendance"),
            ("Documents", "documents"),
            ("Calendar", "calendar_events"),
        ):
            rows = data.get(key) or []
            ws = workbook.add_worksheet(sheet)
            if not rows:
                ws.write(0, 0, "No records")
                continue
            headers = list(rows[0].keys())
            for col, header in enumerate(headers):
                ws.write(0, col, header, header_format)
            for row_idx, row in enumerate(rows, start=1):
                for col, header in enumerate(headers):
                    ws.write(row_idx, col, _cell(row.get(header)))
    buffer.seek(0)
    return buffer.getvalue()


def export_filename(export_format):
    return f"academic-data-{timezone.localdate().isoformat()}.{export_format}"


def build_export_response(user, export_format="json"):
    """HttpResponse carrying the user's data as an attachment."""
    export_format = (export_format or "json").lower()
    if export_format not in EXPORT_FORMATS:
        raise ExportFormatError(export_format)

    data = collect_user_data(user)
    if export_format == "csv":
        content = export_courses_csv(data["courses"])
    elif export_format == "xlsx":
        content = export_xlsx(data)
    else:
        content = export_json(data)

    response = HttpResponse(content, content_type=CONTENT_TYPES[export_format])
    response["Content-Disposition"] = f'attachment; filename="{export_filename(export_format)}"'
    logger.info(f"Exported {export_format} data for {user.email}")
    return response
