import logging

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.urls import reverse_lazy
from django.views.generic import CreateView, ListView, TemplateView, UpdateView

from apps.core.mixins import OwnerFormMixin, OwnerQuerysetMixin

from .forms import CourseForm, GradeForm, ScheduleForm
from .models import Course, Grade, Schedule
from .services import (
    CourseFilterService,
    available_semesters,
    grades_by_course,
    schedule_by_day,
)

logger = logging.getLogger(__name__)


class CourseListView(OwnerQuerysetMixin, ListView):
    model = Course
    template_name = 'academics/course_list.html'
    context_object_name = 'courses'

    def get_queryset(self):
        queryset = super().get_queryset()
        return CourseFilterService.filter_courses(
            queryset,
            self.request.GET.get('search'),
            self.request.GET.get('semester'),
        )

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update({
            'search_query': self.request.GET.get('search', ''),
            'selected_semester': self.request.GET.get('semester', 'all'),
            'semesters': available_semesters(self.request.user),
            'total_courses': Course.objects.filter(user=self.request.user).count(),
        })
        return context


class CourseCreateView(OwnerFormMixin, CreateView):
    model = Course
    form_class = CourseForm
    template_name = 'academics/course_form.html'
    success_url = reverse_lazy('courses')
    success_message = 'Course added successfully!'


class CourseUpdateView(OwnerFormMixin, UpdateView):
    model = Course
    form_class = CourseForm
    template_name = 'academics/course_form.html'
    success_url = reverse_lazy('courses')
    success_message = 'Course updated successfully!'


class ScheduleView(LoginRequiredMixin, TemplateView):
    """Weekly class schedule, one block per day."""
    template_name = 'academics/schedule.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        try:
            context['days'] = schedule_by_day(self.request.user)
        except Exception:
            logger.exception(f"Failed to load schedule for {self.request.user.email}")
            messages.error(self.request, 'Failed to load schedule.')
            context['days'] = {}
        return context


class ScheduleCreateView(OwnerFormMixin, CreateView):
    model = Schedule
    form_class = ScheduleForm
    owner_field = 'course__user'
    template_name = 'academics/schedule_form.html'
    success_url = reverse_lazy('schedule')
    success_message = 'Class added to your schedule.'


class GradesView(LoginRequiredMixin, TemplateView):
    template_name = 'academics/grades.html'

    def get_context_data(self, **kwargs):
        from apps.analytics.services import calculate_gpa

        context = super().get_context_data(**kwargs)
        user = self.request.user
        try:
            context['course_groups'] = grades_by_course(user)
            context['gpa'] = calculate_gpa(user)
        except Exception:
            logger.exception(f"Failed to load grades for {user.email}")
            messages.error(self.request, 'Failed to load grades.')
            context['course_groups'] = []
            context['gpa'] = None
        return context


class GradeCreateView(OwnerFormMixin, CreateView):
    model = Grade
    form_class = GradeForm
    template_name = 'academics/grade_form.html'
    success_url = reverse_lazy('grades')
    success_message = 'Grade recorded.'
