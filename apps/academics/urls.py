from django.urls import path

from . import views

urlpatterns = [
    path('courses/', views.CourseListView.as_view(), name='courses'),
    path('academics/', views.CourseListView.as_view(), name='academics'),
    path('courses/add/', views.CourseCreateView.as_view(), name='course_create'),
    path('courses/<uuid:pk>/edit/', views.CourseUpdateView.as_view(), name='course_update'),

    path('schedule/', views.ScheduleView.as_view(), name='schedule'),
    path('schedule/add/', views.ScheduleCreateView.as_view(), name='schedule_create'),

    path('grades/', views.GradesView.as_view(), name='grades'),
    path('grades/add/', views.GradeCreateView.as_view(), name='grade_create'),
]
