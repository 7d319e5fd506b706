from django.urls import path

from . import views

urlpatterns = [
    path('', views.AttendanceOverviewView.as_view(), name='attendance'),
    path('mark/', views.MarkAttendanceView.as_view(), name='attendance_mark'),
]
