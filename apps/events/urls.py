from django.urls import path

from . import views

urlpatterns = [
    path('', views.CalendarView.as_view(), name='calendar'),
    path('add/', views.CalendarEventCreateView.as_view(), name='event_create'),
]
