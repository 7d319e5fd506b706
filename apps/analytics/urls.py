from django.urls import path

from . import views

urlpatterns = [
    path('', views.AnalyticsView.as_view(), name='analytics'),
    path('export/', views.ExportDataView.as_view(), name='export_data'),
    path('insights/', views.StudyInsightsView.as_view(), name='study_insights'),
]
