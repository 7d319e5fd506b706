from django.urls import path

from . import views

urlpatterns = [
    path('', views.DocumentListView.as_view(), name='documents'),
    path('upload/', views.DocumentUploadView.as_view(), name='document_upload'),
    path('<uuid:pk>/delete/', views.DocumentDeleteView.as_view(), name='document_delete'),
    path('<uuid:pk>/download/', views.DocumentDownloadView.as_view(), name='document_download'),
]
