from django.urls import path

from . import views

urlpatterns = [
    path('changes/<slug:table>/', views.ChangesView.as_view(), name='changes'),
    path('healthz/', views.healthz, name='healthz'),
]
