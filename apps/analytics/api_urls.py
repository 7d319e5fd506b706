from django.urls import path
from rest_framework.authtoken.views import obtain_auth_token

from . import api

urlpatterns = [
    path('auth/token/', obtain_auth_token, name='api_token'),
    path('functions/export-data/', api.ExportDataAPIView.as_view(), name='api_export_data'),
    path('functions/study-insights/', api.StudyInsightsAPIView.as_view(), name='api_study_insights'),
    path('rpc/<slug:name>/', api.RpcAPIView.as_view(), name='api_rpc'),
]
