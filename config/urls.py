from django.urls import path, include
from django.contrib import admin
from django.conf import settings
from django.conf.urls.static import static
from django.views.generic import RedirectView

urlpatterns = [
    path('admin/', admin.site.urls),

    # Authentication
    path('auth/', RedirectView.as_view(pattern_name='account_login', query_string=True), name='auth'),
    path('auth/', include('allauth.urls')),

    # Portal
    path('', include('apps.student_portal.urls')),
    path('', include('apps.users.urls')),
    path('', include('apps.core.urls')),

    # Apps
    path('', include('apps.academics.urls')),
    path('attendance/', include('apps.attendance.urls')),
    path('documents/', include('apps.documents.urls')),
    path('calendar/', include('apps.events.urls')),
    path('analytics/', include('apps.analytics.urls')),

    # API
    path('api/', include('apps.analytics.api_urls')),
]

handler404 = 'apps.core.views.handler404'
handler500 = 'apps.core.views.handler500'

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
