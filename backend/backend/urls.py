"""
URL configuration for backend project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/6.0/topics/http/urls/
"""
from django.contrib import admin
from django.urls import include, path, re_path

from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from core.views import HealthView

urlpatterns = [
    path('admin/', admin.site.urls),
    re_path(r'^health/?$', HealthView.as_view(), name='health'),

    # ── App routes ───────────────────────────────────────────────────
    path('api/', include('accounts.urls')),
    path('api/', include('cases.urls')),
    path('api/', include('officers.urls')),
    path('api/', include('reports.urls')),
    path('api/', include('incidents.urls')),
    path('api/dashboard/', include('core.urls')),

    # ── Swagger / OpenAPI schema ─────────────────────────────────────
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]

handler404 = 'core.views.route_not_found'
handler500 = 'core.views.server_error'
