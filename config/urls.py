"""URL configuration for the intranet project.

The `urlpatterns` list routes URLs to views. It includes the Django admin,
the OpenAPI schema and the application routers, all mounted under `/api/`
without trailing slashes.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView  # type: ignore

urlpatterns = [
    path('admin/', admin.site.urls),
    # API schema and interactive docs
    path('api/schema', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    # Application URLs
    path('api/', include('apps.users.urls')),
    path('api/', include('apps.notifications.urls')),
    path('api/', include('apps.news.urls')),
    path('api/', include('apps.events.urls')),
    path('api/', include('apps.departments.urls')),
    path('api/', include('apps.chat.urls')),
]
