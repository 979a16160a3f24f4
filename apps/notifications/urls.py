"""URL routing for notifications."""

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import CriticalAlertView, NotificationViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r'notifications', NotificationViewSet, basename='notification')

urlpatterns = [
    path('admin/alerts/critical', CriticalAlertView.as_view(), name='critical-alert'),
    path('', include(router.urls)),
]
