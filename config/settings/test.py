"""Test settings.

In-memory SQLite, a fast password hasher and quiet logging so the test
suite runs without external services.
"""

from .base import *  # noqa: F401,F403

DEBUG = False

ALLOWED_HOSTS = ['*']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}

CRITICAL_ALERT_ATOMIC = True
EVENT_RSVP_POLICY = 'history'

LOGGING["handlers"]["console"]["level"] = "CRITICAL"  # noqa: F405
