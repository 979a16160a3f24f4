"""Development settings for the company intranet project.

This module extends the base settings with development specific
configuration, such as enabling debug, allowing all hosts, plain static
file storage and human readable console logs. Do not use these settings
in production!
"""

import structlog

from .base import *  # noqa: F401,F403

# Enable debug mode for development
DEBUG = True

# Allow all hosts in development
ALLOWED_HOSTS = ['*']

STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}

# Human readable log lines instead of JSON
LOGGING["formatters"]["json"]["processor"] = structlog.dev.ConsoleRenderer()  # noqa: F405
