"""Development settings for DeskMate.

Extends the base settings with debug enabled, all hosts allowed and the
console email backend, so confirmation emails are printed instead of sent.
Do not use these settings in production!
"""

from .base import *  # noqa: F401,F403

DEBUG = True

ALLOWED_HOSTS = ['*']

CORS_ALLOW_ALL_ORIGINS = True

EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'
