"""
Django settings for a minimal host project running the YouTube media type.

Used by the test suite and for trying the management command locally.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "media-youtube-insecure-dev-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() == "true"

ALLOWED_HOSTS = ["localhost", "127.0.0.1"]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "media_youtube.apps.MediaYoutubeConfig",
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

USE_TZ = True

MEDIA_ROOT = os.environ.get("DJANGO_MEDIA_ROOT", str(BASE_DIR / "media"))
MEDIA_URL = "/media/"
STATIC_URL = "/static/"

# YouTube media type
MEDIA_YOUTUBE_LOCAL_IMAGES = os.environ.get(
    "MEDIA_YOUTUBE_LOCAL_IMAGES", os.path.join(MEDIA_ROOT, "youtube_thumbnails")
)
MEDIA_YOUTUBE_API_KEY = os.environ.get("MEDIA_YOUTUBE_API_KEY", "")
MEDIA_YOUTUBE_HTTP_TIMEOUT = int(os.environ.get("MEDIA_YOUTUBE_HTTP_TIMEOUT", "10"))

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{levelname} {asctime} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "media_youtube": {
            "handlers": ["console"],
            "level": os.environ.get("MEDIA_YOUTUBE_LOG_LEVEL", "INFO"),
        },
        "media_type": {
            "handlers": ["console"],
            "level": os.environ.get("MEDIA_YOUTUBE_LOG_LEVEL", "INFO"),
        },
    },
}
