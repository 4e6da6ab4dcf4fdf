import logging

from django.apps import AppConfig
from django.core import checks

logger = logging.getLogger(__name__)


def check_youtube_settings(app_configs, **kwargs):
    """
    System check for the MEDIA_YOUTUBE_* settings.

    Reports settings that would make every resolver construction fail.
    """
    from django.conf import settings
    from django.core.exceptions import ImproperlyConfigured

    from .config import ResolverConfig

    errors = []
    if hasattr(settings, "MEDIA_YOUTUBE_LOCAL_IMAGES") and not settings.MEDIA_YOUTUBE_LOCAL_IMAGES:
        errors.append(
            checks.Warning(
                "MEDIA_YOUTUBE_LOCAL_IMAGES is empty; thumbnails will fall back to MEDIA_ROOT.",
                hint="Set it to the directory where YouTube thumbnails should be cached.",
                id="media_youtube.W001",
            )
        )

    try:
        ResolverConfig.from_settings()
    except ImproperlyConfigured as e:
        errors.append(checks.Error(str(e), id="media_youtube.E001"))

    return errors


class MediaYoutubeConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "media_youtube"
    verbose_name = "YouTube media"

    def ready(self):
        """
        Initialize application when Django starts.

        Registers the settings system check.
        """
        checks.register(check_youtube_settings)
