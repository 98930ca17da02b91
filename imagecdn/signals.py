from django.core.signals import setting_changed
from django.dispatch import receiver

from imagecdn.service.config import SETTING_NAMES, reset_config

WATCHED_SETTINGS = set(SETTING_NAMES.values()) | {'MEDIA_URL'}


@receiver(setting_changed)
def reload_cdn_config(sender, setting, **kwargs):
    """
    Drop the cached configuration when an image CDN setting changes.
    This keeps override_settings() in tests and runtime settings changes in sync;
    options given to init() are applied again on reload.
    """
    if setting in WATCHED_SETTINGS:
        reset_config()
