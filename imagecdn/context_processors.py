"""Context processors for the imagecdn app."""

from imagecdn.service.config import get_config


def image_cdn_settings(request):
    """Make image CDN settings available to all templates."""
    config = get_config()
    return {
        'image_cdn_host': config.cdn_host,
        'image_cdn_active': config.is_active(request),
    }
