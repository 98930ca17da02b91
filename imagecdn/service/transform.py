"""
Image URL transformation.

Rewrites asset URLs to the configured CDN host, or to pre-converted .webp
files when no CDN is configured.
"""

from imagecdn.service.config import get_config
from imagecdn.service.constants import WEBP_EXTENSION


def transform_image_url(url, config=None):
    """
    Transform an asset URL according to the configuration.

    Args:
        url: Original asset URL
        config: Optional CdnConfig (defaults to the process-wide one)

    Returns:
        str: The delivery URL

    Examples (no CDN host):
        webp=True, ext_replace=False: 'a.jpg' -> 'a.jpg.webp'
        webp=True, ext_replace=True:  'a.jpg' -> 'a.webp'
    """
    if not url:
        return url

    if config is None:
        config = get_config()

    if config.has_cdn:
        return transform_uploads_url_to_cdn(url, config=config)
    if config.webp and not config.ext_replace:
        return url + WEBP_EXTENSION
    if config.webp and config.ext_replace:
        return strip_extension(url) + WEBP_EXTENSION
    return url


def transform_uploads_url_to_cdn(url, config=None):
    """
    Point an upload URL at the CDN host and add the default CDN query.

    'https://site.test/wp-content/uploads/a.jpg' -> 'https://img.cdn.test/a.jpg?auto=format'
    """
    if config is None:
        config = get_config()

    if config.origin_url:
        url = url.replace(config.origin_url, f'https://{config.cdn_host}')

    if config.cdn_query:
        return f'{url}?{config.cdn_query}'
    return url


def strip_extension(url):
    """Remove everything from the last '.' on; URLs without a '.' are kept."""
    dot = url.rfind('.')
    if dot == -1:
        return url
    return url[:dot]
