"""
Configuration adapter for image CDN settings.

Centralizes access to Django settings, ensuring consistent configuration
across template tags, the CLI and application code.

Resolution order (later wins):
1. Built-in defaults
2. Options passed explicitly to init()
3. IMAGECDN_* Django settings that are set (not None)
"""

from dataclasses import dataclass, replace
from typing import Optional

from django.conf import settings

from imagecdn.service.constants import DEFAULT_CDN_QUERY

# Option name -> Django setting name
SETTING_NAMES = {
    'admin': 'IMAGECDN_ADMIN',
    'cdn_host': 'IMAGECDN_HOST',
    'cdn_query': 'IMAGECDN_QUERY',
    'webp': 'IMAGECDN_WEBP',
    'ext_replace': 'IMAGECDN_EXT_REPLACE',
    'origin_url': 'IMAGECDN_ORIGIN_URL',
    'admin_path': 'IMAGECDN_ADMIN_PATH',
}


@dataclass(frozen=True)
class CdnConfig:
    """Resolved image CDN settings. Replaced as a whole, never mutated."""

    admin: bool = False
    cdn_host: Optional[str] = None
    cdn_query: str = DEFAULT_CDN_QUERY
    webp: bool = True
    ext_replace: bool = True
    origin_url: str = ''
    admin_path: str = '/admin/'

    def __post_init__(self):
        # Frozen, so normalize through object.__setattr__
        object.__setattr__(self, 'cdn_host', self.cdn_host or None)
        object.__setattr__(self, 'cdn_query', (self.cdn_query or '').strip())
        object.__setattr__(self, 'origin_url', (self.origin_url or '').rstrip('/'))
        object.__setattr__(self, 'admin', bool(self.admin))
        object.__setattr__(self, 'webp', bool(self.webp))
        object.__setattr__(self, 'ext_replace', bool(self.ext_replace))

    @property
    def has_cdn(self):
        return bool(self.cdn_host)

    def is_admin_path(self, path):
        """Check whether a request path belongs to the admin context."""
        if not path or not self.admin_path:
            return False
        return path.startswith(self.admin_path)

    def is_active(self, request=None):
        """
        Check whether URL rewriting applies for a request.

        Rewriting is disabled for admin pages unless `admin` is enabled.
        Without a request (CLI, background code) rewriting always applies.
        """
        if request is None or self.admin:
            return True
        return not self.is_admin_path(getattr(request, 'path', ''))


_config = None
_init_options = {}


def get_default_origin_url():
    """Default asset origin: MEDIA_URL without its trailing slash."""
    return (getattr(settings, 'MEDIA_URL', '') or '').rstrip('/')


def load_config(**options):
    """
    Build a CdnConfig from defaults, explicit options and Django settings.

    Args:
        **options: Any CdnConfig field name, e.g. cdn_host='img.example.com'

    Returns:
        CdnConfig

    Example:
        >>> load_config(cdn_host='img.example.com').has_cdn
        True
    """
    unknown = set(options) - set(SETTING_NAMES)
    if unknown:
        raise TypeError(f'Unknown image CDN option(s): {", ".join(sorted(unknown))}')

    config = CdnConfig(origin_url=get_default_origin_url())
    config = replace(config, **options)

    from_settings = {}
    for option, setting_name in SETTING_NAMES.items():
        value = getattr(settings, setting_name, None)
        if value is not None:
            from_settings[option] = value

    return replace(config, **from_settings)


def init(**options):
    """
    Initialize the process-wide configuration.

    A new CdnConfig fully replaces the previous one; there is no merging with
    an earlier init() call. The options are kept and applied again when a
    settings change reloads the configuration.
    """
    global _config, _init_options
    config = load_config(**options)
    _init_options = dict(options)
    _config = config
    return config


def get_config():
    """Get the current configuration, loading it from settings on first use."""
    config = _config
    if config is None:
        config = init(**_init_options)
    return config


def reset_config():
    """
    Drop the current configuration so the next get_config() reloads it from
    settings and the options of the last init() call.
    """
    global _config
    _config = None


def get_cdn_host():
    """Get the configured CDN host, or None when no CDN is used"""
    return get_config().cdn_host


def get_default_cdn_query():
    """Get the query string added to every CDN URL"""
    return get_config().cdn_query


def webp_urls_enabled():
    """Whether URLs are rewritten to .webp when no CDN is used"""
    return get_config().webp


def replace_extension_with_webp():
    """Whether .webp replaces the file extension (True) or is appended (False)"""
    return get_config().ext_replace
