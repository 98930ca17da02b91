"""
Size specifier resolution.

A size specifier names a registry size and, optionally, a CDN-specific
alternate: 'large:full' resolves to 'large' locally and 'full' when a CDN host
is configured. The alternate may carry a query string ('large:full?w=300').
"""

from imagecdn.service.config import get_config
from imagecdn.service.constants import DEFAULT_SIZE


def resolve_size(spec=DEFAULT_SIZE, mapper=None, config=None):
    """
    Choose the effective size token for a size specifier.

    Args:
        spec: 'primary' or 'primary:alternate'
        mapper: Optional callable(chosen, alternate) whose return value
            replaces the chosen token (e.g. to look up a named preset)
        config: Optional CdnConfig

    Returns:
        str | None: The chosen token, the mapper's result, or None when no
        token can be determined
    """
    if config is None:
        config = get_config()

    primary, _, alternate = (spec or '').partition(':')
    primary = primary or None
    # An empty alternate ('thumbnail:') counts as absent
    alternate = alternate or None

    if config.has_cdn:
        chosen = alternate if alternate is not None else primary
    else:
        chosen = primary

    if mapper is not None:
        return mapper(chosen, alternate)

    return chosen or None


def split_size_query(token):
    """
    Split a size token into the registry size name and its embedded query.

    Examples:
        'full?w=300&fit=crop' -> ('full', 'w=300&fit=crop')
        'thumbnail'           -> ('thumbnail', None)
        '?w=300'              -> ('full', 'w=300')
    """
    if not token:
        return DEFAULT_SIZE, None

    name, sep, query = token.partition('?')
    return name or DEFAULT_SIZE, (query if sep else None)
