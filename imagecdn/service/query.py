"""
Query string merging and serialization for CDN URLs.
"""

from urllib.parse import parse_qsl, quote

# Left unescaped so values like 'faces,center' or '16:9' read as written
QUERY_SAFE_CHARS = ',:/'


def parse_query(query_string):
    """
    Parse 'key=value&key=value' into an ordered dict.

    Blank values are kept and a repeated key keeps its last value. Keys and
    values are percent-decoded.
    """
    if not query_string:
        return {}
    return dict(parse_qsl(query_string, keep_blank_values=True))


def merge_query(embedded_query, explicit_params=None):
    """
    Merge an embedded query string with explicit parameters.

    Explicit values win. Keys from the embedded query keep their position;
    explicit-only keys follow in their own order.

    Example:
        >>> merge_query('a=1&b=2', {'b': '9', 'c': '3'})
        {'a': '1', 'b': '9', 'c': '3'}
    """
    merged = parse_query(embedded_query)
    merged.update(explicit_params or {})
    return merged


def serialize_query(params):
    """
    Join parameters as key=value pairs with '&'.

    Keys and values are percent-encoded again, so a decoded '&' or space
    cannot split a parameter or leak into the URL.

    Example:
        >>> serialize_query({'txt': 'a&b', 'crop': 'faces,center'})
        'txt=a%26b&crop=faces,center'
    """
    return '&'.join(
        f'{quote(str(key), safe=QUERY_SAFE_CHARS)}={quote(str(value), safe=QUERY_SAFE_CHARS)}'
        for key, value in (params or {}).items()
    )


def append_query(url, query_string):
    """Append a serialized query, using '&' when the URL already has a '?'."""
    if not query_string:
        return url
    separator = '&' if '?' in url else '?'
    return f'{url}{separator}{query_string}'
