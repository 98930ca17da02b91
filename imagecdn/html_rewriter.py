"""
HTML content rewriting.

Rewrites <img src>, <img srcset> and <source srcset> inside rendered content
(e.g. a rich-text body) so embedded uploads are delivered like images rendered
through CdnImages. Only URLs under the asset origin are touched.
"""

from dataclasses import replace

from bs4 import BeautifulSoup

from imagecdn.service.config import get_config
from imagecdn.service.srcset import format_srcset, parse_srcset
from imagecdn.service.transform import transform_image_url


def is_origin_url(url, config):
    """Check whether a URL points at the asset origin."""
    if not url or url.startswith('data:'):
        return False
    if not config.origin_url:
        return False
    return url.startswith(config.origin_url + '/')


def rewrite_content_images(html, config=None, request=None):
    """
    Rewrite origin image URLs in an HTML fragment.

    Args:
        html: HTML fragment
        config: Optional CdnConfig
        request: Optional request, used for the admin-context check

    Returns:
        str: The rewritten HTML (unchanged input when nothing applies)
    """
    if not html:
        return html

    if config is None:
        config = get_config()
    if not config.is_active(request):
        return html

    soup = BeautifulSoup(html, 'html.parser')
    changed = False

    for img in soup.find_all('img'):
        src = img.get('src')
        if is_origin_url(src, config):
            img['src'] = transform_image_url(src, config=config)
            changed = True

    for tag in soup.find_all(['img', 'source']):
        srcset = tag.get('srcset')
        if not srcset:
            continue
        candidates = parse_srcset(srcset)
        rewritten = [
            replace(c, url=transform_image_url(c.url, config=config))
            if is_origin_url(c.url, config)
            else c
            for c in candidates
        ]
        if rewritten != candidates:
            tag['srcset'] = format_srcset(rewritten)
            changed = True

    if not changed:
        return html
    return str(soup)
