from django import template
from django.utils.safestring import mark_safe

from imagecdn.html_rewriter import rewrite_content_images
from imagecdn.images import CdnImages
from imagecdn.service.sizes import resolve_size

register = template.Library()


def _images(context):
    return CdnImages(request=context.get('request'))


@register.simple_tag(takes_context=True)
def cdn_url(context, url):
    """
    Delivery URL for an image URL. Admin requests get the URL unchanged
    unless IMAGECDN_ADMIN is on.

    Examples:
        <img src="{% cdn_url photo_url %}">
        {% cdn_url photo_url as src %}
    """
    return _images(context).transform_url(url) if url else ''


@register.filter
def cdn_size(spec):
    """
    Effective size token for a size specifier.

    Examples:
        {{ 'large:full'|cdn_size }} -> "full" with a CDN host, "large" without
    """
    return resolve_size(spec) or ''


@register.simple_tag(takes_context=True)
def cdn_content(context, html):
    """
    Rewrite origin image URLs inside an HTML fragment.

    Examples:
        {% cdn_content post.body %}
    """
    if not html:
        return ''
    return mark_safe(rewrite_content_images(html, request=context.get('request')))


@register.simple_tag(takes_context=True)
def cdn_image_src(context, asset_id, size='thumbnail', **query):
    """
    URL of an image at a size, with CDN parameters.

    Examples:
        {% cdn_image_src photo.pk 'medium:full' w=300 fit='crop' %}
    """
    src = _images(context).get_src(asset_id, size, query=query or None)
    return src.url if src else ''


@register.simple_tag(takes_context=True)
def cdn_image(context, asset_id, size='full', query=None, **attrs):
    """
    <img> tag for an image at a size.

    Keyword arguments become attributes; CDN parameters go in the size
    specifier or in a `query` dict.

    Examples:
        {% cdn_image photo.pk 'large:full?w=800&fit=max' class='hero' alt=photo.alt_text %}
    """
    return _images(context).get_image(asset_id, size, attrs=attrs, query=query)

