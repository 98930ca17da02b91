"""
Media registry: resolves an image id and size to a URL and dimensions.

The registry is the host side of the pipeline. CdnImages asks it for the
source image at a size, for the srcset candidates of that size, and to turn
the final attribute set into markup. Projects with their own media storage
point IMAGECDN_REGISTRY at a MediaRegistry subclass.
"""

from dataclasses import dataclass

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.forms.utils import flatatt
from django.utils.html import format_html
from django.utils.module_loading import import_string

from imagecdn.service.constants import DEFAULT_SIZE, MAX_SRCSET_WIDTH
from imagecdn.service.srcset import SrcsetCandidate

DEFAULT_REGISTRY = 'imagecdn.registry.ModelRegistry'


@dataclass(frozen=True)
class ImageSource:
    """An image resolved at a given size"""

    url: str
    width: int
    height: int
    is_cropped: bool = False


class MediaRegistry:
    """Interface between CdnImages and the project's media storage."""

    def get_image_src(self, asset_id, size=DEFAULT_SIZE, icon=False):
        """
        Resolve an image at a size.

        Returns:
            ImageSource | None: None when the asset is unknown
        """
        raise NotImplementedError

    def get_srcset(self, asset_id, size, width, height):
        """Return the multi-resolution candidates for an image at a size."""
        return []

    def render_image(self, attrs):
        """Serialize an attribute dict into an <img> tag."""
        attrs = {key: value for key, value in attrs.items() if value is not None}
        return format_html('<img{}>', flatatt(attrs))


def matches_ratio(width, height, other_width, other_height):
    """Check two sizes share an aspect ratio, allowing one pixel of rounding."""
    if not width or not height or not other_width or not other_height:
        return False
    if width < other_width:
        width, height, other_width, other_height = other_width, other_height, width, height
    constrained_height = round(height * other_width / width)
    return abs(constrained_height - other_height) <= 1


class ModelRegistry(MediaRegistry):
    """Registry backed by the ImageAsset / ImageRendition models."""

    max_srcset_width = MAX_SRCSET_WIDTH

    def _get_asset(self, asset_id):
        from imagecdn.models import ImageAsset

        try:
            return ImageAsset.objects.filter(pk=asset_id).prefetch_related('renditions').first()
        except (TypeError, ValueError):
            # Not a valid primary key, e.g. a slug passed from a template
            return None

    def get_image_src(self, asset_id, size=DEFAULT_SIZE, icon=False):
        asset = self._get_asset(asset_id)
        if asset is None:
            return None

        if size and size != DEFAULT_SIZE:
            for rendition in asset.renditions.all():
                if rendition.name == size:
                    return ImageSource(
                        url=rendition.url,
                        width=rendition.width,
                        height=rendition.height,
                        is_cropped=rendition.cropped,
                    )

        # Unknown sizes fall back to the original upload
        return ImageSource(url=asset.url, width=asset.width, height=asset.height)

    def get_srcset(self, asset_id, size, width, height):
        asset = self._get_asset(asset_id)
        if asset is None:
            return []

        sources = [(asset.url, asset.width, asset.height)]
        sources += [(r.url, r.width, r.height) for r in asset.renditions.all()]

        by_width = {}
        for url, w, h in sources:
            if w > self.max_srcset_width or w in by_width:
                continue
            if matches_ratio(width, height, w, h):
                by_width[w] = SrcsetCandidate(url=url, descriptor=f'{w}w')

        if len(by_width) < 2:
            return []
        return [by_width[w] for w in sorted(by_width)]


def get_registry():
    """
    Instantiate the registry named by IMAGECDN_REGISTRY.

    Raises:
        ImproperlyConfigured: If the path cannot be imported or does not name
        a MediaRegistry subclass
    """
    path = getattr(settings, 'IMAGECDN_REGISTRY', None) or DEFAULT_REGISTRY
    try:
        registry_class = import_string(path)
    except ImportError as e:
        raise ImproperlyConfigured(f'IMAGECDN_REGISTRY {path!r} could not be imported: {e}')

    if not (isinstance(registry_class, type) and issubclass(registry_class, MediaRegistry)):
        raise ImproperlyConfigured(f'IMAGECDN_REGISTRY {path!r} is not a MediaRegistry')
    return registry_class()
