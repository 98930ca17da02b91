"""
High-level image operations used by template tags, views and management
commands.

CdnImages composes the service layer with a media registry:
- get_src(): an image URL at a size, CDN query applied
- get_image(): a complete <img> tag with corrected dimensions and srcset

The host renders through these methods directly; nothing is registered
globally.
"""

from imagecdn.registry import ImageSource, get_registry
from imagecdn.service.config import get_config
from imagecdn.service.query import append_query, merge_query, serialize_query
from imagecdn.service.responsive import compute_responsive_attributes
from imagecdn.service.sizes import resolve_size, split_size_query
from imagecdn.service.srcset import format_srcset, rewrite_candidates, transform_candidates
from imagecdn.service.transform import transform_image_url


class CdnImages:
    """
    Image URL and markup builder bound to one configuration and registry.

    Args:
        registry: MediaRegistry (defaults to IMAGECDN_REGISTRY)
        config: CdnConfig (defaults to the process-wide configuration)
        request: Optional request; admin requests bypass rewriting unless
            the configuration allows it
        logger: Optional callable(message) for logging
    """

    def __init__(self, registry=None, config=None, request=None, logger=None):
        self.registry = registry if registry is not None else get_registry()
        self.config = config if config is not None else get_config()
        self.active = self.config.is_active(request)
        self.logger = logger

    def log(self, message):
        if self.logger:
            self.logger(message)

    def transform_url(self, url):
        """Delivery URL for a single image URL."""
        if not self.active:
            return url
        return transform_image_url(url, config=self.config)

    def transform_srcset(self, candidates):
        """Delivery URLs for a list of srcset candidates."""
        if not self.active:
            return list(candidates or [])
        return transform_candidates(candidates, config=self.config)

    def resolve_size(self, spec, mapper=None):
        return resolve_size(spec, mapper=mapper, config=self.config)

    def _uses_query(self, query, embedded_query):
        return self.active and self.config.has_cdn and bool(query or embedded_query)

    def _source(self, asset_id, size_name, icon):
        src = self.registry.get_image_src(asset_id, size_name, icon)
        if not src:
            self.log(f'No image found for {asset_id!r} at size {size_name!r}')
            return None
        return ImageSource(
            url=self.transform_url(src.url),
            width=src.width,
            height=src.height,
            is_cropped=src.is_cropped,
        )

    def get_src(self, asset_id, size='thumbnail', icon=False, query=None):
        """
        Resolve an image URL at a size.

        Args:
            asset_id: Registry id of the image
            size: Size specifier, e.g. 'medium' or 'medium:full?w=300'
            icon: Passed through to the registry
            query: Optional dict of CDN parameters, overriding embedded ones

        Returns:
            ImageSource | None
        """
        if not asset_id:
            return None

        size_name, embedded_query = split_size_query(self.resolve_size(size))
        src = self._source(asset_id, size_name, icon)
        if src is None or not self._uses_query(query, embedded_query):
            return src

        query_string = serialize_query(merge_query(embedded_query, query))
        return ImageSource(
            url=append_query(src.url, query_string),
            width=src.width,
            height=src.height,
            is_cropped=src.is_cropped,
        )

    def get_image(self, asset_id, size='full', icon=False, attrs=None, query=None):
        """
        Render an <img> tag for an image at a size.

        With a CDN host and CDN parameters (explicit or embedded in the size),
        width/height follow the requested h/w and small requests render
        without a srcset. Caller attributes win over defaults, computed
        dimensions win over caller attributes.

        Returns:
            SafeString: The markup, or '' when the image cannot be resolved
        """
        if not asset_id:
            return ''

        size_name, embedded_query = split_size_query(self.resolve_size(size))
        src = self._source(asset_id, size_name, icon)
        if src is None:
            return ''

        default_attrs = {
            'src': src.url,
            'width': src.width,
            'height': src.height,
            'class': f'attachment-{size_name} size-{size_name}',
            'loading': 'lazy',
        }

        if not self._uses_query(query, embedded_query):
            candidates = self.transform_srcset(
                self.registry.get_srcset(asset_id, size_name, src.width, src.height)
            )
            default_attrs.update(self._srcset_attrs(candidates, src.width))
            return self.registry.render_image({**default_attrs, **(attrs or {})})

        params = merge_query(embedded_query, query)
        query_string = serialize_query(params)
        computed = compute_responsive_attributes(src.width, src.height, params)

        if computed.allow_srcset:
            candidates = rewrite_candidates(
                self.transform_srcset(
                    self.registry.get_srcset(asset_id, size_name, src.width, src.height)
                ),
                query_string,
            )
            default_attrs.update(self._srcset_attrs(candidates, computed.width))
        else:
            self.log(f'Skipping srcset for {asset_id!r}: requested size below threshold')

        merged_attrs = {
            **default_attrs,
            **(attrs or {}),
            **computed.as_attrs(),
            'src': append_query(src.url, query_string),
        }
        return self.registry.render_image(merged_attrs)

    def _srcset_attrs(self, candidates, width):
        if not candidates:
            return {}
        return {
            'srcset': format_srcset(candidates),
            'sizes': f'(max-width: {width}px) 100vw, {width}px',
        }
