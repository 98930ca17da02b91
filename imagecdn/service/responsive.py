"""
Responsive image attributes for CDN-resized images.

Given the intrinsic size of an image and the CDN query parameters that resize
it (h, w, fit), work out the width/height attributes the rendered <img> should
carry and whether a srcset should be generated at all.
"""

import re
from dataclasses import dataclass

from imagecdn.service.constants import CROP_FIT, NO_SCALE_UP_FITS, SRCSET_MIN_DIMENSION

LEADING_INT_RE = re.compile(r'^\s*([+-]?\d+)')


@dataclass(frozen=True)
class ResponsiveAttributes:
    """Computed <img> dimensions and srcset decision"""

    width: int
    height: int
    allow_srcset: bool = True
    is_crop: bool = False

    def as_attrs(self):
        return {'width': self.width, 'height': self.height}


def parse_dimension(value):
    """
    Read a query value as an integer, the way a lenient form parser would.

    Examples:
        '300' -> 300, '300px' -> 300, 'auto' -> 0, None -> 0
    """
    if value is None:
        return 0
    if isinstance(value, int):
        return value
    match = LEADING_INT_RE.match(str(value))
    return int(match.group(1)) if match else 0


def scale(value, source, target):
    """floor(value / source * target), with a zero source giving 0."""
    if not source:
        return 0
    return (value * target) // source


def compute_responsive_attributes(intrinsic_width, intrinsic_height, params):
    """
    Compute display dimensions for an image resized by CDN query parameters.

    Only three orientations are handled: portrait images follow the requested
    height, landscape images the requested width, and square images take both
    as given. Cropping disables the orientation rules.

    Args:
        intrinsic_width: Width of the source image
        intrinsic_height: Height of the source image
        params: dict of CDN query parameters

    Returns:
        ResponsiveAttributes
    """
    width = parse_dimension(intrinsic_width)
    height = parse_dimension(intrinsic_height)
    params = params or {}

    allow_srcset = True
    scale_up = True
    is_crop = False

    for key, value in params.items():
        # Compared as strings, so '1000' < '400' holds as well
        if key in ('h', 'w') and str(value) < SRCSET_MIN_DIMENSION:
            allow_srcset = False

        if key == 'fit' and value in NO_SCALE_UP_FITS:
            scale_up = False
        elif key == 'fit' and value == CROP_FIT:
            is_crop = True

    h = parse_dimension(params.get('h'))
    w = parse_dimension(params.get('w'))

    if not scale_up:
        if h and h > height:
            h = height
        if w and w > width:
            w = width

    if h and not w:
        w = scale(h, height, width)
    if w and not h:
        h = scale(w, width, height)

    out_width = w or width
    out_height = h or height

    if h and height > width and not is_crop:
        out_height = h
        out_width = scale(h, height, width)

    if w and width > height and not is_crop:
        out_width = w
        out_height = scale(w, width, height)

    if w and h and width == height:
        out_width = w
        out_height = h

    return ResponsiveAttributes(
        width=out_width,
        height=out_height,
        allow_srcset=allow_srcset,
        is_crop=is_crop,
    )
