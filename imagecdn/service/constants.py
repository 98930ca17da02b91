"""
Image CDN constants.

Centralized definitions of defaults, fit modes and thresholds.
"""

# Extension used for statically pre-converted images
WEBP_EXTENSION = '.webp'

# Query string appended to every CDN URL unless configured otherwise
DEFAULT_CDN_QUERY = 'auto=format'

# Size used when a size specifier names nothing
DEFAULT_SIZE = 'full'

# Fit modes that never scale an image beyond its intrinsic size
NO_SCALE_UP_FITS = ['max', 'fillmax', 'min']

# Fit mode that crops instead of preserving aspect ratio
CROP_FIT = 'crop'

# Requested widths/heights below this (compared as strings) disable srcset
SRCSET_MIN_DIMENSION = '400'

# Widest candidate offered in a generated srcset
MAX_SRCSET_WIDTH = 2048
