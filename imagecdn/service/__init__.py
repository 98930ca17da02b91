"""
Service layer for image URL rewriting.

Pure functions over strings and integers, independent of the database and
templates. These functions are used by:
- The CdnImages composition layer (imagecdn/images.py)
- Template tags (imagecdn/templatetags/image_cdn.py)
- The cdn_preview management command
"""
