"""
URL configuration for the cdnsite project.

Only the admin is routed here; images are rendered by the host project's own
views through the imagecdn template tags.
"""

from django.contrib import admin
from django.urls import path

admin.site.site_header = 'Image CDN Administration'
admin.site.site_title = 'Image CDN site admin'

urlpatterns = [
    path('admin/', admin.site.urls),
]
