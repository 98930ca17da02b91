from django.contrib import admin
from django.utils.html import format_html

from imagecdn.models import ImageAsset, ImageRendition
from imagecdn.service.transform import transform_image_url


class ImageRenditionInline(admin.TabularInline):
    model = ImageRendition
    extra = 0
    fields = ['name', 'url', 'width', 'height', 'cropped']


@admin.register(ImageAsset)
class ImageAssetAdmin(admin.ModelAdmin):
    list_display = ['__str__', 'width', 'height', 'rendition_count', 'delivery_url', 'created_at']
    search_fields = ['title', 'url', 'alt_text']
    readonly_fields = ['created_at', 'delivery_url']
    inlines = [ImageRenditionInline]

    def get_queryset(self, request):
        return super().get_queryset(request).prefetch_related('renditions')

    @admin.display(description='Renditions')
    def rendition_count(self, obj):
        return len(obj.renditions.all())

    @admin.display(description='Delivery URL')
    def delivery_url(self, obj):
        """Where the original upload is served from outside the admin"""
        if not obj.url:
            return '-'
        url = transform_image_url(obj.url)
        return format_html('<a href="{}" target="_blank">{}</a>', url, url)
