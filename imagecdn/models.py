from django.db import models


class ImageAsset(models.Model):
    """An uploaded image as stored on the asset origin"""

    url = models.CharField(max_length=2048)
    width = models.PositiveIntegerField(default=0)
    height = models.PositiveIntegerField(default=0)
    title = models.CharField(max_length=500, blank=True)
    alt_text = models.CharField(max_length=500, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return self.title or self.url


class ImageRendition(models.Model):
    """A resized copy of an ImageAsset stored under a named size"""

    asset = models.ForeignKey(ImageAsset, on_delete=models.CASCADE, related_name='renditions')
    name = models.CharField(max_length=100)
    url = models.CharField(max_length=2048)
    width = models.PositiveIntegerField(default=0)
    height = models.PositiveIntegerField(default=0)
    cropped = models.BooleanField(default=False)

    class Meta:
        ordering = ['width']
        constraints = [
            models.UniqueConstraint(fields=['asset', 'name'], name='unique_rendition_name'),
        ]

    def __str__(self):
        return f'{self.asset_id}:{self.name} ({self.width}x{self.height})'
