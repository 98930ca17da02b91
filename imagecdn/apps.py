from django.apps import AppConfig


class ImageCdnConfig(AppConfig):
    name = 'imagecdn'
    verbose_name = 'Image CDN'
    default_auto_field = 'django.db.models.BigAutoField'

    def ready(self):
        """Import signals and load the configuration when the app is ready"""
        import imagecdn.signals  # noqa: F401
        from imagecdn.service.config import init

        init()
