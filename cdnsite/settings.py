"""
Django settings for the cdnsite project.

Image CDN options come from the environment so the same build can run with
or without a CDN:
    IMAGECDN_HOST=img.example.com IMAGECDN_QUERY='auto=format,compress'
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def env_bool(name, default=None):
    """Read a boolean environment variable; unset returns the default."""
    value = os.environ.get(name)
    if value is None or value == '':
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'insecure-dev-key-change-me')
DEBUG = env_bool('DJANGO_DEBUG', True)
ALLOWED_HOSTS = os.environ.get('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',')

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'imagecdn',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
]

ROOT_URLCONF = 'cdnsite.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
                'imagecdn.context_processors.image_cdn_settings',
            ],
        },
    },
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.environ.get('DJANGO_DB_PATH', BASE_DIR / 'db.sqlite3'),
    }
}

USE_TZ = True
TIME_ZONE = 'UTC'
STATIC_URL = '/static/'
MEDIA_URL = os.environ.get('DJANGO_MEDIA_URL', '/media/')
MEDIA_ROOT = BASE_DIR / 'media_files'
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Image CDN (None means "use the built-in default")
IMAGECDN_ADMIN = env_bool('IMAGECDN_ADMIN')
IMAGECDN_HOST = os.environ.get('IMAGECDN_HOST') or None
IMAGECDN_QUERY = os.environ.get('IMAGECDN_QUERY')
IMAGECDN_WEBP = env_bool('IMAGECDN_WEBP')
IMAGECDN_EXT_REPLACE = env_bool('IMAGECDN_EXT_REPLACE')
IMAGECDN_ORIGIN_URL = os.environ.get('IMAGECDN_ORIGIN_URL')
IMAGECDN_ADMIN_PATH = os.environ.get('IMAGECDN_ADMIN_PATH')
IMAGECDN_REGISTRY = os.environ.get('IMAGECDN_REGISTRY', 'imagecdn.registry.ModelRegistry')
