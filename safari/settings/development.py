"""
Development specific settings for the Safari Tours backend
"""

from decouple import config

from .base import *

# Debug mode
DEBUG = config("DJANGO_DEBUG", default=True, cast=bool)

# Allowed hosts
ALLOWED_HOSTS = ['localhost', '127.0.0.1', 'testserver']

# Local console login
ADMIN_PASSWORD = config("ADMIN_PASSWORD", default="admin123")

INTERNAL_IPS = ['127.0.0.1']
