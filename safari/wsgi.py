"""
WSGI config for the Safari Tours backend.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'safari.settings.production')

application = get_wsgi_application()
