"""
Production specific settings for the Safari Tours backend
"""

import dj_database_url
from decouple import config, Csv

from .base import *

# ----------------------------------------
# 🔐 Security Settings
# ----------------------------------------
DEBUG = False
CSRF_COOKIE_SECURE = True
SESSION_COOKIE_SECURE = True
SECURE_SSL_REDIRECT = config("SECURE_SSL_REDIRECT", default=True, cast=bool)
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
CSRF_TRUSTED_ORIGINS = config("CSRF_TRUSTED_ORIGINS", default="", cast=Csv())

# ----------------------------------------
# 🗄️ PostgreSQL Database
# ----------------------------------------
DATABASES = {
    'default': dj_database_url.config(
        conn_max_age=600,
        conn_health_checks=True,
        ssl_require=config("DATABASE_SSL_REQUIRE", default=True, cast=bool),
    )
}

# ----------------------------------------
# 📂 Static Files
# ----------------------------------------
STORAGES = {
    **STORAGES,
    'staticfiles': {
        'BACKEND': 'whitenoise.storage.CompressedManifestStaticFilesStorage',
    },
}
SERVE_UPLOADS = config("SERVE_UPLOADS", default=True, cast=bool)
