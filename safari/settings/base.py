"""
Django base settings for the Safari Tours backend.
"""

from pathlib import Path

import dj_database_url
from decouple import config, Csv
from dotenv import load_dotenv

load_dotenv()

# ----------------------------------------
# 🔧 Project Structure
# ----------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# ----------------------------------------
# 🔐 Security
# ----------------------------------------
SECRET_KEY = config("DJANGO_SECRET_KEY", default="dev-insecure-replace-me")
DEBUG = config("DJANGO_DEBUG", default=False, cast=bool)
ALLOWED_HOSTS = config("DJANGO_ALLOWED_HOSTS", default="127.0.0.1,localhost", cast=Csv())

# ----------------------------------------
# 📦 Installed Applications
# ----------------------------------------
INSTALLED_APPS = [
    'whitenoise.runserver_nostatic',
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    # Third party
    'rest_framework',
    'django_filters',

    # Local apps
    'core',
    'accounts',
    'catalog',
    'bookings',
]

# ----------------------------------------
# ⚙️ Middleware
# ----------------------------------------
MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'whitenoise.middleware.WhiteNoiseMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    'accounts.middleware.AdminAreaMiddleware',
]

# ----------------------------------------
# 🔗 URL Configuration
# ----------------------------------------
ROOT_URLCONF = 'safari.urls'
APPEND_SLASH = False

# ----------------------------------------
# 🧠 Templates (Django admin only)
# ----------------------------------------
TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

# ----------------------------------------
# 🔌 WSGI Application
# ----------------------------------------
WSGI_APPLICATION = 'safari.wsgi.application'

# ----------------------------------------
# 🗄️ Database (SQLite unless DATABASE_URL is set)
# ----------------------------------------
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

DATABASE_URL = config("DATABASE_URL", default=None)
if DATABASE_URL:
    DATABASES['default'] = dj_database_url.config(
        default=DATABASE_URL,
        conn_max_age=600,
        conn_health_checks=True,
    )

# ----------------------------------------
# 🌍 Localization
# ----------------------------------------
LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'Africa/Nairobi'
USE_I18N = True
USE_TZ = True

# ----------------------------------------
# 📂 Static Files
# ----------------------------------------
STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
    },
}

# ----------------------------------------
# 📁 Uploaded Images
# ----------------------------------------
MEDIA_URL = '/uploads/'
MEDIA_ROOT = Path(config("UPLOAD_ROOT", default=str(BASE_DIR / 'uploads')))
UPLOAD_MAX_BYTES = config("UPLOAD_MAX_BYTES", default=5 * 1024 * 1024, cast=int)
UPLOAD_ALLOWED_EXTENSIONS = ('jpeg', 'jpg', 'png', 'webp', 'gif')
SERVE_UPLOADS = config("SERVE_UPLOADS", default=True, cast=bool)

# ----------------------------------------
# 🍪 Sessions
# ----------------------------------------
SESSION_COOKIE_NAME = 'safari.sid'
SESSION_COOKIE_AGE = 60 * 60 * 24
SESSION_COOKIE_HTTPONLY = True
SESSION_COOKIE_SAMESITE = 'Strict'
SESSION_COOKIE_SECURE = config("SESSION_COOKIE_SECURE", default=False, cast=bool)

# ----------------------------------------
# 👤 Admin Console Credentials
# ----------------------------------------
ADMIN_USERNAME = config("ADMIN_USERNAME", default="admin")
ADMIN_PASSWORD = config("ADMIN_PASSWORD", default="")
ADMIN_PASSWORD_HASH = config("ADMIN_PASSWORD_HASH", default="")
ADMIN_PROFILE = {
    'email': config("ADMIN_EMAIL", default="admin@example.com"),
    'firstName': config("ADMIN_FIRST_NAME", default="Admin"),
    'lastName': config("ADMIN_LAST_NAME", default="User"),
}

# ----------------------------------------
# ✉️ Email & Lead Notifications
# ----------------------------------------
EMAIL_BACKEND = config("EMAIL_BACKEND", default="django.core.mail.backends.console.EmailBackend")
EMAIL_HOST = config("EMAIL_HOST", default="localhost")
EMAIL_PORT = config("EMAIL_PORT", default=587, cast=int)
EMAIL_USE_TLS = config("EMAIL_USE_TLS", default=True, cast=bool)
EMAIL_HOST_USER = config("EMAIL_HOST_USER", default="")
EMAIL_HOST_PASSWORD = config("EMAIL_HOST_PASSWORD", default="")
DEFAULT_FROM_EMAIL = config("DEFAULT_FROM_EMAIL", default="noreply@example.com")
ADMIN_EMAIL = config("ADMIN_EMAIL", default="")
LEAD_NOTIFICATIONS_ENABLED = config("LEAD_NOTIFICATIONS_ENABLED", default=False, cast=bool)

# ----------------------------------------
# ⭐ Testimonials
# ----------------------------------------
TESTIMONIALS_REQUIRE_APPROVAL = config("TESTIMONIALS_REQUIRE_APPROVAL", default=False, cast=bool)

# ----------------------------------------
# 🔌 REST Framework
# ----------------------------------------
REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'accounts.authentication.AdminSessionAuthentication',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.AllowAny',
    ],
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'DEFAULT_PARSER_CLASSES': [
        'rest_framework.parsers.JSONParser',
        'rest_framework.parsers.FormParser',
        'rest_framework.parsers.MultiPartParser',
    ],
    'DEFAULT_FILTER_BACKENDS': [
        'django_filters.rest_framework.DjangoFilterBackend',
    ],
    'EXCEPTION_HANDLER': 'core.exceptions.api_exception_handler',
    'UNAUTHENTICATED_USER': None,
    'DEFAULT_THROTTLE_RATES': {
        'login': config("LOGIN_THROTTLE_RATE", default="10/min"),
        'uploads': config("UPLOAD_THROTTLE_RATE", default="30/min"),
    },
}

# ----------------------------------------
# 🆔 Default Auto Field
# ----------------------------------------
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# ----------------------------------------
# 🪵 Logging
# ----------------------------------------
LOG_LEVEL = config("LOG_LEVEL", default="INFO")

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '[{levelname}] {asctime} {module} - {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose'
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        app: {'handlers': ['console'], 'level': LOG_LEVEL, 'propagate': False}
        for app in ('core', 'accounts', 'catalog', 'bookings')
    },
}
