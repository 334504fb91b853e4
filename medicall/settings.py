"""
Django settings for the medicall CRM.

Values come from the environment (a local .env file is loaded first).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


BASE_DIR = Path(__file__).resolve().parent.parent


SECRET_KEY = os.getenv(
    'DJANGO_SECRET_KEY',
    'django-insecure-medicall-dev-key-change-me'
)

DEBUG = os.getenv('DJANGO_DEBUG', '1') == '1'

ALLOWED_HOSTS = [
    host.strip()
    for host in os.getenv('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1,[::1],testserver').split(',')
    if host.strip()
]


INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    'doctors.apps.DoctorsConfig',
    'visits',
    'procedures',
    'reps',
    'dashboardapp',
    'exports',
]


MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]


ROOT_URLCONF = 'medicall.urls'


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


WSGI_APPLICATION = 'medicall.wsgi.application'


DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.getenv('MEDICALL_DB_PATH', str(BASE_DIR / 'db.sqlite3')),
    },
}


AUTH_PASSWORD_VALIDATORS = [
    {'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator'},
    {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator'},
    {'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator'},
    {'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator'},
]

LOGIN_URL = 'login'
LOGIN_REDIRECT_URL = 'dashboard:stats'
LOGOUT_REDIRECT_URL = 'login'


LANGUAGE_CODE = 'es-mx'
TIME_ZONE = os.getenv('MEDICALL_TIME_ZONE', 'America/Mexico_City')
USE_I18N = True
USE_TZ = True


STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'


# Bulk seeds and backups can be large
DATA_UPLOAD_MAX_MEMORY_SIZE = 50 * 1024 * 1024


# ---------------------------------------------------------
# CRM: executive roster and display metadata
# ---------------------------------------------------------

MEDICALL_EXECUTIVES = [
    {'name': 'LUIS', 'color': 'blue'},
    {'name': 'ORALIA', 'color': 'pink'},
    {'name': 'ANGEL', 'color': 'purple'},
    {'name': 'TALINA', 'color': 'teal'},
]

MEDICALL_RECENT_PROCEDURES = int(os.getenv('MEDICALL_RECENT_PROCEDURES', '10'))


# ---------------------------------------------------------
# LOGGING
# ---------------------------------------------------------

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {asctime} {module}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'INFO',
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
        'doctors': {
            'handlers': ['console'],
            'level': os.getenv('MEDICALL_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
        'procedures': {
            'handlers': ['console'],
            'level': os.getenv('MEDICALL_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
        'visits': {
            'handlers': ['console'],
            'level': os.getenv('MEDICALL_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
    },
}
