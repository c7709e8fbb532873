"""
Django settings for firstconnect project.
"""

from pathlib import Path
import os

BASE_DIR = Path(__file__).resolve().parent.parent


# -------------------------
# Basic / environment
# -------------------------
SECRET_KEY = os.environ.get('FIRSTCONNECT_SECRET_KEY', 'django-insecure-dev-secret-for-local')

DEBUG = os.environ.get('FIRSTCONNECT_DEBUG', 'True').lower() in ('1', 'true', 'yes')

ALLOWED_HOSTS = [h for h in os.environ.get('FIRSTCONNECT_ALLOWED_HOSTS', '').split(',') if h]


# -------------------------
# Installed apps / middleware
# -------------------------
INSTALLED_APPS = [
    'django.contrib.messages',
    'django.contrib.staticfiles',

    'accounts',
    'jobs.apps.JobsConfig',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'firstconnect.urls'


# -------------------------
# Templates
# -------------------------
TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [os.path.join(BASE_DIR, 'templates')],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.template.context_processors.static',
                'django.template.context_processors.csrf',
                'django.contrib.messages.context_processors.messages',
                'accounts.context_processors.admin_marker',
            ],
        },
    },
]


WSGI_APPLICATION = 'firstconnect.wsgi.application'


# -------------------------
# Database
# -------------------------
# Jobs and applications live in the in-process store (jobs/store.py) and are
# lost on restart.
DATABASES = {}

# No session table: flash messages travel in a signed cookie.
MESSAGE_STORAGE = 'django.contrib.messages.storage.cookie.CookieStorage'


# -------------------------
# Internationalization
# -------------------------
LANGUAGE_CODE = 'en-us'
TIME_ZONE = os.environ.get('FIRSTCONNECT_TIME_ZONE', 'UTC')
USE_I18N = True
USE_TZ = True


# -------------------------
# Static & uploads
# -------------------------
STATIC_URL = '/static/'
STATICFILES_DIRS = [os.path.join(BASE_DIR, 'static')]
STATIC_ROOT = os.environ.get('FIRSTCONNECT_STATIC_ROOT', os.path.join(BASE_DIR, 'staticfiles'))

# Preferred root for the uploads/ directory. If it is not writable the jobs
# app falls back to the system temp dir at startup.
FIRSTCONNECT_UPLOAD_ROOT = os.environ.get('FIRSTCONNECT_UPLOAD_ROOT', str(BASE_DIR))
FIRSTCONNECT_UPLOADS_URL = '/uploads/'
FIRSTCONNECT_CV_MAX_UPLOAD_SIZE = 5 * 1024 * 1024


# -------------------------
# Admin access
# -------------------------
FIRSTCONNECT_ADMIN_EMAIL = os.environ.get('FIRSTCONNECT_ADMIN_EMAIL', 'umar@firstconnect.com')
FIRSTCONNECT_AUTH_CONTEXT = os.environ.get('FIRSTCONNECT_AUTH_CONTEXT', 'accounts.auth.AdminMarker')

LOGIN_URL = '/admin/login/'
LOGIN_REDIRECT_URL = '/admin/jobs/'
LOGOUT_REDIRECT_URL = '/'


# -------------------------
# Demo catalog
# -------------------------
FIRSTCONNECT_SEED_DEMO_JOBS = os.environ.get('FIRSTCONNECT_SEED_DEMO_JOBS', 'True').lower() in ('1', 'true', 'yes')
FIRSTCONNECT_DEMO_JOBS_FILE = os.path.join(BASE_DIR, 'jobs', 'fixtures', 'demo_jobs.json')


# -------------------------
# Logging
# -------------------------
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {'class': 'logging.StreamHandler'},
    },
    'root': {
        'handlers': ['console'],
        'level': 'INFO',
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO' if DEBUG else 'WARNING',
            'propagate': False,
        },
    },
}

