import os
from pathlib import Path
from dotenv import load_dotenv
load_dotenv()


BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "django-insecure-showroom-dev-key-change-me")
DEBUG = os.getenv("DJANGO_DEBUG", "1") == "1"
ALLOWED_HOSTS = ["localhost", "127.0.0.1", "testserver", os.getenv("HOST", "")]

INSTALLED_APPS = [
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    # app
    "catalog",
    "compare",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.locale.LocaleMiddleware",   # after sessions, before common
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "showroom.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],  # <-- templates folder
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.messages.context_processors.messages",
                "compare.context_processors.compare_meta",
            ],
        },
    },
]

WSGI_APPLICATION = "showroom.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

# Compare state lives in the session only; signed cookies keep it off the DB
SESSION_ENGINE = "django.contrib.sessions.backends.signed_cookies"
MESSAGE_STORAGE = "django.contrib.messages.storage.session.SessionStorage"

USE_I18N = True
LANGUAGE_CODE = "en"
TIME_ZONE = "UTC"
USE_TZ = True

STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"


# Comparison

COMPARE_CURRENCY = os.getenv("COMPARE_CURRENCY", "AED")

# Layout signal: how many columns fit side by side, and how many may be picked
COMPARE_LAYOUTS = {
    "narrow": {"window_size": 1, "max_selected": 3},
    "wide":   {"window_size": 3, "max_selected": 4},
}

# Per-surface rules; grade overlay always keeps one grade and opens pre-filled
COMPARE_SURFACES = {
    "grade":   {"min_selected": int(os.getenv("COMPARE_GRADE_MIN_SELECTED", "1")), "seed_from_catalog": True},
    "vehicle": {"min_selected": int(os.getenv("COMPARE_VEHICLE_MIN_SELECTED", "0")), "seed_from_catalog": False},
}


# Logging

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "compare": {
            "handlers": ["console"],
            "level": os.getenv("COMPARE_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
