"""
Django settings for the Yahoo Fantasy OAuth backend.

모든 값은 환경 변수에서 읽습니다. 기능 코드는 application/container.py 에서만
settings 를 읽고 유스케이스에 주입합니다.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: str = "") -> list[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "django-insecure-dev-only-key")
DEBUG = _env_bool("DJANGO_DEBUG", False)
IS_PRODUCTION = _env_bool("IS_PRODUCTION", False)
ALLOWED_HOSTS = _env_list(
    "DJANGO_ALLOWED_HOSTS",
    "localhost,127.0.0.1,testserver,.netlify.app,.trycloudflare.com,.ngrok-free.app,.ngrok.app,.ngrok.io",
)

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "drf_spectacular",
    "yahoo_auth",
    "yahoo_sync",
    "diagnostics",
]

MIDDLEWARE = [
    "common.middleware.RequestIdMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "config.urls"
WSGI_APPLICATION = "config.wsgi.application"

# 이 서비스는 자체 모델이 없음 (토큰은 서버에 저장하지 않음)
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.getenv("DJANGO_SQLITE_PATH", ":memory:"),
    }
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True
APPEND_SLASH = False

# 터널(cloudflare/ngrok) 뒤에서 https 로 판별되도록
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
USE_X_FORWARDED_HOST = _env_bool("DJANGO_USE_X_FORWARDED_HOST", False)

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
}

SPECTACULAR_SETTINGS = {
    "TITLE": "AiTradr Yahoo OAuth API",
    "DESCRIPTION": "Yahoo Fantasy OAuth callback, token refresh, league sync and diagnostics",
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
}

# Yahoo OAuth
YAHOO_CLIENT_ID = os.getenv("YAHOO_CLIENT_ID")
YAHOO_CLIENT_SECRET = os.getenv("YAHOO_CLIENT_SECRET")
YAHOO_REDIRECT_URI = os.getenv("YAHOO_REDIRECT_URI")
YAHOO_GAME_KEY = os.getenv("YAHOO_GAME_KEY")
YAHOO_PRODUCTION_REDIRECT_URI = os.getenv(
    "YAHOO_PRODUCTION_REDIRECT_URI",
    "https://aitradr.netlify.app/api/auth/provider/callback",
)
YAHOO_PRODUCTION_HOST_SUFFIXES = _env_list(
    "YAHOO_PRODUCTION_HOST_SUFFIXES", "netlify.app"
)
YAHOO_TUNNEL_HOST_SUFFIXES = _env_list(
    "YAHOO_TUNNEL_HOST_SUFFIXES", "trycloudflare.com,ngrok-free.app,ngrok.app,ngrok.io"
)
YAHOO_OAUTH_HTTP_TIMEOUT_SECONDS = float(
    os.getenv("YAHOO_OAUTH_HTTP_TIMEOUT_SECONDS", "10")
)
YAHOO_API_HTTP_TIMEOUT_SECONDS = float(
    os.getenv("YAHOO_API_HTTP_TIMEOUT_SECONDS", "10")
)

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {
        "request_id": {"()": "common.logging.RequestIdFilter"},
    },
    "formatters": {
        "default": {
            "class": "common.logging.SecretMaskingFormatter",
            "format": "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "filters": ["request_id"],
        },
    },
    "root": {
        "handlers": ["console"],
        "level": os.getenv("LOG_LEVEL", "INFO"),
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": os.getenv("DJANGO_LOG_LEVEL", "WARNING"),
            "propagate": False,
        },
    },
}
