# config/settings/local.py
from .base import *  # noqa

DEBUG = os.getenv("DJANGO_DEBUG", "1") == "1"

DATABASES = {
    "default": database_from_url(os.getenv("DATABASE_URL")),
}

# Development
CORS_ALLOW_ALL_ORIGINS = True  # Only for development!
