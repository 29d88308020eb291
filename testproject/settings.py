"""Django settings for running the preventdeletion tests."""

import os

from environs import Env

# Build paths inside the project like this: os.path.join(BASE_DIR, ...)
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

env = Env()
env.read_env(path=os.path.join(BASE_DIR, ".env"), recurse=False)

DEBUG = env.bool("PREVENT_DELETION_DEBUG", default=False)

SECRET_KEY = env.str("PREVENT_DELETION_SECRET_KEY", default="insecure-test-key")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "preventdeletion.apps.PreventDeletionConfig",
    "tests.testapp",
]

DATABASES = {
    "default": env.dj_db_url(
        "PREVENT_DELETION_DATABASE_URL", default="sqlite://:memory:"
    )
}

USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.AutoField"

PREVENT_DELETION = {
    "ENABLED": env.bool("PREVENT_DELETION_ENABLED", default=True),
    "LOGGER": "preventdeletion",
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {"class": "logging.StreamHandler"},
    },
    "loggers": {
        "preventdeletion": {
            "handlers": ["console"],
            "level": env.str("PREVENT_DELETION_LOG_LEVEL", default="WARNING"),
        },
    },
}
