"""
Test settings for the hazchem_authz app.
"""

import os

from hazchem_authz import ROOT_DIRECTORY


def plugin_settings(settings):  # pylint: disable=unused-argument
    """
    Configure test overrides of the app settings.

    Args:
        settings: The Django settings object
    """


DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": "default.db",
        "USER": "",
        "PASSWORD": "",
        "HOST": "",
        "PORT": "",
    }
}

INSTALLED_APPS = (
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.messages",
    "django.contrib.sessions",
    "rest_framework",
    "hazchem_authz.apps.HazchemAuthzConfig",
)

MIDDLEWARE = [
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "hazchem_authz.middleware.IdentityMiddleware",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

SECRET_KEY = "test-secret-key"

USE_TZ = True

ROOT_URLCONF = "hazchem_authz.urls"

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

# Route permission table
HAZCHEM_AUTHZ_MODEL = os.path.join(ROOT_DIRECTORY, "engine", "config", "model.conf")
HAZCHEM_AUTHZ_ROUTE_POLICY = os.path.join(ROOT_DIRECTORY, "engine", "config", "routes.policy")
HAZCHEM_AUTHZ_SESSION_KEY = "hazchem_authz_marker"
