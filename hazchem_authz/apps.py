"""
hazchem_authz Django application initialization.
"""

from django.apps import AppConfig


class HazchemAuthzConfig(AppConfig):
    """
    Configuration for the hazchem_authz Django application.
    """

    name = "hazchem_authz"
    verbose_name = "Hazardous Chemicals AuthZ"
    default_auto_field = "django.db.models.BigAutoField"
