"""
Common settings for the hazchem_authz app.
"""

import os

from hazchem_authz import ROOT_DIRECTORY


def plugin_settings(settings):
    """
    Configure the default settings of the app.

    Values already present in the host project settings are left untouched.

    Args:
        settings: The Django settings object
    """
    # Path to the Casbin model.conf describing how route requests are matched.
    if not hasattr(settings, "HAZCHEM_AUTHZ_MODEL"):
        settings.HAZCHEM_AUTHZ_MODEL = os.path.join(ROOT_DIRECTORY, "engine", "config", "model.conf")

    # Path to the static route permission table.
    if not hasattr(settings, "HAZCHEM_AUTHZ_ROUTE_POLICY"):
        settings.HAZCHEM_AUTHZ_ROUTE_POLICY = os.path.join(ROOT_DIRECTORY, "engine", "config", "routes.policy")

    # Django session key holding the identity marker.
    if not hasattr(settings, "HAZCHEM_AUTHZ_SESSION_KEY"):
        settings.HAZCHEM_AUTHZ_SESSION_KEY = "hazchem_authz_marker"

    identity_middleware = "hazchem_authz.middleware.IdentityMiddleware"
    middleware = list(getattr(settings, "MIDDLEWARE", []))
    if identity_middleware not in middleware:
        middleware.append(identity_middleware)
        settings.MIDDLEWARE = middleware
