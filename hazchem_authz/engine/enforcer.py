"""
Core route enforcer for the compliance AuthZ system.

Provides a Casbin SyncedEnforcer instance loaded with the static route permission
table. The table is a read-only policy file: nothing in the application adds or
removes route policies at runtime.

Usage:
    from hazchem_authz.engine.enforcer import AuthzEnforcer
    allowed = AuthzEnforcer.get_enforcer().enforce("role^manager", "route^/compliance")

Reads the ``HAZCHEM_AUTHZ_MODEL`` and ``HAZCHEM_AUTHZ_ROUTE_POLICY`` settings.
"""

import logging
import os

from casbin import SyncedEnforcer
from django.conf import settings

from hazchem_authz import ROOT_DIRECTORY

logger = logging.getLogger(__name__)

DEFAULT_MODEL_PATH = os.path.join(ROOT_DIRECTORY, "engine", "config", "model.conf")
DEFAULT_ROUTE_POLICY_PATH = os.path.join(ROOT_DIRECTORY, "engine", "config", "routes.policy")


class AuthzEnforcer:
    """Singleton class to manage the Casbin SyncedEnforcer instance.

    The enforcer is created lazily on first use so that importing this module
    never touches the file system.

    Attributes:
        _enforcer (SyncedEnforcer): The singleton enforcer instance.
    """

    _enforcer = None

    def __new__(cls):
        """Singleton pattern to ensure a single enforcer instance."""
        return cls.get_enforcer()

    @classmethod
    def get_enforcer(cls) -> SyncedEnforcer:
        """Get the enforcer instance, creating it if needed.

        Returns:
            SyncedEnforcer: The singleton enforcer instance.
        """
        if cls._enforcer is None:
            cls._enforcer = cls._initialize_enforcer()
        return cls._enforcer

    @classmethod
    def reset_enforcer(cls):
        """Drop the current enforcer so the next call re-reads model and policy files.

        Mostly useful in tests that override the policy settings.
        """
        cls._enforcer = None

    @classmethod
    def get_model_path(cls) -> str:
        return getattr(settings, "HAZCHEM_AUTHZ_MODEL", None) or DEFAULT_MODEL_PATH

    @classmethod
    def get_policy_path(cls) -> str:
        return getattr(settings, "HAZCHEM_AUTHZ_ROUTE_POLICY", None) or DEFAULT_ROUTE_POLICY_PATH

    @classmethod
    def _initialize_enforcer(cls) -> SyncedEnforcer:
        """
        Create the Casbin SyncedEnforcer from the configured model and route policy files.

        Returns:
            SyncedEnforcer: Configured Casbin enforcer.

        Raises:
            FileNotFoundError: If either configuration file is missing.
        """
        model_path = cls.get_model_path()
        policy_path = cls.get_policy_path()

        for path in (model_path, policy_path):
            if not os.path.isfile(path):
                logger.error(f"Route enforcer configuration file not found: {path}")
                raise FileNotFoundError(path)

        enforcer = SyncedEnforcer(model_path, policy_path)
        logger.info(f"Loaded route policy from {policy_path}")
        return enforcer
