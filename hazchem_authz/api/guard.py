"""Route guard tracking the permission check of the latest navigation.

Each navigation starts a new generation. Identity lookups may complete out of
order; a result that belongs to an older generation is discarded so that a
stale decision never replaces the current one.
"""

import logging
import threading
from typing import Optional

from hazchem_authz.api.data import IdentityData, PermissionState, RoutePermissionData
from hazchem_authz.api.routes import check_route_permission

__all__ = ["RouteGuard"]

logger = logging.getLogger(__name__)


class RouteGuard:
    """Permission state machine for one session.

    States move ``UNKNOWN`` → ``RESOLVED`` → ``ALLOWED`` | ``DENIED``. Calling
    ``navigate`` restarts the cycle at ``UNKNOWN``.

    Usage::

        guard = RouteGuard()
        generation = guard.navigate("/users")
        decision = guard.resolve(generation, resolve_identity(marker))

    Attributes:
        state (PermissionState): State of the current navigation.
        current_path (str | None): Path of the current navigation.
        identity (IdentityData | None): Identity resolved for the current navigation.
        decision (RoutePermissionData | None): Outcome of the current navigation, once resolved.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._generation = 0
        self.state = PermissionState.UNKNOWN
        self.current_path = None
        self.identity = None
        self.decision = None

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_loading(self) -> bool:
        """True until the current navigation has a decision."""
        return self.state in (PermissionState.UNKNOWN, PermissionState.RESOLVED)

    def navigate(self, path: str) -> int:
        """Start the permission check for a new navigation.

        Args:
            path: The path being navigated to.

        Returns:
            int: The generation to pass to ``resolve`` once the identity is known.
        """
        with self._lock:
            self._generation += 1
            self.state = PermissionState.UNKNOWN
            self.current_path = path
            self.identity = None
            self.decision = None
            return self._generation

    def current_decision(self) -> RoutePermissionData:
        """The outcome to render right now; a loading result while unresolved."""
        with self._lock:
            if self.decision is None:
                return RoutePermissionData(path=self.current_path or "", has_permission=False, is_loading=True)
            return self.decision

    def resolve(self, generation: int, identity: IdentityData) -> Optional[RoutePermissionData]:
        """Complete the permission check of a navigation.

        Args:
            generation: The value returned by ``navigate`` for this check.
            identity: The identity resolved for the session.

        Returns:
            RoutePermissionData | None: The decision, or None if a newer
                navigation started in the meantime and the result was discarded.
        """
        with self._lock:
            if generation != self._generation:
                logger.debug(f"Discarding stale permission result for generation {generation}")
                return None

            self.identity = identity
            self.state = PermissionState.RESOLVED
            self.decision = check_route_permission(self.current_path, identity.role, identity.is_loading)
            self.state = self.decision.state
            return self.decision
