"""Data classes and enums for representing roles, routes, identities and filters."""

import re
from enum import Enum
from typing import ClassVar, Optional

from attrs import define, field

__all__ = [
    "ANONYMOUS_IDENTITY",
    "FeatureData",
    "IdentityData",
    "LocationFilterData",
    "NavigationItemData",
    "PermissionState",
    "RoleData",
    "RouteData",
    "RouteIndex",
    "RoutePermissionData",
]

AUTHZ_POLICY_ATTRIBUTES_SEPARATOR = "^"
ROUTE_PATH_SEPARATOR = "/"
NAMESPACED_KEY_PATTERN = rf"^.+{re.escape(AUTHZ_POLICY_ATTRIBUTES_SEPARATOR)}.+$"


class RouteIndex(Enum):
    """Index positions for fields in a route policy (p).

    Route policies link a role to a route prefix it may access.
    Format: [role, route]

    Attributes:
        ROLE: Position 0 - The role identifier (e.g., 'role^manager').
        ROUTE: Position 1 - The route or feature identifier (e.g., 'route^/compliance').
    """

    ROLE = 0
    ROUTE = 1


class PermissionState(str, Enum):
    """States of a route permission check.

    A check starts in ``UNKNOWN`` while the identity is being resolved, moves to
    ``RESOLVED`` once role and location are known, and ends in ``ALLOWED`` or
    ``DENIED``. A new navigation starts the cycle again.
    """

    UNKNOWN = "unknown"
    RESOLVED = "resolved"
    ALLOWED = "allowed"
    DENIED = "denied"


class AuthzBaseClass:
    """Base class for all authz classes.

    Attributes:
        SEPARATOR: The separator between the namespace and the identifier (default: '^').
        NAMESPACE: The namespace prefix for the data type (e.g., 'role', 'route').
    """

    SEPARATOR: ClassVar[str] = AUTHZ_POLICY_ATTRIBUTES_SEPARATOR
    NAMESPACE: ClassVar[str] = None


@define
class AuthZData(AuthzBaseClass):
    """Base class for all namespaced authz data classes.

    Attributes:
        external_key: The ID for the object outside of the authz system (e.g., 'manager' for a role,
            '/compliance' for a route).
        namespaced_key: The ID for the object within the authz system, combining namespace and external_key
            (e.g., 'role^manager', 'route^/compliance').

    Examples:
        >>> role = RoleData(external_key='manager')
        >>> role.namespaced_key
        'role^manager'
        >>> route = RouteData(namespaced_key='route^/users')
        >>> route.external_key
        '/users'
    """

    external_key: str = ""
    namespaced_key: str = ""

    @classmethod
    def normalize_key(cls, value: str) -> str:
        """Normalize a key before it is stored. Subclasses may override."""
        return value

    def __attrs_post_init__(self):
        """Derive whichever of external_key and namespaced_key was not provided."""
        if not self.NAMESPACE:
            return

        self.external_key = self.normalize_key(self.external_key)
        self.namespaced_key = self.normalize_key(self.namespaced_key)

        if not self.external_key and not self.namespaced_key:
            raise ValueError("Either external_key or namespaced_key must be provided.")

        if not self.namespaced_key:
            self.namespaced_key = f"{self.NAMESPACE}{self.SEPARATOR}{self.external_key}"

        if not self.external_key:
            if not re.match(NAMESPACED_KEY_PATTERN, self.namespaced_key):
                raise ValueError(f"Invalid namespaced_key format: {self.namespaced_key}")
            namespace, external_key = self.namespaced_key.split(self.SEPARATOR, 1)
            if namespace != self.NAMESPACE:
                raise ValueError(f"Expected namespace '{self.NAMESPACE}' in namespaced_key: {self.namespaced_key}")
            self.external_key = external_key

    def __str__(self):
        """Human readable string representation."""
        return self.external_key

    def __repr__(self):
        """Developer friendly string representation."""
        return self.namespaced_key


@define(eq=False, repr=False)
class RoleData(AuthZData):
    """A named permission tier attached to a user.

    Role names are compared case-insensitively, so the external key is always
    stored lower-cased.

    Examples:
        >>> RoleData(external_key='Administrator').namespaced_key
        'role^administrator'
        >>> RoleData(external_key='poweruser').name
        'Poweruser'
    """

    NAMESPACE: ClassVar[str] = "role"

    @classmethod
    def normalize_key(cls, value: str) -> str:
        """Role names are case-insensitive."""
        return value.strip().lower()

    def __eq__(self, other):
        """Compare roles based on their namespaced_key."""
        if not isinstance(other, RoleData):
            return False
        return self.namespaced_key == other.namespaced_key

    def __hash__(self):
        return hash(self.namespaced_key)

    @property
    def name(self) -> str:
        """The human-readable name of the role (e.g., 'Administrator')."""
        return self.external_key.replace("_", " ").title()


@define(repr=False)
class RouteData(AuthZData):
    """A route prefix, the unit of access control.

    Only the first path segment of a navigable path is significant: any path
    can be turned into its route with ``RouteData.from_path``.

    Examples:
        >>> RouteData.from_path('/sds-library/edit/123').external_key
        '/sds-library'
        >>> RouteData.from_path('').external_key
        '/'
    """

    NAMESPACE: ClassVar[str] = "route"

    @classmethod
    def from_path(cls, path: Optional[str]) -> "RouteData":
        """Build the route for the first segment of ``path``.

        Query strings and fragments are ignored, and a missing leading slash is
        tolerated.

        Args:
            path: A full request path (e.g., '/sds-library/edit/123?tab=ghs').

        Returns:
            RouteData: The route for the path prefix (e.g., '/sds-library').
        """
        path = (path or "").split("?", 1)[0].split("#", 1)[0].strip()
        segments = [segment for segment in path.split(ROUTE_PATH_SEPARATOR) if segment]
        prefix = segments[0] if segments else ""
        return cls(external_key=f"{ROUTE_PATH_SEPARATOR}{prefix}")

    @property
    def prefix(self) -> str:
        """Alias for external_key (e.g., '/users')."""
        return self.external_key


@define(repr=False)
class FeatureData(AuthZData):
    """A feature inside a screen that is granted separately from the route (e.g., editing GHS hazards)."""

    NAMESPACE: ClassVar[str] = "feature"


@define(frozen=True)
class IdentityData:
    """The resolved identity of the current session.

    Attributes:
        role: Lower-cased effective role name, or None when anonymous.
        location_id: Identifier of the user's assigned location, or None.
        is_loading: True while the identity lookup is still in flight.
        email: The session marker the identity was resolved from.
        user_id: Identifier of the user record, when one was found.
    """

    role: Optional[str] = None
    location_id: Optional[str] = None
    is_loading: bool = False
    email: Optional[str] = None
    user_id: Optional[str] = None

    @property
    def is_anonymous(self) -> bool:
        """An identity without a role has no permissions."""
        return self.role is None

    def as_dict(self) -> dict:
        """Serialize the fields the rest of the application consumes."""
        return {
            "role": self.role,
            "location_id": self.location_id,
            "is_loading": self.is_loading,
        }


ANONYMOUS_IDENTITY = IdentityData()


@define(frozen=True)
class RoutePermissionData:
    """Outcome of a route permission check.

    ``is_loading`` is a distinct third state: while it is True the value of
    ``has_permission`` is not a decision and must not be rendered as one.
    """

    path: str = ""
    has_permission: bool = False
    is_loading: bool = False

    @property
    def state(self) -> PermissionState:
        """The permission state matching this outcome."""
        if self.is_loading:
            return PermissionState.UNKNOWN
        return PermissionState.ALLOWED if self.has_permission else PermissionState.DENIED


@define(frozen=True)
class LocationFilterData:
    """The location filter a location-scoped screen applies to its rows.

    Attributes:
        location_id: Only rows for this location are shown; None means no location filter.
        read_only: When True the filter was pinned by the scoping rule and cannot be changed or cleared.
    """

    location_id: Optional[str] = field(default=None, converter=lambda value: None if value in (None, "") else str(value))
    read_only: bool = False


@define(frozen=True)
class NavigationItemData:
    """An entry of the application sidebar."""

    label: str
    path: str
    group: str

    def as_dict(self) -> dict:
        return {"label": self.label, "path": self.path, "group": self.group}
