"""Public API for route and feature permissions.

A route is the first segment of a navigable path. The route permission table
maps each protected route to the roles allowed to reach it. Routes missing
from the table are open to everyone, anonymous sessions included. Features are
default-deny: a feature missing from the table is allowed to no one.
"""

from typing import Optional

from hazchem_authz.api.data import FeatureData, NavigationItemData, RoleData, RouteData, RouteIndex, RoutePermissionData
from hazchem_authz.constants import roles as role_constants
from hazchem_authz.constants import routes as route_constants
from hazchem_authz.engine.enforcer import AuthzEnforcer

__all__ = [
    "check_route_permission",
    "get_dashboard_variant",
    "get_navigation_for_role",
    "get_route_table",
    "is_feature_allowed",
    "is_route_protected",
]

STANDARD_DASHBOARD = "standard"
ADMIN_MANAGER_DASHBOARD = "admin_manager"


def _get_allowed_role_keys(key: str) -> set[str]:
    enforcer = AuthzEnforcer.get_enforcer()
    policies = enforcer.get_filtered_policy(RouteIndex.ROUTE.value, key)
    return {policy[RouteIndex.ROLE.value] for policy in policies}


def get_route_table() -> dict[str, frozenset[str]]:
    """Read the route permission table.

    Returns:
        dict[str, frozenset[str]]: Route prefix (e.g., '/users') mapped to the
            lower-cased names of the roles allowed to access it.
    """
    enforcer = AuthzEnforcer.get_enforcer()
    table = {}
    for policy in enforcer.get_policy():
        obj = policy[RouteIndex.ROUTE.value]
        if not obj.startswith(f"{RouteData.NAMESPACE}{RouteData.SEPARATOR}"):
            continue
        route = RouteData(namespaced_key=obj)
        role = RoleData(namespaced_key=policy[RouteIndex.ROLE.value])
        table.setdefault(route.prefix, set()).add(role.external_key)
    return {prefix: frozenset(roles) for prefix, roles in table.items()}


def is_route_protected(path: str) -> bool:
    """Check whether the route of ``path`` appears in the route permission table.

    Args:
        path: A full request path (e.g., '/sds-library/new').

    Returns:
        bool: True if access to the route is restricted to some roles.
    """
    route = RouteData.from_path(path)
    return bool(_get_allowed_role_keys(route.namespaced_key))


def check_route_permission(path: str, role: Optional[str], is_loading: bool = False) -> RoutePermissionData:
    """Decide whether a role may access a path.

    Args:
        path: A full request path (e.g., '/sds-library/edit/123').
        role: The resolved role name (case-insensitive), or None when anonymous.
        is_loading: True while the identity is still being resolved. The check is
            then not evaluated and the result carries ``is_loading=True``.

    Returns:
        RoutePermissionData: The outcome. Listed routes are allowed only to their
            roles, unlisted routes are allowed to everyone.

    Examples:
        >>> check_route_permission('/users', 'administrator').has_permission
        True
        >>> check_route_permission('/users', None).has_permission
        False
    """
    if is_loading:
        return RoutePermissionData(path=path, has_permission=False, is_loading=True)

    route = RouteData.from_path(path)
    if not _get_allowed_role_keys(route.namespaced_key):
        return RoutePermissionData(path=path, has_permission=True)

    if not role or not role.strip():
        return RoutePermissionData(path=path, has_permission=False)

    enforcer = AuthzEnforcer.get_enforcer()
    has_permission = enforcer.enforce(RoleData(external_key=role).namespaced_key, route.namespaced_key)
    return RoutePermissionData(path=path, has_permission=has_permission)


def is_feature_allowed(role: Optional[str], feature: FeatureData) -> bool:
    """Check whether a role may use a feature inside a screen.

    Args:
        role: The resolved role name, or None when anonymous.
        feature: The feature to check (e.g., ``MANAGE_GHS_HAZARDS``).

    Returns:
        bool: True only if the feature is granted to the role.
    """
    if not role or not role.strip():
        return False
    enforcer = AuthzEnforcer.get_enforcer()
    return enforcer.enforce(RoleData(external_key=role).namespaced_key, feature.namespaced_key)


def get_navigation_for_role(role: Optional[str]) -> list[NavigationItemData]:
    """List the sidebar entries whose route the role may access.

    Args:
        role: The resolved role name, or None when anonymous.

    Returns:
        list[NavigationItemData]: Visible entries in menu order. Empty for anonymous sessions.
    """
    if not role:
        return []
    return [
        item
        for item in route_constants.NAVIGATION_ITEMS
        if check_route_permission(item.path, role).has_permission
    ]


def get_dashboard_variant(role: Optional[str]) -> Optional[str]:
    """Pick the home dashboard shown to a role.

    Returns:
        str | None: 'standard' for standard users, 'admin_manager' for every other
            role, None for anonymous sessions.
    """
    if not role:
        return None
    if RoleData(external_key=role) == role_constants.STANDARD:
        return STANDARD_DASHBOARD
    return ADMIN_MANAGER_DASHBOARD
