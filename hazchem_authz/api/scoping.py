"""Row scoping for location-scoped screens.

Administrators and power users see every location and may change the location
filter freely. Every other role, anonymous sessions included, is pinned to its
own assigned location. This is a convenience for the screens built on top of
it: the database permissions of the host project remain the enforcement
boundary.
"""

from typing import Optional

from django.db.models import QuerySet

from hazchem_authz.api.data import LocationFilterData
from hazchem_authz.constants import roles as role_constants

__all__ = [
    "is_location_in_scope",
    "is_location_unrestricted",
    "scope_location_filter",
    "scope_queryset_by_location",
]


def is_location_unrestricted(role: Optional[str]) -> bool:
    """Check whether a role may see rows of any location.

    Args:
        role: The resolved role name (case-insensitive), or None when anonymous.

    Returns:
        bool: True for administrators and power users.
    """
    if not role:
        return False
    return role.strip().lower() in role_constants.UNRESTRICTED_LOCATION_ROLES


def scope_location_filter(
    role: Optional[str],
    location_id: Optional[str],
    requested_filter: Optional[LocationFilterData] = None,
) -> Optional[LocationFilterData]:
    """Compute the location filter a screen must apply.

    Args:
        role: The resolved role name, or None when anonymous.
        location_id: The location assigned to the user, or None.
        requested_filter: The filter the user asked for. None means no filter.

    Returns:
        LocationFilterData | None: ``requested_filter`` unchanged for unrestricted roles,
            None included; otherwise a read-only filter pinned to ``location_id``
            whatever was requested.

    Examples:
        >>> scope_location_filter("standard", "7", LocationFilterData(location_id="9"))
        LocationFilterData(location_id='7', read_only=True)
    """
    if is_location_unrestricted(role):
        return requested_filter
    return LocationFilterData(location_id=location_id, read_only=True)


def is_location_in_scope(role: Optional[str], location_id: Optional[str], target_location_id: Optional[str]) -> bool:
    """Check whether a row of ``target_location_id`` may be viewed or edited.

    Args:
        role: The resolved role name, or None when anonymous.
        location_id: The location assigned to the user, or None.
        target_location_id: The location of the row, or the location a change would move it to.

    Returns:
        bool: False for anonymous sessions, True for unrestricted roles; otherwise True
            only for the user's own location.
    """
    if not role or not role.strip():
        return False
    if is_location_unrestricted(role):
        return True
    if location_id is None or target_location_id is None:
        return False
    return str(location_id) == str(target_location_id)


def scope_queryset_by_location(
    queryset: QuerySet,
    location_filter: Optional[LocationFilterData],
    field_name: str = "location_id",
) -> QuerySet:
    """Apply a location filter to a queryset of location-scoped rows.

    Args:
        queryset: The unscoped rows (e.g., ``SiteRegister.objects.all()``).
        location_filter: The filter computed by ``scope_location_filter``; None means no filter.
        field_name: The name of the location column on the rows.

    Returns:
        QuerySet: The rows of the filtered location. A pinned filter without a
            location yields no rows.
    """
    if location_filter is None:
        return queryset
    if location_filter.location_id is not None:
        return queryset.filter(**{field_name: location_filter.location_id})
    if location_filter.read_only:
        return queryset.none()
    return queryset
