"""Identity resolution for the current session.

The session marker is the email address stored at login. Resolving it yields
the effective role and the assigned location of the user. Resolution never
raises: a missing marker, an unknown or deactivated user, or a failing lookup
all resolve to the anonymous identity, which has no permissions.
"""

import logging
from typing import Iterable, Optional

from django.contrib.auth import get_user_model

from hazchem_authz.api.data import ANONYMOUS_IDENTITY, IdentityData, RoleData
from hazchem_authz.constants import roles as role_constants

__all__ = [
    "get_role_rank",
    "resolve_identity",
    "select_effective_role",
]

logger = logging.getLogger(__name__)

User = get_user_model()


def get_role_rank(role: RoleData) -> int:
    """Rank of a role in the precedence order, lower is more privileged.

    Args:
        role: The role to rank.

    Returns:
        int: Position in ``ROLE_PRECEDENCE``; unknown roles rank after every known role.
    """
    try:
        return role_constants.ROLE_PRECEDENCE.index(role)
    except ValueError:
        return len(role_constants.ROLE_PRECEDENCE)


def select_effective_role(role_names: Iterable[str]) -> Optional[str]:
    """Pick the role used for authorization among a user's role assignments.

    The most privileged role wins (administrator, poweruser, manager, standard).
    Unknown role names only win when the user holds no known role, and ties keep
    the assignment order.

    Args:
        role_names: Role names in assignment order. Blank names are ignored.

    Returns:
        str | None: The lower-cased effective role name, or None without assignments.

    Examples:
        >>> select_effective_role(["Standard", "Administrator"])
        'administrator'
        >>> select_effective_role([]) is None
        True
    """
    candidates = [RoleData(external_key=name) for name in role_names if name and name.strip()]
    if not candidates:
        return None
    return min(candidates, key=get_role_rank).external_key


def _get_user_for_marker(session_marker: str):
    return (
        User.objects.select_related("compliance_profile")
        .filter(email__iexact=session_marker, is_active=True)
        .order_by("id")
        .first()
    )


def resolve_identity(session_marker: Optional[str]) -> IdentityData:
    """Resolve the role and location of the user identified by a session marker.

    Args:
        session_marker: The email stored in the session at login, or None.

    Returns:
        IdentityData: The resolved identity. Anonymous (``role=None``,
            ``location_id=None``) when the marker is absent, matches no active
            user, or the lookup fails.
    """
    if not session_marker or not session_marker.strip():
        return ANONYMOUS_IDENTITY

    session_marker = session_marker.strip()

    try:
        user = _get_user_for_marker(session_marker)
        if user is None:
            logger.info(f"No user found for session marker {session_marker}")
            return ANONYMOUS_IDENTITY

        role_names = user.role_assignments.values_list("role__role_name", flat=True)
        role = select_effective_role(role_names)

        profile = getattr(user, "compliance_profile", None)
        location_id = profile.location_id if profile is not None else None
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.error(f"Error resolving identity for session marker {session_marker}: {e}")
        return ANONYMOUS_IDENTITY

    return IdentityData(
        role=role,
        location_id=str(location_id) if location_id is not None else None,
        email=user.email,
        user_id=str(user.pk),
    )
