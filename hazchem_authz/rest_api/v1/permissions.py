"""Permissions for the compliance AuthZ REST API."""

import logging
from typing import ClassVar, Optional

from rest_framework.permissions import BasePermission

from hazchem_authz import api
from hazchem_authz.constants.routes import ACCESS_DENIED_MESSAGE

logger = logging.getLogger(__name__)


class RoutePermission(BasePermission):
    """Grant access to a view only when the session role may reach its route.

    The route comes from the ``@route_permission`` decorator on the view method,
    falling back to the ``route`` attribute of the view. Views without a route
    are denied.

    Object-level checks apply the row-scoping rule: rows of another location are
    denied to roles pinned to their own location.
    """

    message = ACCESS_DENIED_MESSAGE

    LOCATION_ATTRIBUTE: ClassVar[str] = "location_id"
    """Attribute of the checked objects holding their location identifier."""

    def get_required_route(self, request, view) -> Optional[str]:
        """Extract the route of the view method handling the request.

        Args:
            request: The Django REST framework request object.
            view: The view being accessed.

        Returns:
            str | None: The route (e.g., '/site-registers'), or None if not defined.
        """
        handler = getattr(view, request.method.lower(), None)
        if handler and hasattr(handler, "required_route"):
            return handler.required_route
        return getattr(view, "route", None)

    def has_permission(self, request, view) -> bool:
        """Check the route of the view against the route permission table."""
        route = self.get_required_route(request, view)
        if not route:
            logger.warning(f"View {view.__class__.__name__} has no route; denying access")
            return False

        identity = api.get_request_identity(request)
        return api.check_route_permission(route, identity.role).has_permission

    def has_object_permission(self, request, view, obj) -> bool:
        """Check that the object belongs to a location visible to the session."""
        identity = api.get_request_identity(request)
        target_location_id = getattr(obj, self.LOCATION_ATTRIBUTE, None)
        return api.is_location_in_scope(identity.role, identity.location_id, target_location_id)
