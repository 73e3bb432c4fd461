"""
REST API views for the compliance Authorization (AuthZ) system.

This module provides Django REST Framework views for the session lifecycle,
route permission checks, navigation and the location-scoped site registers.
"""

import logging

import edx_api_doc_tools as apidocs
from django.contrib.auth import authenticate, get_user_model, login, logout
from django.http import HttpRequest
from django.shortcuts import get_object_or_404
from django.utils import timezone
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from hazchem_authz import api
from hazchem_authz.constants import routes as route_constants
from hazchem_authz.models import SiteRegister, UserProfile
from hazchem_authz.rest_api.data import SessionError
from hazchem_authz.rest_api.decorators import route_permission, view_auth_classes
from hazchem_authz.rest_api.utils import get_user_by_email, search_site_registers
from hazchem_authz.rest_api.v1.paginators import SiteRegisterPagination
from hazchem_authz.rest_api.v1.permissions import RoutePermission
from hazchem_authz.rest_api.v1.serializers import (
    IdentitySerializer,
    ListSiteRegistersSerializer,
    LocationFilterSerializer,
    LoginSerializer,
    NavigationResponseSerializer,
    RouteValidationResponseSerializer,
    RouteValidationSerializer,
    SiteRegisterSerializer,
)

logger = logging.getLogger(__name__)

User = get_user_model()

FEATURES = {
    "manage_ghs_hazards": route_constants.MANAGE_GHS_HAZARDS,
    "manage_sds_library": route_constants.MANAGE_SDS_LIBRARY,
}


def _identity_response_data(identity: api.IdentityData) -> dict:
    return {**identity.as_dict(), "email": identity.email}


@view_auth_classes(is_authenticated=False)
class LoginView(APIView):
    """
    API view for starting a session.

    **Endpoints**

    - POST: Authenticate with email and password and store the session marker

    **Example Request**

    POST /api/authz/v1/session/login

    .. code-block:: json

        {"email": "jane@example.com", "password": "..."}

    **Example Response**

    .. code-block:: json

        {"role": "manager", "location_id": "4", "is_loading": false, "email": "jane@example.com"}
    """

    @apidocs.schema(
        body=LoginSerializer,
        responses={
            status.HTTP_200_OK: IdentitySerializer,
            status.HTTP_400_BAD_REQUEST: "The request data is invalid",
            status.HTTP_401_UNAUTHORIZED: "Invalid email or password",
        },
    )
    def post(self, request: HttpRequest) -> Response:
        """Authenticate the user and start the session."""
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        email = serializer.validated_data["email"]

        try:
            candidate = get_user_by_email(email)
        except User.DoesNotExist:
            candidate = None

        password = serializer.validated_data["password"]
        user = None
        if candidate is not None:
            user = authenticate(request, username=candidate.get_username(), password=password)

        if user is None and candidate is not None and not candidate.is_active and candidate.check_password(password):
            logger.info(f"Login attempt for inactive user {email}")
            return Response(
                data={"message": "This account is inactive", "error": SessionError.INACTIVE_USER},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        if user is None:
            logger.info(f"Failed login attempt for {email}")
            return Response(
                data={"message": "Invalid email or password", "error": SessionError.INVALID_CREDENTIALS},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        login(request, user)
        api.start_session(request, user.email)
        UserProfile.objects.filter(user=user).update(last_login_date=timezone.now())

        identity = api.get_request_identity(request)
        return Response(IdentitySerializer(_identity_response_data(identity)).data, status=status.HTTP_200_OK)


@view_auth_classes(is_authenticated=False)
class LogoutView(APIView):
    """
    API view for ending a session.

    **Endpoints**

    - POST: Clear the session marker and log the user out
    """

    @apidocs.schema(responses={status.HTTP_204_NO_CONTENT: "The session was cleared"})
    def post(self, request: HttpRequest) -> Response:
        """Clear the session."""
        logout(request)
        api.end_session(request)
        return Response(status=status.HTTP_204_NO_CONTENT)


@view_auth_classes(is_authenticated=False)
class IdentityMeView(APIView):
    """
    API view returning the resolved identity of the session.

    Anonymous sessions get ``role`` and ``location_id`` set to null.

    **Example Response**

    .. code-block:: json

        {"role": "standard", "location_id": "12", "is_loading": false, "email": "sam@example.com"}
    """

    @apidocs.schema(responses={status.HTTP_200_OK: IdentitySerializer})
    def get(self, request: HttpRequest) -> Response:
        """Return the identity of the session."""
        identity = api.get_request_identity(request)
        return Response(IdentitySerializer(_identity_response_data(identity)).data, status=status.HTTP_200_OK)


@view_auth_classes(is_authenticated=False)
class RouteValidationMeView(APIView):
    """
    API view for validating routes against the route permission table for the session.

    **Request Format**

    Expects a list of objects, each containing a ``path``.

    **Example Request**

    POST /api/authz/v1/routes/validate/me

    .. code-block:: json

        [{"path": "/users"}, {"path": "/site-registers/edit/3"}]

    **Example Response**

    .. code-block:: json

        [
            {"path": "/users", "has_permission": false, "is_loading": false},
            {"path": "/site-registers/edit/3", "has_permission": true, "is_loading": false}
        ]
    """

    @apidocs.schema(
        body=RouteValidationSerializer(help_text="The routes to validate", many=True),
        responses={
            status.HTTP_200_OK: RouteValidationResponseSerializer,
            status.HTTP_400_BAD_REQUEST: "The request data is invalid",
        },
    )
    def post(self, request: HttpRequest) -> Response:
        """Validate one or more routes for the session."""
        serializer = RouteValidationSerializer(data=request.data, many=True)
        serializer.is_valid(raise_exception=True)

        identity = api.get_request_identity(request)
        response_data = []
        for item in serializer.validated_data:
            try:
                decision = api.check_route_permission(item["path"], identity.role, identity.is_loading)
            except Exception as e:  # pylint: disable=broad-exception-caught
                logger.error(f"Error validating route {item['path']} for {identity.email}: {e}")
                decision = api.RoutePermissionData(path=item["path"], has_permission=False)
            response_data.append(
                {
                    "path": decision.path,
                    "has_permission": decision.has_permission,
                    "is_loading": decision.is_loading,
                }
            )

        serializer = RouteValidationResponseSerializer(response_data, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)


@view_auth_classes(is_authenticated=False)
class NavigationMeView(APIView):
    """
    API view returning the sidebar entries, home dashboard and features of the session.

    **Example Response**

    .. code-block:: json

        {
            "dashboard": "admin_manager",
            "items": [{"label": "Home", "path": "/dashboard", "group": "main"}],
            "features": {"manage_ghs_hazards": false, "manage_sds_library": true}
        }
    """

    @apidocs.schema(responses={status.HTTP_200_OK: NavigationResponseSerializer})
    def get(self, request: HttpRequest) -> Response:
        """Return the navigation of the session."""
        identity = api.get_request_identity(request)
        response_data = {
            "dashboard": api.get_dashboard_variant(identity.role),
            "items": [item.as_dict() for item in api.get_navigation_for_role(identity.role)],
            "features": {name: api.is_feature_allowed(identity.role, feature) for name, feature in FEATURES.items()},
        }
        return Response(NavigationResponseSerializer(response_data).data, status=status.HTTP_200_OK)


@view_auth_classes()
class SiteRegisterListView(APIView):
    """
    API view listing the site registers visible to the session.

    Administrators and power users may filter by any location. Other roles are
    pinned to their assigned location whatever location they request.

    **Query Parameters**

    - location (Optional): Identifier of the location to list
    - search (Optional): Search term matched against the product names
    - page (Optional): Page number for pagination
    - page_size (Optional): Number of items per page

    **Example Response**

    .. code-block:: json

        {
            "count": 1,
            "next": null,
            "previous": null,
            "location_filter": {"location_id": "4", "read_only": true},
            "results": [{"id": 1, "location": 4, "product_name": "Acetone", "...": "..."}]
        }
    """

    pagination_class = SiteRegisterPagination
    permission_classes = [RoutePermission]

    @apidocs.schema(
        parameters=[
            apidocs.query_parameter("location", str, description="The location to list site registers for"),
            apidocs.query_parameter("search", str, description="The search query to filter products by"),
            apidocs.query_parameter("page", int, description="Page number for pagination"),
            apidocs.query_parameter("page_size", int, description="Number of items per page"),
        ],
        responses={
            status.HTTP_200_OK: "The site registers were retrieved successfully",
            status.HTTP_400_BAD_REQUEST: "The request parameters are invalid",
            status.HTTP_403_FORBIDDEN: "The session may not access site registers",
        },
    )
    @route_permission(route_constants.SITE_REGISTERS.prefix)
    def get(self, request: HttpRequest) -> Response:
        """Retrieve the site registers visible to the session."""
        serializer = ListSiteRegistersSerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        query_params = serializer.validated_data

        identity = api.get_request_identity(request)
        location_filter = api.scope_location_filter(
            identity.role,
            identity.location_id,
            api.LocationFilterData(location_id=query_params["location"]),
        )

        queryset = SiteRegister.objects.select_related("location")
        queryset = api.scope_queryset_by_location(queryset, location_filter)
        queryset = search_site_registers(queryset, query_params["search"])

        paginator = self.pagination_class()
        page = paginator.paginate_queryset(queryset, request, view=self)
        response = paginator.get_paginated_response(SiteRegisterSerializer(page, many=True).data)
        response.data["location_filter"] = LocationFilterSerializer(location_filter).data
        return response


@view_auth_classes()
class SiteRegisterDetailView(APIView):
    """
    API view for a single site register.

    **Endpoints**

    - GET: Retrieve the site register
    - PATCH: Update the site register. Moving it to a location outside the
      session's scope is rejected.

    **Authentication and Permissions**

    - Requires access to the ``/site-registers`` route.
    - Rows of another location are denied to roles pinned to their own location.
    """

    permission_classes = [RoutePermission]

    def get_object(self, request: HttpRequest, pk: int) -> SiteRegister:
        site_register = get_object_or_404(SiteRegister.objects.select_related("location"), pk=pk)
        self.check_object_permissions(request, site_register)
        return site_register

    @apidocs.schema(
        parameters=[apidocs.path_parameter("pk", int, description="The site register identifier")],
        responses={
            status.HTTP_200_OK: SiteRegisterSerializer,
            status.HTTP_403_FORBIDDEN: "The session may not access this site register",
            status.HTTP_404_NOT_FOUND: "The site register does not exist",
        },
    )
    @route_permission(route_constants.SITE_REGISTERS.prefix)
    def get(self, request: HttpRequest, pk: int) -> Response:
        """Retrieve a site register."""
        site_register = self.get_object(request, pk)
        return Response(SiteRegisterSerializer(site_register).data, status=status.HTTP_200_OK)

    @apidocs.schema(
        parameters=[apidocs.path_parameter("pk", int, description="The site register identifier")],
        body=SiteRegisterSerializer,
        responses={
            status.HTTP_200_OK: SiteRegisterSerializer,
            status.HTTP_400_BAD_REQUEST: "The request data is invalid",
            status.HTTP_403_FORBIDDEN: "The session may not edit this site register or move it there",
            status.HTTP_404_NOT_FOUND: "The site register does not exist",
        },
    )
    @route_permission(route_constants.SITE_REGISTERS.prefix)
    def patch(self, request: HttpRequest, pk: int) -> Response:
        """Update a site register."""
        site_register = self.get_object(request, pk)
        serializer = SiteRegisterSerializer(site_register, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        target_location = serializer.validated_data.get("location")
        if target_location is not None:
            identity = api.get_request_identity(request)
            if not api.is_location_in_scope(identity.role, identity.location_id, target_location.pk):
                logger.warning(
                    f"Rejected move of site register {pk} to location {target_location.pk} by {identity.email}"
                )
                self.permission_denied(request, message=route_constants.ACCESS_DENIED_MESSAGE)

        serializer.save()
        return Response(serializer.data, status=status.HTTP_200_OK)
