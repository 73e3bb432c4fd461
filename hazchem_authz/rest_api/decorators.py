"""Decorators for the compliance AuthZ REST API."""

from functools import wraps

from rest_framework.authentication import SessionAuthentication
from rest_framework.permissions import IsAuthenticated


def view_auth_classes(is_authenticated=True):
    """
    Class decorator that abstracts the authentication and permission checks for api views.

    Args:
        is_authenticated: Whether the view requires an authenticated Django user.

    Returns:
        The decorated view or class.

    Examples:
        >>> @view_auth_classes(is_authenticated=False)
        ... class MyView(APIView):
        ...     def get(self, request):
        ...         return Response("Hello, world!")
    """

    def _decorator(func_or_class):
        func_or_class.authentication_classes = [SessionAuthentication]
        if is_authenticated:
            func_or_class.permission_classes = [IsAuthenticated] + getattr(func_or_class, "permission_classes", [])
        return func_or_class

    return _decorator


def route_permission(route: str):
    """Decorator to attach the route a view method belongs to.

    The route is checked against the route permission table by ``RoutePermission``.

    Args:
        route: Path of the screen the method serves (e.g., "/site-registers").

    Examples:
        >>> class MyView(APIView):
        ...     @route_permission("/site-registers")
        ...     def get(self, request):
        ...         pass
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        wrapper.required_route = route
        return wrapper

    return decorator
