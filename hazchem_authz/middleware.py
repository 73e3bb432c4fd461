"""Middleware attaching the resolved identity to each request."""

from django.utils.functional import SimpleLazyObject

from hazchem_authz.api.session import get_request_identity


class IdentityMiddleware:
    """Expose the session identity as ``request.authz_identity``.

    The identity is resolved lazily, on first access, and at most once per
    request. Must be placed after ``SessionMiddleware``.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.authz_identity = SimpleLazyObject(lambda: get_request_identity(request))
        return self.get_response(request)
