"""Session lifecycle of the identity marker.

The marker is set at login, cleared at logout and read back on every request.
It is kept in the Django session under the ``HAZCHEM_AUTHZ_SESSION_KEY``
setting.
"""

import logging
from typing import Optional

from django.conf import settings
from django.http import HttpRequest

from hazchem_authz.api.data import IdentityData
from hazchem_authz.api.identity import resolve_identity

__all__ = [
    "end_session",
    "get_request_identity",
    "get_session_marker",
    "start_session",
]

logger = logging.getLogger(__name__)

DEFAULT_SESSION_KEY = "hazchem_authz_marker"
REQUEST_IDENTITY_CACHE_ATTR = "_hazchem_authz_identity"


def get_session_key() -> str:
    return getattr(settings, "HAZCHEM_AUTHZ_SESSION_KEY", DEFAULT_SESSION_KEY)


def _get_http_request(request) -> HttpRequest:
    # DRF requests wrap the Django request the middleware caches on.
    return getattr(request, "_request", request)


def _clear_cached_identity(request) -> None:
    _get_http_request(request).__dict__.pop(REQUEST_IDENTITY_CACHE_ATTR, None)


def start_session(request: HttpRequest, email: str) -> None:
    """Store the identity marker of a user who just logged in.

    Args:
        request: The current request, with a session.
        email: The email of the authenticated user.
    """
    request.session[get_session_key()] = email
    _clear_cached_identity(request)


def end_session(request: HttpRequest) -> None:
    """Clear the identity marker and the rest of the session at logout."""
    request.session.flush()
    _clear_cached_identity(request)


def get_session_marker(request: HttpRequest) -> Optional[str]:
    """Read the identity marker of the current session, if any."""
    session = getattr(request, "session", None)
    if session is None:
        return None
    return session.get(get_session_key())


def get_request_identity(request: HttpRequest) -> IdentityData:
    """Resolve the identity of the current request, at most once per request.

    Args:
        request: The current request.

    Returns:
        IdentityData: The resolved identity; anonymous without a marker.
    """
    http_request = _get_http_request(request)
    identity = http_request.__dict__.get(REQUEST_IDENTITY_CACHE_ATTR)
    if identity is None:
        identity = resolve_identity(get_session_marker(http_request))
        http_request.__dict__[REQUEST_IDENTITY_CACHE_ATTR] = identity
    return identity
