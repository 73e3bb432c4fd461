"""Utility functions for the compliance AuthZ REST API."""

from django.contrib.auth import get_user_model
from django.db.models import Q, QuerySet

from hazchem_authz.rest_api.data import SiteRegisterSearchField

User = get_user_model()


def get_user_by_email(email: str) -> User:
    """
    Retrieve an active or inactive user by email address, case-insensitively.

    Args:
        email (str): The email address to search for.

    Returns:
        User: The first matching user.

    Raises:
        User.DoesNotExist: If no user has the email address.
    """
    user = User.objects.filter(email__iexact=email.strip()).order_by("id").first()
    if user is None:
        raise User.DoesNotExist
    return user


def search_site_registers(queryset: QuerySet, search: str | None) -> QuerySet:
    """
    Filter site registers by a case-insensitive search on the product names.

    Args:
        queryset (QuerySet): The site registers to filter.
        search (str | None): Optional search term matched against fields in ``SiteRegisterSearchField``.

    Returns:
        QuerySet: The matching site registers.
    """
    if not search:
        return queryset

    condition = Q()
    for field in SiteRegisterSearchField.values():
        condition |= Q(**{f"{field}__icontains": search})
    return queryset.filter(condition)
