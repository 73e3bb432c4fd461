"""Pagination classes for the compliance AuthZ REST API."""

from rest_framework.pagination import PageNumberPagination


class SiteRegisterPagination(PageNumberPagination):
    """Page-number pagination for site register lists.

    Clients may ask for up to ``max_page_size`` rows per page with ``page_size``.
    """

    page_size = 10
    page_size_query_param = "page_size"
    max_page_size = 100
