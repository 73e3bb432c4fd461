"""Compliance AuthZ URLs."""

from django.urls import include, path

from hazchem_authz.rest_api import urls

app_name = "hazchem_authz"

urlpatterns = [
    path("api/authz/", include((urls, "hazchem_authz"))),
]
