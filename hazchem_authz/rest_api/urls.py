"""Compliance AuthZ API URLs."""

from django.urls import include, path

from hazchem_authz.rest_api.v1 import urls as v1_urls

urlpatterns = [
    path("v1/", include(v1_urls)),
]
