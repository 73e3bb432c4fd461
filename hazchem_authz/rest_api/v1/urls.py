"""Compliance AuthZ API v1 URLs."""

from django.urls import path

from hazchem_authz.rest_api.v1 import views

urlpatterns = [
    path("session/login", views.LoginView.as_view(), name="login"),
    path("session/logout", views.LogoutView.as_view(), name="logout"),
    path("identity/me", views.IdentityMeView.as_view(), name="identity-me"),
    path("routes/validate/me", views.RouteValidationMeView.as_view(), name="route-validation-me"),
    path("navigation/me", views.NavigationMeView.as_view(), name="navigation-me"),
    path("site-registers/", views.SiteRegisterListView.as_view(), name="site-register-list"),
    path("site-registers/<int:pk>/", views.SiteRegisterDetailView.as_view(), name="site-register-detail"),
]
