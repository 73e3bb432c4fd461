"""Roles, role assignments and the compliance profile of each user."""

from django.conf import settings
from django.db import models

__all__ = ["Role", "UserProfile", "UserRoleAssignment"]


class RoleManager(models.Manager):
    """Manager for Role with case-insensitive lookups."""

    def get_by_name(self, role_name: str) -> "Role":
        return self.get(role_name__iexact=role_name.strip())


class Role(models.Model):
    """A named permission tier (standard, manager, poweruser, administrator).

    .. no_pii:
    """

    role_name = models.CharField(max_length=64, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = RoleManager()

    class Meta:
        ordering = ["role_name"]

    def __str__(self):
        return self.role_name


class UserProfile(models.Model):
    """Compliance attributes of a user: assigned location and manager."""

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="compliance_profile",
    )
    location = models.ForeignKey(
        "hazchem_authz.Location",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="user_profiles",
    )
    manager = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="managed_profiles",
    )
    phone_number = models.CharField(max_length=32, blank=True, default="")
    last_login_date = models.DateTimeField(null=True, blank=True)

    def __str__(self):
        return f"Profile of {self.user}"


class UserRoleAssignment(models.Model):
    """Links a user to a role. A user may hold several assignments.

    .. no_pii:
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="role_assignments",
    )
    role = models.ForeignKey(Role, on_delete=models.CASCADE, related_name="assignments")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "id"]
        constraints = [
            models.UniqueConstraint(fields=["user", "role"], name="unique_user_role_assignment"),
        ]

    def __str__(self):
        return f"{self.user} => {self.role}"
