"""Admin configuration for hazchem_authz."""

from django.contrib import admin

from hazchem_authz.models import Location, Role, SiteRegister, UserProfile, UserRoleAssignment


class UserRoleAssignmentInline(admin.TabularInline):
    """Inline admin listing the roles assigned to a user."""

    model = UserRoleAssignment
    fk_name = "user"
    extra = 0
    fields = ("role", "created_at")
    readonly_fields = ("created_at",)


@admin.register(Location)
class LocationAdmin(admin.ModelAdmin):
    """Admin for the location hierarchy."""

    list_display = ("id", "name", "full_path", "location_type", "status")
    search_fields = ("name", "full_path")
    list_filter = ("location_type", "status")
    readonly_fields = ("full_path", "created_at", "updated_at")


@admin.register(Role)
class RoleAdmin(admin.ModelAdmin):
    list_display = ("id", "role_name", "created_at")
    search_fields = ("role_name",)


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    """Admin for user profiles, with the roles of the profile's user."""

    list_display = ("id", "user", "location", "manager", "last_login_date")
    search_fields = ("user__email", "user__username", "location__name")
    raw_id_fields = ("user", "manager")
    readonly_fields = ("last_login_date",)


@admin.register(UserRoleAssignment)
class UserRoleAssignmentAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "role", "created_at")
    search_fields = ("user__email", "role__role_name")
    list_filter = ("role",)
    raw_id_fields = ("user",)


@admin.register(SiteRegister)
class SiteRegisterAdmin(admin.ModelAdmin):
    """Admin for site registers."""

    list_display = ("id", "product_name", "override_product_name", "location", "current_stock_level", "updated_at")
    search_fields = ("product_name", "override_product_name", "location__name")
    list_filter = ("placarding_required", "manifest_required", "fire_protection_required")
    raw_id_fields = ("location",)
