"""Serializers for the compliance AuthZ REST API."""

from rest_framework import serializers

from hazchem_authz.models import Location, SiteRegister
from hazchem_authz.rest_api.v1.fields import LowercaseCharField


class LoginSerializer(serializers.Serializer):  # pylint: disable=abstract-method
    """Serializer for the login request."""

    email = LowercaseCharField(max_length=254)
    password = serializers.CharField(max_length=128, trim_whitespace=False, write_only=True)


class IdentitySerializer(serializers.Serializer):  # pylint: disable=abstract-method
    """Serializer for the resolved identity of the session."""

    role = serializers.CharField(allow_null=True)
    location_id = serializers.CharField(allow_null=True)
    is_loading = serializers.BooleanField()
    email = serializers.EmailField(allow_null=True)


class RouteValidationSerializer(serializers.Serializer):  # pylint: disable=abstract-method
    """Serializer for a route validation request."""

    path = serializers.CharField(max_length=2048)


class RouteValidationResponseSerializer(RouteValidationSerializer):  # pylint: disable=abstract-method
    """Serializer for a route validation response."""

    has_permission = serializers.BooleanField()
    is_loading = serializers.BooleanField()


class NavigationItemSerializer(serializers.Serializer):  # pylint: disable=abstract-method
    """Serializer for a sidebar entry."""

    label = serializers.CharField()
    path = serializers.CharField()
    group = serializers.CharField()


class NavigationResponseSerializer(serializers.Serializer):  # pylint: disable=abstract-method
    """Serializer for the navigation of the session."""

    dashboard = serializers.CharField(allow_null=True)
    items = NavigationItemSerializer(many=True)
    features = serializers.DictField(child=serializers.BooleanField())


class ListSiteRegistersSerializer(serializers.Serializer):  # pylint: disable=abstract-method
    """Serializer for the site register list query parameters."""

    location = serializers.IntegerField(required=False, allow_null=True, min_value=1, default=None)
    search = LowercaseCharField(required=False, allow_blank=True, default=None)


class LocationFilterSerializer(serializers.Serializer):  # pylint: disable=abstract-method
    """Serializer for the location filter applied to a list."""

    location_id = serializers.CharField(allow_null=True)
    read_only = serializers.BooleanField()


class SiteRegisterSerializer(serializers.ModelSerializer):
    """Serializer for a site register row."""

    location = serializers.PrimaryKeyRelatedField(queryset=Location.objects.all())
    location_name = serializers.CharField(source="location.name", read_only=True)
    location_full_path = serializers.CharField(source="location.full_path", read_only=True)
    display_name = serializers.CharField(read_only=True)

    class Meta:
        model = SiteRegister
        fields = [
            "id",
            "location",
            "location_name",
            "location_full_path",
            "product_name",
            "override_product_name",
            "display_name",
            "exact_location",
            "storage_conditions",
            "current_stock_level",
            "max_stock_level",
            "placarding_required",
            "manifest_required",
            "fire_protection_required",
            "updated_at",
        ]
        read_only_fields = ["id", "updated_at"]

    def validate(self, attrs) -> dict:
        """Validate that the stock level does not exceed the maximum stock level."""
        validated_data = super().validate(attrs)
        current = validated_data.get("current_stock_level", getattr(self.instance, "current_stock_level", None))
        maximum = validated_data.get("max_stock_level", getattr(self.instance, "max_stock_level", None))
        if current is not None and maximum is not None and current > maximum:
            raise serializers.ValidationError("current_stock_level cannot exceed max_stock_level")
        return validated_data
