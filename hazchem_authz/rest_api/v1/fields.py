"""Fields serializer for the compliance AuthZ REST API."""

from rest_framework import serializers


class LowercaseCharField(serializers.CharField):
    """Serializer for a lowercase string."""

    def to_internal_value(self, data):
        """Convert string to lowercase"""
        return super().to_internal_value(data).strip().lower()

    def to_representation(self, value):
        """Convert string to lowercase"""
        return value.strip().lower()
