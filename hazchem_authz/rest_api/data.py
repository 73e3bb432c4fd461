"""Data classes and enums for the compliance AuthZ REST API."""

from enum import Enum


class BaseEnum(str, Enum):
    """Base enum class."""

    @classmethod
    def values(cls):
        """List the values of the enum."""
        return [e.value for e in cls]


class SiteRegisterSearchField(BaseEnum):
    """Enum for the site register fields matched by the text search."""

    PRODUCT_NAME = "product_name"
    OVERRIDE_PRODUCT_NAME = "override_product_name"


class SessionError(BaseEnum):
    """Enum for errors that can occur during login."""

    INVALID_CREDENTIALS = "invalid_credentials"
    INACTIVE_USER = "inactive_user"
