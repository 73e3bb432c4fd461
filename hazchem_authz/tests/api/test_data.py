"""Test data classes of the compliance AuthZ API."""

from ddt import data, ddt, unpack
from django.test import TestCase

from hazchem_authz.api.data import (
    ANONYMOUS_IDENTITY,
    FeatureData,
    IdentityData,
    LocationFilterData,
    PermissionState,
    RoleData,
    RouteData,
    RoutePermissionData,
)
from hazchem_authz.tests.test_utils import make_feature_key, make_role_key, make_route_key


@ddt
class TestNamespacedData(TestCase):
    """Test the namespaced keys of roles, routes and features."""

    @data(
        ("standard", "standard"),
        ("Administrator", "administrator"),
        ("  PowerUser ", "poweruser"),
    )
    @unpack
    def test_role_data_namespace(self, external_key, expected_name):
        """Test that RoleData lower-cases and namespaces role names.

        Expected Result:
            - 'Administrator' becomes 'role^administrator'
        """
        role = RoleData(external_key=external_key)

        self.assertEqual(role.external_key, expected_name)
        self.assertEqual(role.namespaced_key, make_role_key(expected_name))

    def test_role_data_from_namespaced_key(self):
        """Test that the external key is derived from the namespaced key."""
        role = RoleData(namespaced_key="role^manager")

        self.assertEqual(role.external_key, "manager")
        self.assertEqual(role.name, "Manager")

    def test_role_data_equality_is_case_insensitive(self):
        """Test that roles compare equal whatever the case of their name."""
        self.assertEqual(RoleData(external_key="MANAGER"), RoleData(external_key="manager"))
        self.assertEqual(len({RoleData(external_key="Manager"), RoleData(external_key="manager")}), 1)
        self.assertNotEqual(RoleData(external_key="manager"), "manager")

    @data(
        ("/users", "/users"),
        ("/sds-library/edit/123", "/sds-library"),
        ("/site-registers/?page=2", "/site-registers"),
        ("/compliance#summary", "/compliance"),
        ("products/new", "/products"),
        ("/", "/"),
        ("", "/"),
        (None, "/"),
    )
    @unpack
    def test_route_data_from_path(self, path, expected_prefix):
        """Test that only the first path segment forms the route.

        Expected Result:
            - '/sds-library/edit/123' becomes '/sds-library'
            - an empty path becomes '/'
        """
        route = RouteData.from_path(path)

        self.assertEqual(route.prefix, expected_prefix)
        self.assertEqual(route.namespaced_key, make_route_key(expected_prefix))

    def test_feature_data_namespace(self):
        """Test that FeatureData namespaces feature identifiers."""
        feature = FeatureData(external_key="ghs_hazards.manage")

        self.assertEqual(feature.namespaced_key, make_feature_key("ghs_hazards.manage"))
        self.assertEqual(str(feature), "ghs_hazards.manage")
        self.assertEqual(repr(feature), "feature^ghs_hazards.manage")

    @data(
        {},
        {"external_key": ""},
        {"namespaced_key": "no-separator"},
        {"namespaced_key": "route^/users"},
    )
    def test_invalid_keys_raise_value_error(self, kwargs):
        """Test that missing, malformed or wrongly namespaced keys are rejected.

        Expected Result:
            - ValueError is raised
        """
        with self.assertRaises(ValueError):
            RoleData(**kwargs)


@ddt
class TestValueObjects(TestCase):
    """Test identity, permission outcome and filter value objects."""

    def test_anonymous_identity(self):
        """Test that the anonymous identity has no role and no location."""
        self.assertTrue(ANONYMOUS_IDENTITY.is_anonymous)
        self.assertEqual(
            ANONYMOUS_IDENTITY.as_dict(),
            {"role": None, "location_id": None, "is_loading": False},
        )

    def test_identity_as_dict(self):
        """Test that only role, location and loading flag are exposed."""
        identity = IdentityData(role="manager", location_id="4", email="jane@example.com", user_id="1")

        self.assertFalse(identity.is_anonymous)
        self.assertEqual(identity.as_dict(), {"role": "manager", "location_id": "4", "is_loading": False})

    @data(
        (False, False, PermissionState.DENIED),
        (True, False, PermissionState.ALLOWED),
        (False, True, PermissionState.UNKNOWN),
    )
    @unpack
    def test_route_permission_state(self, has_permission, is_loading, expected_state):
        """Test that a loading outcome is never reported as a decision."""
        result = RoutePermissionData(path="/users", has_permission=has_permission, is_loading=is_loading)

        self.assertEqual(result.state, expected_state)

    @data(
        (None, None),
        ("", None),
        (7, "7"),
        ("12", "12"),
    )
    @unpack
    def test_location_filter_location_id(self, location_id, expected):
        """Test that location identifiers are stored as strings and blanks as None."""
        self.assertEqual(LocationFilterData(location_id=location_id).location_id, expected)
