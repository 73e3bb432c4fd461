"""Test the identity resolver of the compliance AuthZ API."""

from unittest.mock import patch

from ddt import data, ddt, unpack
from django.test import TestCase

from hazchem_authz import api
from hazchem_authz.api import identity as identity_api
from hazchem_authz.api.data import ANONYMOUS_IDENTITY, RoleData
from hazchem_authz.models import Location
from hazchem_authz.tests.test_utils import create_compliance_user


class BaseIdentityTestCase(TestCase):
    """Base test case with locations and one user per role.

    Users:
        - admin@example.com: administrator, Region North
        - power@example.com: poweruser, no location
        - manager@example.com: manager, Hillside School
        - standard@example.com: standard, Riverside School
    """

    @classmethod
    def setUpTestData(cls):
        """Set up locations and users once for the entire test class."""
        super().setUpTestData()
        cls.region = Location.objects.create(name="North", location_type=Location.LocationType.REGION)
        cls.hillside = Location.objects.create(
            name="Hillside School", parent=cls.region, location_type=Location.LocationType.SCHOOL
        )
        cls.riverside = Location.objects.create(
            name="Riverside School", parent=cls.region, location_type=Location.LocationType.SCHOOL
        )

        cls.admin_user = create_compliance_user("admin@example.com", ["administrator"], cls.region)
        cls.power_user = create_compliance_user("power@example.com", ["poweruser"])
        cls.manager_user = create_compliance_user("manager@example.com", ["manager"], cls.hillside)
        cls.standard_user = create_compliance_user("standard@example.com", ["standard"], cls.riverside)


@ddt
class TestSelectEffectiveRole(TestCase):
    """Test the precedence rule applied to users holding several roles."""

    @data(
        (["standard"], "standard"),
        (["Standard", "Administrator"], "administrator"),
        (["manager", "poweruser"], "poweruser"),
        (["standard", "manager"], "manager"),
        (["auditor", "standard"], "standard"),
        (["auditor", "viewer"], "auditor"),
        (["", "  ", "manager"], "manager"),
        ([], None),
    )
    @unpack
    def test_select_effective_role(self, role_names, expected_role):
        """Test that the most privileged known role wins.

        Expected Result:
            - administrator > poweruser > manager > standard
            - unknown roles only win when no known role is held, in assignment order
        """
        self.assertEqual(api.select_effective_role(role_names), expected_role)

    def test_unknown_roles_rank_last(self):
        """Test that unknown roles rank after every known role."""
        self.assertGreater(
            api.get_role_rank(RoleData(external_key="auditor")),
            api.get_role_rank(RoleData(external_key="standard")),
        )


@ddt
class TestResolveIdentity(BaseIdentityTestCase):
    """Test resolving the session marker into role and location."""

    @data(None, "", "   ")
    def test_missing_marker_is_anonymous(self, marker):
        """Test that an absent marker resolves to the anonymous identity without any lookup.

        Expected Result:
            - role and location_id are None
        """
        with patch.object(identity_api, "_get_user_for_marker") as mock_lookup:
            identity = api.resolve_identity(marker)

        self.assertEqual(identity, ANONYMOUS_IDENTITY)
        mock_lookup.assert_not_called()

    def test_unknown_marker_is_anonymous(self):
        """Test that a marker matching no user resolves to the anonymous identity."""
        identity = api.resolve_identity("nobody@example.com")

        self.assertIsNone(identity.role)
        self.assertIsNone(identity.location_id)

    @data(
        ("manager@example.com", "manager", "hillside"),
        ("MANAGER@Example.com", "manager", "hillside"),
        ("standard@example.com", "standard", "riverside"),
        ("admin@example.com", "administrator", "region"),
    )
    @unpack
    def test_resolve_role_and_location(self, marker, expected_role, location_attr):
        """Test that the role and the location of the profile are resolved.

        Expected Result:
            - email lookups are case-insensitive
            - location_id is the string identifier of the profile location
        """
        identity = api.resolve_identity(marker)

        self.assertEqual(identity.role, expected_role)
        self.assertEqual(identity.location_id, str(getattr(self, location_attr).pk))
        self.assertFalse(identity.is_loading)

    def test_user_without_location(self):
        """Test that a user without an assigned location resolves with location_id None."""
        identity = api.resolve_identity("power@example.com")

        self.assertEqual(identity.role, "poweruser")
        self.assertIsNone(identity.location_id)

    def test_user_without_profile(self):
        """Test that a user without a compliance profile still resolves its role."""
        create_compliance_user("noprofile@example.com", ["manager"], with_profile=False)

        identity = api.resolve_identity("noprofile@example.com")

        self.assertEqual(identity.role, "manager")
        self.assertIsNone(identity.location_id)

    def test_inactive_user_is_anonymous(self):
        """Test that a deactivated user resolves to the anonymous identity.

        Expected Result:
            - role and location_id are None even though the user holds roles
        """
        self.admin_user.is_active = False
        self.admin_user.save()

        identity = api.resolve_identity("admin@example.com")

        self.assertEqual(identity, ANONYMOUS_IDENTITY)

    def test_user_without_roles(self):
        """Test that a user without role assignments has no role."""
        create_compliance_user("norole@example.com", location=self.hillside)

        identity = api.resolve_identity("norole@example.com")

        self.assertIsNone(identity.role)
        self.assertEqual(identity.location_id, str(self.hillside.pk))

    def test_multiple_roles_resolve_to_highest_privilege(self):
        """Test that a user holding several roles resolves to the most privileged one."""
        create_compliance_user("multi@example.com", ["standard", "manager"], self.hillside)

        identity = api.resolve_identity("multi@example.com")

        self.assertEqual(identity.role, "manager")

    def test_lookup_failure_is_anonymous(self):
        """Test that a failing lookup degrades to the anonymous identity instead of raising.

        Expected Result:
            - The error is logged and role and location_id are None
        """
        with patch.object(identity_api, "_get_user_for_marker", side_effect=RuntimeError("database is down")):
            with self.assertLogs(identity_api.logger, level="ERROR"):
                identity = api.resolve_identity("manager@example.com")

        self.assertEqual(identity, ANONYMOUS_IDENTITY)
