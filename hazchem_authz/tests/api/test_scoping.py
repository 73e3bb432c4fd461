"""Test the row-scoping rules of location-scoped screens."""

from ddt import data, ddt, unpack
from django.test import TestCase

from hazchem_authz import api
from hazchem_authz.api.data import LocationFilterData
from hazchem_authz.models import Location, SiteRegister

RESTRICTED_ROLES = ["standard", "manager", "auditor", None]
UNRESTRICTED_ROLES = ["administrator", "poweruser", "Administrator"]


@ddt
class TestScopeLocationFilter(TestCase):
    """Test the location filter each role ends up with."""

    @data(*RESTRICTED_ROLES)
    def test_restricted_roles_are_pinned(self, role):
        """Test that restricted roles get their own location whatever filter was requested.

        Expected Result:
            - The filter is pinned to the assigned location and read-only
        """
        for requested in (None, LocationFilterData(), LocationFilterData(location_id="9"), LocationFilterData("7")):
            result = api.scope_location_filter(role, "7", requested)

            self.assertEqual(result, LocationFilterData(location_id="7", read_only=True))

    def test_restricted_role_without_location_is_pinned_to_nothing(self):
        """Test that a restricted role with no assigned location gets a pinned empty filter."""
        result = api.scope_location_filter("manager", None, LocationFilterData(location_id="9"))

        self.assertEqual(result, LocationFilterData(location_id=None, read_only=True))

    @data(*UNRESTRICTED_ROLES)
    def test_unrestricted_roles_keep_requested_filter(self, role):
        """Test that administrators and power users get the requested filter unchanged."""
        requested = LocationFilterData(location_id="9")

        self.assertIs(api.scope_location_filter(role, "7", requested), requested)
        self.assertIsNone(api.scope_location_filter(role, "7", None))

    @data(
        ("administrator", "7", "9", True),
        ("poweruser", None, "9", True),
        ("manager", "7", "7", True),
        ("manager", "7", 7, True),
        ("manager", "7", "9", False),
        ("standard", None, "9", False),
        ("standard", "7", None, False),
        (None, "7", "7", False),
        ("", "7", "7", False),
        ("  ", "7", "7", False),
    )
    @unpack
    def test_is_location_in_scope(self, role, location_id, target_location_id, expected):
        """Test which rows a role may view or edit."""
        self.assertEqual(api.is_location_in_scope(role, location_id, target_location_id), expected)


class TestScopeQuerysetByLocation(TestCase):
    """Test applying a location filter to site register rows."""

    @classmethod
    def setUpTestData(cls):
        super().setUpTestData()
        cls.hillside = Location.objects.create(name="Hillside School")
        cls.riverside = Location.objects.create(name="Riverside School")
        cls.acetone = SiteRegister.objects.create(location=cls.hillside, product_name="Acetone")
        cls.bleach = SiteRegister.objects.create(location=cls.riverside, product_name="Bleach")

    def test_filter_by_location(self):
        """Test that only rows of the filtered location are returned."""
        location_filter = LocationFilterData(location_id=self.hillside.pk, read_only=True)

        queryset = api.scope_queryset_by_location(SiteRegister.objects.all(), location_filter)

        self.assertEqual(list(queryset), [self.acetone])

    def test_no_filter_returns_every_row(self):
        """Test that an unpinned empty filter leaves the rows untouched."""
        queryset = api.scope_queryset_by_location(SiteRegister.objects.all(), LocationFilterData())

        self.assertEqual(set(queryset), {self.acetone, self.bleach})

    def test_unrestricted_role_without_requested_filter_returns_every_row(self):
        """Test that an administrator who requested no filter gets every row."""
        location_filter = api.scope_location_filter("administrator", self.hillside.pk, None)

        queryset = api.scope_queryset_by_location(SiteRegister.objects.all(), location_filter)

        self.assertEqual(set(queryset), {self.acetone, self.bleach})

    def test_pinned_empty_filter_returns_no_rows(self):
        """Test that a pinned filter without a location fails closed."""
        location_filter = api.scope_location_filter("standard", None)

        queryset = api.scope_queryset_by_location(SiteRegister.objects.all(), location_filter)

        self.assertFalse(queryset.exists())
