"""Test the compliance models."""

from django.db import IntegrityError
from django.test import TestCase

from hazchem_authz.models import Location, Role, SiteRegister, UserRoleAssignment
from hazchem_authz.tests.test_utils import create_compliance_user


class TestLocation(TestCase):
    """Test the location hierarchy."""

    def test_full_path(self):
        """Test that the full path joins the names of the ancestors."""
        region = Location.objects.create(name="North")
        district = Location.objects.create(name="District 4", parent=region, location_type=Location.LocationType.DISTRICT)
        school = Location.objects.create(name="Hillside", parent=district, location_type=Location.LocationType.SCHOOL)

        self.assertEqual(region.full_path, "North")
        self.assertEqual(school.full_path, "North > District 4 > Hillside")
        self.assertEqual(str(school), "North > District 4 > Hillside")
        self.assertEqual(list(region.children.all()), [district])

    def test_rename_updates_descendant_paths(self):
        """Test that renaming a location refreshes the full path of every location below it."""
        region = Location.objects.create(name="North")
        district = Location.objects.create(name="District 4", parent=region)
        school = Location.objects.create(name="Hillside", parent=district)

        region.name = "South"
        region.save()

        district.refresh_from_db()
        school.refresh_from_db()
        self.assertEqual(district.full_path, "South > District 4")
        self.assertEqual(school.full_path, "South > District 4 > Hillside")

    def test_reparent_updates_descendant_paths(self):
        """Test that moving a location under another parent refreshes its subtree."""
        north = Location.objects.create(name="North")
        south = Location.objects.create(name="South")
        district = Location.objects.create(name="District 4", parent=north)
        school = Location.objects.create(name="Hillside", parent=district)

        district.parent = south
        district.save()

        school.refresh_from_db()
        self.assertEqual(district.full_path, "South > District 4")
        self.assertEqual(school.full_path, "South > District 4 > Hillside")

    def test_site_register_shows_refreshed_path(self):
        """Test that a site register reports the refreshed path of its location."""
        region = Location.objects.create(name="North")
        school = Location.objects.create(name="Hillside", parent=region)
        register = SiteRegister.objects.create(location=school, product_name="Acetone")

        region.name = "South"
        region.save()

        register.refresh_from_db()
        self.assertEqual(register.location.full_path, "South > Hillside")


class TestSiteRegister(TestCase):
    """Test site register rows."""

    def test_display_name(self):
        """Test that the override product name takes precedence."""
        location = Location.objects.create(name="Hillside")
        register = SiteRegister.objects.create(location=location, product_name="Acetone")

        self.assertEqual(register.display_name, "Acetone")

        register.override_product_name = "Acetone 99%"
        self.assertEqual(register.display_name, "Acetone 99%")


class TestRoles(TestCase):
    """Test roles and role assignments."""

    def test_get_by_name_is_case_insensitive(self):
        """Test that roles are found whatever the case of their name."""
        role = Role.objects.create(role_name="administrator")

        self.assertEqual(Role.objects.get_by_name(" Administrator "), role)

    def test_duplicate_assignment_rejected(self):
        """Test that a user cannot hold the same role twice."""
        user = create_compliance_user("jane@example.com", ["manager"])

        with self.assertRaises(IntegrityError):
            UserRoleAssignment.objects.create(user=user, role=Role.objects.get(role_name="manager"))
