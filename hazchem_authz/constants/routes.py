"""
Route prefixes, navigation menus and features of the compliance application.

Which roles may reach each route is defined in ``engine/config/routes.policy``.
"""

from hazchem_authz.api.data import FeatureData, NavigationItemData, RouteData

# Routes available to every authenticated role

DASHBOARD = RouteData(external_key="/dashboard")
SITE_REGISTERS = RouteData(external_key="/site-registers")
RISK_ASSESSMENTS = RouteData(external_key="/risk-assessments")
WASTE_TRACKING = RouteData(external_key="/waste-tracking")

# Routes available to managers and above

COMPLIANCE = RouteData(external_key="/compliance")
SDS_LIBRARY = RouteData(external_key="/sds-library")
PRODUCTS = RouteData(external_key="/products")
SUPPLIERS = RouteData(external_key="/suppliers")

# Routes available to administrators only

LOCATIONS = RouteData(external_key="/locations")
USERS = RouteData(external_key="/users")
MASTER_DATA = RouteData(external_key="/master-data")
SYSTEM_CONFIG = RouteData(external_key="/system-config")

PROTECTED_ROUTES = [
    DASHBOARD,
    SITE_REGISTERS,
    RISK_ASSESSMENTS,
    WASTE_TRACKING,
    COMPLIANCE,
    SDS_LIBRARY,
    PRODUCTS,
    SUPPLIERS,
    LOCATIONS,
    USERS,
    MASTER_DATA,
    SYSTEM_CONFIG,
]

# Features granted inside a screen, on top of the route itself

MANAGE_GHS_HAZARDS = FeatureData(external_key="ghs_hazards.manage")
MANAGE_SDS_LIBRARY = FeatureData(external_key="sds_library.manage")

# Sidebar menus

MAIN_MENU = "main"
ADMINISTRATION_MENU = "administration"
CONFIGURATION_MENU = "configuration"

NAVIGATION_ITEMS = [
    NavigationItemData(label="Home", path=DASHBOARD.prefix, group=MAIN_MENU),
    NavigationItemData(label="Site Registers", path=SITE_REGISTERS.prefix, group=MAIN_MENU),
    NavigationItemData(label="Risk Assessments", path=RISK_ASSESSMENTS.prefix, group=MAIN_MENU),
    NavigationItemData(label="Waste Tracking", path=WASTE_TRACKING.prefix, group=MAIN_MENU),
    NavigationItemData(label="Compliance Dashboard", path=COMPLIANCE.prefix, group=MAIN_MENU),
    NavigationItemData(label="SDS Library", path=SDS_LIBRARY.prefix, group=ADMINISTRATION_MENU),
    NavigationItemData(label="Products", path=PRODUCTS.prefix, group=ADMINISTRATION_MENU),
    NavigationItemData(label="Suppliers", path=SUPPLIERS.prefix, group=ADMINISTRATION_MENU),
    NavigationItemData(label="Locations", path=LOCATIONS.prefix, group=CONFIGURATION_MENU),
    NavigationItemData(label="Users & Roles", path=USERS.prefix, group=CONFIGURATION_MENU),
    NavigationItemData(label="Master Data", path=MASTER_DATA.prefix, group=CONFIGURATION_MENU),
    NavigationItemData(label="System Config", path=SYSTEM_CONFIG.prefix, group=CONFIGURATION_MENU),
]

ACCESS_DENIED_MESSAGE = "You do not have access to this option. Contact your Administrator."
