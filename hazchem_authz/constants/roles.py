"""
Default roles of the compliance application.
"""

from hazchem_authz.api.data import RoleData

STANDARD = RoleData(external_key="standard")
MANAGER = RoleData(external_key="manager")
POWERUSER = RoleData(external_key="poweruser")
ADMINISTRATOR = RoleData(external_key="administrator")

ALL_ROLES = [STANDARD, MANAGER, POWERUSER, ADMINISTRATOR]

# Highest privilege first. Used to pick the effective role of a user holding
# several role assignments.
ROLE_PRECEDENCE = [ADMINISTRATOR, POWERUSER, MANAGER, STANDARD]

# Roles that see every location and may change the location filter freely.
UNRESTRICTED_LOCATION_ROLES = frozenset([ADMINISTRATOR.external_key, POWERUSER.external_key])
