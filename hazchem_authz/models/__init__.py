"""Database models for the compliance authorization core.

Users, their role assignments and assigned locations drive authorization. The
location-scoped site registers are the rows the scoping rules apply to.
"""

from hazchem_authz.models.locations import *
from hazchem_authz.models.users import *
