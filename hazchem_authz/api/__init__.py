"""Public API for the compliance AuthZ core.

This module gathers the identity resolver, the route permission table and the
row-scoping rules behind a single import for views and other services.
"""

from hazchem_authz.api.data import *
from hazchem_authz.api.guard import *
from hazchem_authz.api.identity import *
from hazchem_authz.api.routes import *
from hazchem_authz.api.scoping import *
from hazchem_authz.api.session import *
