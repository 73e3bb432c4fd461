"""
Django management command for inspecting route access.

This command has two operational modes:

1. **Table mode (default)**: Prints the route permission table, one route per
   line with the roles allowed to reach it.

2. **Identity mode**: Activated when --email is provided. Resolves the identity
   of the user as a session carrying that email would, then prints the decision
   for each given path.

Example usage:
    python manage.py route_access
    python manage.py route_access --email jane@example.com /users /site-registers/edit/3

Example output:
    Identity: role=manager location_id=4
    ✗ DENIED: /users
    ✓ ALLOWED: /site-registers/edit/3
"""

import argparse

from django.core.management.base import BaseCommand, CommandError

from hazchem_authz import api
from hazchem_authz.constants import routes as route_constants


class Command(BaseCommand):
    """
    Django management command for inspecting the route permission table.

    Without ``--email`` the whole table is printed. With ``--email`` the
    identity of the user is resolved and each path is checked against it.
    Without paths, every protected route is checked.
    """

    help = (
        "Print the route permission table, or the identity of a user and the "
        "access decision for each given path when --email is provided."
    )

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """Add command-line arguments to the argument parser.

        Args:
            parser (argparse.ArgumentParser): The Django argument parser instance to configure.
        """
        parser.add_argument(
            "paths",
            nargs="*",
            help="Paths to check (e.g., /users /site-registers/edit/3). Defaults to every protected route.",
        )
        parser.add_argument(
            "-e",
            "--email",
            type=str,
            default=None,
            help="Email of the user whose access is checked, as stored in the session at login.",
        )

    def handle(self, *args, **options):
        """Execute the route access command.

        Args:
            *args: Positional command arguments (unused).
            **options: Command options including ``paths`` and ``--email``.

        Raises:
            CommandError: If the route permission table cannot be loaded.
        """
        try:
            if options["email"] is None:
                self._display_route_table()
            else:
                self._display_identity_access(options["email"], options["paths"])
        except FileNotFoundError as e:
            raise CommandError(f"Error loading route permission table: {str(e)}") from e

    def _display_route_table(self) -> None:
        table = api.get_route_table()

        self.stdout.write(self.style.SUCCESS("Route Permission Table"))
        self.stdout.write(f"✓ Loaded {len(table)} protected routes")
        self.stdout.write("")

        for prefix in sorted(table):
            self.stdout.write(f"{prefix}: {', '.join(sorted(table[prefix]))}")

    def _display_identity_access(self, email: str, paths: list[str]) -> None:
        """Display the resolved identity of a user and the decision for each path.

        Args:
            email (str): The session marker of the user.
            paths (list[str]): The paths to check.
        """
        identity = api.resolve_identity(email)
        if identity.is_anonymous:
            self.stdout.write(self.style.WARNING(f"No role resolved for {email}; checking as anonymous"))
        self.stdout.write(f"Identity: role={identity.role} location_id={identity.location_id}")
        self.stdout.write("")

        for path in paths or [route.prefix for route in route_constants.PROTECTED_ROUTES]:
            decision = api.check_route_permission(path, identity.role)
            if decision.has_permission:
                self.stdout.write(self.style.SUCCESS(f"✓ ALLOWED: {path}"))
            else:
                self.stdout.write(self.style.ERROR(f"✗ DENIED: {path}"))
