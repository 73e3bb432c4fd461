"""
Production settings for the hazchem_authz app.
"""


def plugin_settings(settings):  # pylint: disable=unused-argument
    """
    Configure production overrides of the app settings.

    Args:
        settings: The Django settings object
    """
