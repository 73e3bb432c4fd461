"""
Authorization and data-visibility core for the hazardous chemicals compliance application.
"""

import os

__version__ = "0.1.0"

ROOT_DIRECTORY = os.path.dirname(os.path.abspath(__file__))
