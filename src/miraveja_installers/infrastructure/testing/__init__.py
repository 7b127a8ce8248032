"""
Testing utilities module.

Provides helpers for testing installers and code units with miraveja-installers.
"""

from .utilities import TrackingInstaller, create_code_unit, installed_instances

__all__ = [
    "create_code_unit",
    "TrackingInstaller",
    "installed_instances",
]
