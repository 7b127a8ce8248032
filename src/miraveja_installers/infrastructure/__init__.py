"""
Infrastructure layer - Supporting tooling.

This layer contains helpers built on top of the Application and Domain layers.
"""

from . import testing

__all__ = [
    "testing",
]
