"""Demonstrations package.

Importing this package registers every demonstration with the application
registry.
"""

from . import behavioral, creational, structural

__all__ = ["behavioral", "creational", "structural"]
