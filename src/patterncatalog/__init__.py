"""Pattern Catalog - Root Package.

This package is a catalog of the classic Gang-of-Four design patterns, each
demonstrated in isolation with a small runnable interaction.

Key Components:
    - domain: The pattern mechanics, grouped by category
        (behavioral, creational, structural)
    - application: Demonstration registry and catalog service
    - infrastructure: Logging and output adapters
    - config: Typed configuration schemas and the configuration manager
    - cli: Command line interface for listing and running demonstrations

Architecture:
    Domain components never print. Anything a pattern would show on a console
    is written to an OutputPort, and the demo layer decides where it goes.
"""

from ._version import __version__

PACKAGE_NAME = "pattern-catalog"

__package_name__ = PACKAGE_NAME

"""
Usage:
    >>> patterns demos list
    >>> patterns demos run chain_of_responsibility
"""
