"""Design Pattern Gallery - Root Package.

This package collects minimal, self-contained demonstrations of classic
object-oriented design patterns. Every pattern has the same shape: a
capability contract, one or two concrete variants, and a selector or
composer that dispatches to them without the caller knowing the variant.

Key Components:
    - domain: Capability contracts, variants and selectors per pattern
    - application: Capability dispatch and the usage scenario registry
    - infrastructure: Logging, singleton registry, payment adapters, error handling
    - config: Configuration schemas and management
    - cli: Command-line interface

Patterns:
    Singleton (database), Factory (vehicle), Adapter (payment),
    Decorator (coffee), Observer (stock), Command (appliance).
"""

from ._package import PACKAGE_NAME, __version__

__author__ = "Design Pattern Gallery Maintainers"
__package_name__ = PACKAGE_NAME

"""
Usage:
    The gallery is typically explored through the command-line interface:

    >>> pattern-gallery scenarios list
    >>> pattern-gallery scenarios run decorator
    >>> pattern-gallery vehicles create bike
"""
