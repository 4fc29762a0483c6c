"""
==============================================================================
Core Package
==============================================================================

Core infrastructure shared by the catalog.

Modules:
--------
- exceptions: CatalogException class and error factory functions

Usage:
------
    from shop.core import CatalogException

    # Or use exception factory functions via module
    from shop.core import exceptions
    raise exceptions.invalid_product(value)

==============================================================================
"""

from .exceptions import CatalogException

__all__ = [
    "CatalogException",
]
