"""
==============================================================================
Catalog Package - Product Management
==============================================================================

In-memory product catalog with substring search.

Classes:
--------
- Product: Immutable pydantic model for products
- Shop: Abstract catalog contract
- ProductCatalog: In-memory implementation of Shop

==============================================================================
"""

from .models import Product
from .base import Shop
from .catalog import ProductCatalog

__all__ = [
    "Product",
    "Shop",
    "ProductCatalog",
]
