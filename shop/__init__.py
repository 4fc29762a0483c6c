"""
==============================================================================
Shop - In-Memory Product Catalog
==============================================================================

Usage:
------
    from shop import Product, ProductCatalog

    catalog = ProductCatalog()
    catalog.add_new_product(Product(id="1", name="Book-1", producer="Author-1"))
    catalog.list_products_by_producer("author")

==============================================================================
"""

from .catalog import Product, ProductCatalog, Shop
from .config import Settings, get_settings
from .core import CatalogException

__all__ = [
    "Product",
    "ProductCatalog",
    "Shop",
    "Settings",
    "get_settings",
    "CatalogException",
]
