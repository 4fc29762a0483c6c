"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides fresh catalogs, sample products and a clean settings cache.

==============================================================================
"""

import pytest
from typing import Generator, List

from shop.catalog import Product, ProductCatalog
from shop.config import get_settings


# ============================================================================
# SETTINGS FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Drop cached settings and SHOP_ overrides around each test."""
    for name in ("SHOP_RESULT_LIMIT", "SHOP_CASE_SENSITIVE_SEARCH"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def catalog() -> ProductCatalog:
    """Create an empty catalog with the default result limit."""
    return ProductCatalog(result_limit=10, case_sensitive=False)


@pytest.fixture
def sample_products() -> List[Product]:
    """Products used by the walkthrough scenarios."""
    return [
        Product(id="1", name="Book-1", producer="Author-1"),
        Product(id="3", name="Book-3", producer="Author-3"),
        Product(id="4", name="Book-4", producer="Author-4"),
        Product(id="5", name="Book-4", producer="Author-5"),
        Product(id="6", name="Book-6", producer="Author-6"),
        Product(id="7", name="Book-7", producer="Author-7"),
        Product(id="8", name="Book-8", producer="Author-8"),
        Product(id="9", name="Book-9", producer="Author-9"),
    ]


@pytest.fixture
def populated_catalog(catalog: ProductCatalog, sample_products: List[Product]) -> ProductCatalog:
    """Catalog holding every sample product."""
    for product in sample_products:
        assert catalog.add_new_product(product) is True
    return catalog
