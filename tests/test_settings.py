"""
==============================================================================
Settings Tests
==============================================================================
"""

import pytest
from pydantic import ValidationError

from shop.catalog import Product, ProductCatalog
from shop.config import Settings, get_settings


class TestSettings:
    """Tests for environment-driven configuration."""

    def test_defaults(self):
        """Test default values."""
        settings = Settings(_env_file=None)
        assert settings.result_limit == 10
        assert settings.case_sensitive_search is False

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch):
        """Test SHOP_ prefixed variables override defaults."""
        monkeypatch.setenv("SHOP_RESULT_LIMIT", "3")
        monkeypatch.setenv("SHOP_CASE_SENSITIVE_SEARCH", "true")
        settings = Settings(_env_file=None)
        assert settings.result_limit == 3
        assert settings.case_sensitive_search is True

    @pytest.mark.parametrize("limit", [0, -1, 1001])
    def test_result_limit_bounds(self, limit: int):
        """Test out-of-range limits are rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, result_limit=limit)

    def test_get_settings_cached(self):
        """Test the settings singleton is reused."""
        assert get_settings() is get_settings()

    def test_catalog_reads_settings(self, monkeypatch: pytest.MonkeyPatch):
        """Test catalogs default to the configured limit."""
        monkeypatch.setenv("SHOP_RESULT_LIMIT", "2")
        get_settings.cache_clear()

        catalog = ProductCatalog()
        for i in range(4):
            catalog.add_new_product(Product(id=str(i), name="Mug", producer=f"Maker-{i}"))

        assert catalog.result_limit == 2
        assert catalog.list_products_by_producer("maker") == ["Mug", "Mug"]
        assert len(catalog.list_products_by_name("mug")) == 2
