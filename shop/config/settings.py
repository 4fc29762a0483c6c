"""
==============================================================================
Catalog Settings Module
==============================================================================

Configuration management using Pydantic Settings.

This module implements the Singleton pattern to ensure a single global
configuration instance. Catalogs themselves are never global: each caller
constructs its own ProductCatalog, which reads its defaults from here.

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables (prefixed with SHOP_)
2. .env file
3. Default values

==============================================================================
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Catalog settings loaded from environment variables.

    Attributes:
        result_limit: Maximum number of entries returned by a search
        case_sensitive_search: Match search strings case-sensitively

    Example:
        >>> settings = Settings()
        >>> print(settings.result_limit)
        10
    """

    # =========================================================================
    # PYDANTIC SETTINGS CONFIGURATION
    # =========================================================================
    model_config = SettingsConfigDict(
        env_prefix="SHOP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # =========================================================================
    # SEARCH SETTINGS
    # =========================================================================
    result_limit: int = Field(
        default=10,
        ge=1,
        le=1000,
        description="Maximum number of entries returned by a search"
    )

    case_sensitive_search: bool = Field(
        default=False,
        description="Match search strings case-sensitively"
    )

    def __repr__(self) -> str:
        return (
            f"Settings(result_limit={self.result_limit}, "
            f"case_sensitive_search={self.case_sensitive_search})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance (singleton pattern).

    Returns:
        Global Settings instance
    """
    settings = Settings()
    logger.debug(f"Configuration loaded: {settings}")
    return settings
