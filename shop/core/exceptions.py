"""
Catalog Exception Handling

Single CatalogException class for programming errors at the catalog boundary.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


class CatalogException(Exception):
    """
    Unified catalog exception.

    Catalog operations are total over their declared input types: duplicate
    ids, unknown ids and empty search strings are answered with booleans or
    empty results. This exception is reserved for arguments of the wrong
    type and for out-of-range catalog limits.

    Usage:
        raise CatalogException("Not a product", "INVALID_PRODUCT", {"type": "dict"})

    Error Codes:
        - INVALID_PRODUCT
        - INVALID_PRODUCT_ID
        - INVALID_SEARCH_STRING
        - INVALID_RESULT_LIMIT
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize catalog exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "INVALID_PRODUCT")
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def invalid_product(value: Any) -> CatalogException:
    """Create invalid product exception."""
    return CatalogException(
        f"Expected a Product, got {type(value).__name__}",
        "INVALID_PRODUCT",
        {"type": type(value).__name__}
    )


def invalid_search_string(value: Any) -> CatalogException:
    """Create invalid search string exception."""
    return CatalogException(
        f"Search string must be str, got {type(value).__name__}",
        "INVALID_SEARCH_STRING",
        {"type": type(value).__name__}
    )


def invalid_product_id(value: Any) -> CatalogException:
    """Create invalid product id exception."""
    return CatalogException(
        f"Product id must be str, got {type(value).__name__}",
        "INVALID_PRODUCT_ID",
        {"type": type(value).__name__}
    )


def invalid_result_limit(value: Any, minimum: int, maximum: int) -> CatalogException:
    """Create invalid result limit exception."""
    return CatalogException(
        f"Result limit must be an integer between {minimum} and {maximum}, got {value!r}",
        "INVALID_RESULT_LIMIT",
        {"result_limit": value, "minimum": minimum, "maximum": maximum}
    )
