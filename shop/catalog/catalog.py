"""
==============================================================================
Product Catalog Module
==============================================================================

In-memory product catalog with substring search.

Features:
---------
- Insert-if-absent and delete-if-present keyed by product id
- Case-insensitive substring search on product name and producer
- Name listing that qualifies shared names with their producer
- Producer listing ordered by producer
- Result size capped by the configured result limit (default 10)

Ordering Rules:
--------------
- Name listing visits names in ascending case-insensitive order and,
  within a shared name, products by producer then id. When the cap is hit
  the earliest entries in that order are kept.
- Producer listing sorts by producer (case-insensitive, lexicographic),
  ties broken by id.

==============================================================================
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Dict, List, Optional, Set, Tuple

from shop.config import get_settings
from shop.core import exceptions

from .base import Shop
from .models import Product


# Module logger
logger = logging.getLogger(__name__)


class ProductCatalog(Shop):
    """
    In-memory product catalog.

    Holds at most one product per id. Not synchronized: callers sharing an
    instance across threads must guard every call with a single lock.

    Attributes:
        result_limit: Maximum entries returned by a search
        case_sensitive: Whether searches match case-sensitively

    Example:
        >>> catalog = ProductCatalog()
        >>> catalog.add_new_product(Product(id="4", name="Book-4", producer="Author-4"))
        True
        >>> catalog.add_new_product(Product(id="5", name="Book-4", producer="Author-5"))
        True
        >>> sorted(catalog.list_products_by_name("book-4"))
        ['Author-4 - Book-4', 'Author-5 - Book-4']
    """

    # Same bounds as Settings.result_limit
    MIN_RESULT_LIMIT = 1
    MAX_RESULT_LIMIT = 1000

    def __init__(
        self,
        result_limit: Optional[int] = None,
        case_sensitive: Optional[bool] = None
    ) -> None:
        """
        Initialize an empty catalog.

        Args:
            result_limit: Search result cap (uses settings if None)
            case_sensitive: Case-sensitive matching (uses settings if None)

        Raises:
            CatalogException: If result_limit is outside the allowed range
        """
        settings = get_settings()
        if result_limit is None:
            result_limit = settings.result_limit
        if (
            isinstance(result_limit, bool)
            or not isinstance(result_limit, int)
            or not self.MIN_RESULT_LIMIT <= result_limit <= self.MAX_RESULT_LIMIT
        ):
            raise exceptions.invalid_result_limit(
                result_limit, self.MIN_RESULT_LIMIT, self.MAX_RESULT_LIMIT
            )

        self.result_limit = result_limit
        self.case_sensitive = (
            case_sensitive if case_sensitive is not None else settings.case_sensitive_search
        )
        self._products: Dict[str, Product] = {}

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def products(self) -> List[Product]:
        """Get all products."""
        return list(self._products.values())

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._products

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def add_new_product(self, product: Product) -> bool:
        """
        Add a product unless one with the same id is already stored.

        The stored product is never overwritten; a conflicting product is
        discarded even when its name or producer differ.

        Args:
            product: Product to add

        Returns:
            True if stored, False if the id was already taken

        Raises:
            CatalogException: If product is not a Product instance
        """
        if not isinstance(product, Product):
            raise exceptions.invalid_product(product)

        if product.id in self._products:
            logger.debug(f"Rejected duplicate product id: {product.id}")
            return False

        self._products[product.id] = product
        logger.info(f"Product added: {product.id} ({product.name} by {product.producer})")
        return True

    def delete_product(self, product_id: str) -> bool:
        """
        Delete a product by id.

        Args:
            product_id: Id of the product to remove

        Returns:
            True if the product existed, False otherwise

        Raises:
            CatalogException: If product_id is not a string
        """
        if not isinstance(product_id, str):
            raise exceptions.invalid_product_id(product_id)

        if self._products.pop(product_id, None) is None:
            logger.debug(f"Delete skipped, unknown product id: {product_id}")
            return False

        logger.info(f"Product deleted: {product_id}")
        return True

    # =========================================================================
    # SEARCH METHODS
    # =========================================================================

    def list_products_by_name(self, search_string: str) -> Set[str]:
        """
        List product names containing the search string.

        Names held by a single product are returned bare. Names shared by
        several products are returned once per product as
        "<producer> - <name>".

        Args:
            search_string: Substring to look for in product names

        Returns:
            Set of at most result_limit entries
        """
        matched = self._filter(search_string, lambda p: p.name)

        grouped: Dict[str, List[Product]] = defaultdict(list)
        for product in matched:
            grouped[product.name].append(product)

        emitted: List[str] = []
        seen: Set[str] = set()

        for name in sorted(grouped, key=lambda n: (n.casefold(), n)):
            group = grouped[name]
            if len(group) == 1:
                entries = [name]
            else:
                entries = [p.label for p in sorted(group, key=self._producer_key)]

            for entry in entries:
                if entry not in seen:
                    seen.add(entry)
                    emitted.append(entry)

            if len(emitted) >= self.result_limit:
                break

        result = set(emitted[:self.result_limit])
        logger.debug(f"Name search {search_string!r}: {len(matched)} matched, {len(result)} returned")
        return result

    def list_products_by_producer(self, search_string: str) -> List[str]:
        """
        List names of products whose producer contains the search string.

        Args:
            search_string: Substring to look for in producer names

        Returns:
            Product names ordered by producer, at most result_limit entries.
            Duplicate names are kept.
        """
        matched = self._filter(search_string, lambda p: p.producer)
        ordered = sorted(matched, key=self._producer_key)

        result = [product.name for product in ordered[:self.result_limit]]
        logger.debug(f"Producer search {search_string!r}: {len(matched)} matched, {len(result)} returned")
        return result

    # =========================================================================
    # LOOKUP & UTILITY METHODS
    # =========================================================================

    def get_product(self, product_id: str) -> Optional[Product]:
        """Find product by exact id."""
        return self._products.get(product_id)

    def get_stats(self) -> Dict[str, Any]:
        """Get catalog statistics."""
        return {
            "total_products": len(self._products),
            "distinct_names": len({p.name for p in self._products.values()}),
            "distinct_producers": len({p.producer for p in self._products.values()}),
            "result_limit": self.result_limit,
        }

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _filter(self, search_string: str, field) -> List[Product]:
        """Return products whose selected field contains the search string."""
        if not isinstance(search_string, str):
            raise exceptions.invalid_search_string(search_string)

        # An empty search string matches nothing
        if not search_string:
            return []

        if self.case_sensitive:
            return [p for p in self._products.values() if search_string in field(p)]

        needle = search_string.casefold()
        return [p for p in self._products.values() if needle in field(p).casefold()]

    @staticmethod
    def _producer_key(product: Product) -> Tuple[str, str]:
        return product.producer.casefold(), product.id
