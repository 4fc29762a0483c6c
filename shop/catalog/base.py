"""
==============================================================================
Shop Interface Module
==============================================================================

Abstract contract implemented by product catalogs.

==============================================================================
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Set

from .models import Product


class Shop(ABC):
    """
    Abstract shop contract.

    Implementations store products in memory and answer two kinds of
    substring searches. None of the operations raise for well-typed input.
    """

    @abstractmethod
    def add_new_product(self, product: Product) -> bool:
        """
        Add a new product to the shop.

        Args:
            product: Product to add

        Returns:
            False if a product with the same id already exists, True otherwise
        """

    @abstractmethod
    def delete_product(self, product_id: str) -> bool:
        """
        Delete the product with the specified id.

        Args:
            product_id: Id of the product to remove

        Returns:
            True if the product existed, False otherwise
        """

    @abstractmethod
    def list_products_by_name(self, search_string: str) -> Set[str]:
        """
        List up to the result limit of product names containing a string.

        Names shared by several products are returned once per product in
        the form "<producer> - <name>", other names are returned as is.
        """

    @abstractmethod
    def list_products_by_producer(self, search_string: str) -> List[str]:
        """
        List up to the result limit of product names whose producer contains
        a string, ordered by producer.
        """
