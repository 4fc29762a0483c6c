"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for product catalog items.

==============================================================================
"""

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """
    Product model for catalog items.

    Immutable once constructed. Identity is the ``id`` field; two products
    with the same id are the same catalog entry regardless of name or
    producer.

    Attributes:
        id: Unique product identifier (opaque string)
        name: Product display name
        producer: Producer or manufacturer name
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid"
    )

    id: str = Field(..., description="Unique product identifier")
    name: str = Field(..., description="Product name")
    producer: str = Field(..., description="Producer name")

    @property
    def label(self) -> str:
        """Display form used when several products share a name."""
        return f"{self.producer} - {self.name}"
