"""
==============================================================================
Product Schemas Module
==============================================================================

Pydantic models for catalog products.

Field names are snake_case in Python and camelCase on the wire
(partNumber, partName, ...). Both spellings are accepted on input.

==============================================================================
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# Largest stock count, a 32-bit signed integer
MAX_STOCK = 2**31 - 1


class ProductCreate(BaseModel):
    """
    Product submitted by a client.

    Carries no id; an "id" key in the request body is ignored. Stock
    above MAX_STOCK is rejected while decoding. The remaining range
    checks (non-negative price and stock, non-blank text) are business
    rules enforced by CatalogService, not here.

    Attributes:
        part_number: Business key, unique across the catalog
        part_name: Human-readable name (lowercased before storing)
        category: Product category
        price: Unit price
        stock: Units on hand
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    part_number: str = Field(..., description="Unique part number")
    part_name: str = Field(..., description="Product name")
    category: str = Field(..., description="Product category")
    price: float = Field(..., description="Unit price")
    stock: int = Field(..., le=MAX_STOCK, description="Units on hand")


class Product(ProductCreate):
    """
    Stored product with its server-assigned id.

    Instances are frozen, so snapshots handed to readers cannot be
    mutated behind the store's back.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        frozen=True,
    )

    id: int = Field(..., ge=1, description="Server-assigned identifier")

    @property
    def inventory_value(self) -> float:
        """Value of the stock on hand."""
        return self.price * self.stock

    @classmethod
    def from_draft(cls, draft: ProductCreate, product_id: int) -> "Product":
        """Build a stored product from a submitted draft."""
        return cls(id=product_id, **draft.model_dump())
