"""
Order Domain Models

Represents order-related entities in the storefront.
These are the single source of truth for order data structure.

Author: TM3
Date: 2026-03-02
"""
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime
from uuid import UUID

from storefront.domain.product import Product


class Order(BaseModel):
    """
    Order domain model - represents a customer order

    Fields:
        id: Order identifier (UUID, generated by the store)

        # Customer contact
        full_name: Customer full name
        email: Customer email
        phone_number: Customer phone number
        address: Delivery address

        # Metadata
        created_at: When the order was created (never modified)

        # Related data (many-to-many)
        products: Products referenced by the order, no particular order
    """

    id: UUID = Field(..., description="Order ID")

    # Customer contact
    full_name: str = Field(..., description="Customer full name")
    email: str = Field(..., description="Customer email")
    phone_number: str = Field(..., description="Customer phone number")
    address: str = Field(..., description="Delivery address")

    # Metadata
    created_at: datetime = Field(..., description="Creation timestamp")

    # Products (many-to-many)
    products: List[Product] = Field(default_factory=list, description="Products in the order")

    # Pydantic v2 configuration
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @property
    def product_ids(self) -> List[UUID]:
        """IDs of the products in the order"""
        return [product.id for product in self.products]

    def to_dict(self) -> dict:
        """
        Convert to a JSON-ready dictionary with camelCase keys

        Products are rendered with their own to_dict.
        """
        data = self.model_dump(mode="json", by_alias=True, exclude={'products'})
        data['products'] = [product.to_dict() for product in self.products]
        return data


class OrderCreate(BaseModel):
    """Schema for creating a new order"""
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None
    product_ids: Optional[List[str]] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OrderUpdate(BaseModel):
    """
    Schema for updating an existing order

    Omitted fields stay unchanged. product_ids replaces the whole product
    set when present, including as an empty list.
    """
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None
    product_ids: Optional[List[str]] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
