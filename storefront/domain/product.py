"""
Product Domain Model

Represents a product entity in the storefront catalog.
This is the single source of truth for product data structure.

Author: TM3
Date: 2026-03-02
"""
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional
from decimal import Decimal
from uuid import UUID


class Product(BaseModel):
    """
    Product domain model - represents a product in our catalog

    Fields:
        id: Product identifier (UUID, generated by the store)
        name: Product name
        image_url: Public URL of the product image
        price: Unit price, 2 decimal places
    """

    id: UUID = Field(..., description="Product ID")
    name: str = Field(..., description="Product name")
    image_url: str = Field(..., description="Product image URL")
    price: Decimal = Field(..., description="Unit price", ge=0)

    # Pydantic v2 configuration
    model_config = ConfigDict(
        from_attributes=True,  # Allow creation from ORM objects
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_dict(self) -> dict:
        """
        Convert to a JSON-ready dictionary with camelCase keys

        Price is converted from Decimal to float for JSON compatibility.
        """
        data = self.model_dump(mode="json", by_alias=True)
        data['price'] = float(self.price)
        return data


class ProductCreate(BaseModel):
    """Schema for creating a new product"""
    name: Optional[str] = None
    image_url: Optional[str] = None
    price: Optional[Decimal] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductUpdate(BaseModel):
    """Schema for updating an existing product"""
    name: Optional[str] = None
    image_url: Optional[str] = None
    price: Optional[Decimal] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
