"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities
and the validators that guard their construction.

Author: TM3
Date: 2026-03-02
"""
from storefront.domain.product import Product, ProductCreate, ProductUpdate
from storefront.domain.order import Order, OrderCreate, OrderUpdate

__all__ = ['Product', 'ProductCreate', 'ProductUpdate', 'Order', 'OrderCreate', 'OrderUpdate']
