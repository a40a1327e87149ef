"""
Repository Layer - Data Access

This layer handles all database queries and returns domain models.
Repositories abstract away ORM details from business logic.

Author: TM3
Date: 2026-03-02
"""
from storefront.repositories.product_repository import ProductRepository
from storefront.repositories.order_repository import OrderRepository

__all__ = [
    'ProductRepository',
    'OrderRepository',
]
