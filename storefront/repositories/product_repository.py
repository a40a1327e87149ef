"""
Product Repository - Data Access Layer for Products

Handles all database queries for products and returns Product domain models.

Author: TM3
Date: 2026-03-02
"""
from typing import Any, Dict, Iterable, List, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from storefront import models
from storefront.domain.product import Product


class ProductRepository:
    """
    Repository for Product data access

    All queries for products are centralized here.
    Returns Product domain models, not ORM objects.
    """

    def __init__(self, session: Session):
        self.session = session

    def create(self, values: Dict[str, Any]) -> Product:
        """
        Insert a new product

        Args:
            values: Validated name, image_url and price

        Returns:
            The stored product with its generated id
        """
        record = models.Product(**values)
        self.session.add(record)
        self.session.commit()
        self.session.refresh(record)
        return Product.model_validate(record)

    def find_all(self) -> List[Product]:
        """Find all products, ordered by name"""
        records = self.session.scalars(
            select(models.Product).order_by(models.Product.name, models.Product.id)
        ).all()
        return [Product.model_validate(record) for record in records]

    def find_by_id(self, product_id: UUID) -> Optional[Product]:
        """
        Find product by ID

        Args:
            product_id: Product UUID

        Returns:
            Product or None if not found
        """
        record = self.session.get(models.Product, product_id)
        if record is None:
            return None
        return Product.model_validate(record)

    def find_by_ids(self, product_ids: Iterable[UUID]) -> List[Product]:
        """
        Find every product whose id is in product_ids

        Unknown ids are skipped; the caller compares the result against its
        request to find them.
        """
        product_ids = list(product_ids)
        if not product_ids:
            return []

        records = self.session.scalars(
            select(models.Product).where(models.Product.id.in_(product_ids))
        ).all()
        return [Product.model_validate(record) for record in records]

    def update(self, product_id: UUID, values: Dict[str, Any]) -> Optional[Product]:
        """
        Apply field changes to a product

        Args:
            product_id: Product UUID
            values: Validated subset of name, image_url and price

        Returns:
            Updated product or None if not found
        """
        record = self.session.get(models.Product, product_id)
        if record is None:
            return None

        for field, value in values.items():
            setattr(record, field, value)

        self.session.commit()
        self.session.refresh(record)
        return Product.model_validate(record)

    def delete(self, product_id: UUID) -> bool:
        """
        Delete a product and its order associations

        Returns:
            True if a product was deleted, False if none matched
        """
        record = self.session.get(models.Product, product_id)
        if record is None:
            return False

        self.session.delete(record)
        self.session.commit()
        return True

    def count_orders(self, product_id: UUID) -> int:
        """Count the orders that reference a product"""
        return self.session.scalar(
            select(func.count())
            .select_from(models.order_products)
            .where(models.order_products.c.product_id == product_id)
        )
