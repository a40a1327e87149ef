"""
Order Repository - Data Access Layer for Orders

Handles all database queries for orders and returns Order domain models
with their products loaded.

Author: TM3
Date: 2026-03-02
"""
from typing import Any, Dict, Iterable, List, Optional
from uuid import UUID

from sqlalchemy import delete, insert, select
from sqlalchemy.orm import Session, selectinload

from storefront import models
from storefront.domain.order import Order


class OrderRepository:
    """
    Repository for Order data access

    Association rows live in the order_products table; this repository is
    the only writer of that table.
    """

    def __init__(self, session: Session):
        self.session = session

    def _get(self, order_id: UUID) -> Optional[models.Order]:
        return self.session.scalar(
            select(models.Order)
            .options(selectinload(models.Order.products))
            .where(models.Order.id == order_id)
        )

    def _link_products(self, order_id: UUID, product_ids: List[UUID]) -> None:
        if not product_ids:
            return
        self.session.execute(
            insert(models.order_products),
            [{"order_id": order_id, "product_id": product_id} for product_id in product_ids],
        )

    def create(self, values: Dict[str, Any], product_ids: Iterable[UUID]) -> Order:
        """
        Insert an order and its product associations in one commit

        Args:
            values: Validated customer fields
            product_ids: Resolved product ids (unique)

        Returns:
            The stored order with products populated
        """
        record = models.Order(**values)
        self.session.add(record)
        self.session.flush()
        order_id = record.id

        self._link_products(order_id, list(product_ids))
        self.session.commit()

        return Order.model_validate(self._get(order_id))

    def find_all(self) -> List[Order]:
        """
        Find all orders with their products

        Products for every order are loaded in a single extra query.
        """
        records = self.session.scalars(
            select(models.Order)
            .options(selectinload(models.Order.products))
            .order_by(models.Order.created_at, models.Order.id)
        ).all()
        return [Order.model_validate(record) for record in records]

    def find_by_id(self, order_id: UUID) -> Optional[Order]:
        """
        Find order by ID with its products

        Args:
            order_id: Order UUID

        Returns:
            Order or None if not found
        """
        record = self._get(order_id)
        if record is None:
            return None
        return Order.model_validate(record)

    def update(
        self,
        order_id: UUID,
        values: Dict[str, Any],
        product_ids: Optional[Iterable[UUID]] = None,
    ) -> Optional[Order]:
        """
        Apply customer field changes and optionally replace the product set

        Args:
            order_id: Order UUID
            values: Validated subset of the customer fields
            product_ids: New product set; None keeps the current associations

        Returns:
            Updated order or None if not found
        """
        record = self._get(order_id)
        if record is None:
            return None

        for field, value in values.items():
            setattr(record, field, value)

        if product_ids is not None:
            self.session.execute(
                delete(models.order_products).where(models.order_products.c.order_id == order_id)
            )
            self._link_products(order_id, list(product_ids))

        self.session.commit()
        return Order.model_validate(self._get(order_id))

    def delete(self, order_id: UUID) -> bool:
        """
        Delete an order and its product associations

        Returns:
            True if an order was deleted, False if none matched
        """
        record = self._get(order_id)
        if record is None:
            return False

        self.session.delete(record)
        self.session.commit()
        return True
