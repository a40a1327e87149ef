"""
Order Service
Creates and maintains customer orders and their product associations

Author: TM3
Date: 2026-03-02
"""
import logging
from typing import List
from uuid import UUID

from storefront.core.exceptions import NotFoundError, ValidationError
from storefront.domain.order import Order, OrderCreate, OrderUpdate
from storefront.domain.product import Product
from storefront.domain.validation import (
    FieldError,
    validate_customer,
    validate_product_ids,
)

logger = logging.getLogger(__name__)


class OrderService:
    """
    Service for customer orders

    Handles:
    - Customer field validation
    - Resolution of product ids against the catalog (all-or-nothing)
    - Persistence of orders and their product associations

    Every check runs before the first write, so a rejected request leaves
    the stored order untouched.
    """

    def __init__(self, order_repository, product_repository):
        self.order_repository = order_repository
        self.product_repository = product_repository

    def _resolve_products(self, raw_ids) -> List[Product]:
        """
        Map requested ids to catalog products

        Raises:
            ValidationError: If raw_ids is not a list of UUIDs
            NotFoundError: Naming the ids that do not exist, as sent
        """
        result = validate_product_ids(raw_ids)
        if isinstance(result, FieldError):
            raise ValidationError(result.field, result.message)

        requested = result.value
        products = self.product_repository.find_by_ids(list(requested))

        found = {product.id for product in products}
        missing = [text for product_id, text in requested.items() if product_id not in found]
        if missing:
            logger.warning(f"Order references unknown products: {', '.join(missing)}")
            raise NotFoundError.for_products(missing)

        return products

    def create(self, payload: OrderCreate) -> Order:
        """
        Create an order for existing products

        Steps:
        1. Validate customer fields
        2. Resolve product ids (NotFound lists the missing ones)
        3. Store the order with its associations

        Args:
            payload: Customer fields plus product_ids (required, may be empty)

        Returns:
            The created order with products populated
        """
        data = payload.model_dump(exclude_unset=True)

        result = validate_customer(data)
        if isinstance(result, FieldError):
            raise ValidationError(result.field, result.message)

        products = self._resolve_products(data.get('product_ids'))

        order = self.order_repository.create(result.value, [product.id for product in products])
        logger.info(f"Created order {order.id} with {len(order.products)} product(s)")
        return order

    def find_all(self) -> List[Order]:
        return self.order_repository.find_all()

    def find_one(self, order_id: UUID) -> Order:
        order = self.order_repository.find_by_id(order_id)
        if order is None:
            raise NotFoundError.for_entity("Order", order_id)
        return order

    def update(self, order_id: UUID, payload: OrderUpdate) -> Order:
        """
        Apply a partial update

        Customer fields that are omitted stay unchanged. When product_ids is
        present (an empty list included) the product set is replaced as a
        whole; when it is omitted or null the associations are kept.
        """
        self.find_one(order_id)

        data = payload.model_dump(exclude_unset=True)

        result = validate_customer(data, partial=True)
        if isinstance(result, FieldError):
            raise ValidationError(result.field, result.message)

        new_product_ids = None
        if data.get('product_ids') is not None:
            new_product_ids = [product.id for product in self._resolve_products(data['product_ids'])]

        order = self.order_repository.update(order_id, result.value, new_product_ids)
        if order is None:
            raise NotFoundError.for_entity("Order", order_id)

        logger.info(f"Updated order {order_id}: fields={sorted(result.value)}")
        if new_product_ids is not None:
            held = ', '.join(str(product_id) for product_id in order.product_ids)
            logger.info(f"Order {order_id} products replaced: [{held}]")
        return order

    def remove(self, order_id: UUID) -> None:
        self.find_one(order_id)

        if not self.order_repository.delete(order_id):
            raise NotFoundError.for_entity("Order", order_id)
        logger.info(f"Deleted order {order_id}")
