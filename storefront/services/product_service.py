"""
Product Service
Catalog management: validation and lookup semantics on top of ProductRepository

Author: TM3
Date: 2026-03-02
"""
import logging
from typing import List
from uuid import UUID

from storefront.core.exceptions import NotFoundError, ValidationError
from storefront.domain.product import Product, ProductCreate, ProductUpdate
from storefront.domain.validation import FieldError, validate_product

logger = logging.getLogger(__name__)


class ProductService:
    """
    Service for catalog products

    Handles:
    - Field validation before anything reaches the store
    - NotFound for unknown ids
    - Logging of orders affected by a product deletion
    """

    def __init__(self, product_repository):
        self.product_repository = product_repository

    def create(self, payload: ProductCreate) -> Product:
        result = validate_product(payload.model_dump(exclude_unset=True))
        if isinstance(result, FieldError):
            raise ValidationError(result.field, result.message)

        product = self.product_repository.create(result.value)
        logger.info(f"Created product {product.id} ({product.name})")
        return product

    def find_all(self) -> List[Product]:
        return self.product_repository.find_all()

    def find_one(self, product_id: UUID) -> Product:
        product = self.product_repository.find_by_id(product_id)
        if product is None:
            raise NotFoundError.for_entity("Product", product_id)
        return product

    def update(self, product_id: UUID, payload: ProductUpdate) -> Product:
        """
        Apply a partial update

        The product must exist and every provided field must be valid;
        otherwise nothing is written.
        """
        self.find_one(product_id)

        result = validate_product(payload.model_dump(exclude_unset=True), partial=True)
        if isinstance(result, FieldError):
            raise ValidationError(result.field, result.message)

        product = self.product_repository.update(product_id, result.value)
        if product is None:
            raise NotFoundError.for_entity("Product", product_id)

        logger.info(f"Updated product {product_id}: {sorted(result.value)}")
        return product

    def remove(self, product_id: UUID) -> None:
        """Delete a product; orders that referenced it lose the association"""
        self.find_one(product_id)

        referencing_orders = self.product_repository.count_orders(product_id)
        if referencing_orders:
            logger.warning(
                f"Deleting product {product_id} removes it from {referencing_orders} order(s)"
            )

        if not self.product_repository.delete(product_id):
            raise NotFoundError.for_entity("Product", product_id)
        logger.info(f"Deleted product {product_id}")
