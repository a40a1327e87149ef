"""
FastAPI dependencies that assemble services per request

Each request gets its own SQLAlchemy session; repositories wrap it and
services receive the repositories through their constructors.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from storefront.core.database import get_db
from storefront.repositories.order_repository import OrderRepository
from storefront.repositories.product_repository import ProductRepository
from storefront.services.order_service import OrderService
from storefront.services.product_service import ProductService


def get_product_repository(db: Session = Depends(get_db)) -> ProductRepository:
    return ProductRepository(db)


def get_order_repository(db: Session = Depends(get_db)) -> OrderRepository:
    return OrderRepository(db)


def get_product_service(
    products: ProductRepository = Depends(get_product_repository),
) -> ProductService:
    return ProductService(products)


def get_order_service(
    orders: OrderRepository = Depends(get_order_repository),
    products: ProductRepository = Depends(get_product_repository),
) -> OrderService:
    return OrderService(orders, products)
