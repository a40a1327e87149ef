"""
Modelos de base de datos
"""
from .order import Order, order_products
from .product import Product

__all__ = [
    "Order",
    "Product",
    "order_products",
]
