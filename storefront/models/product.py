"""
Modelo de producto del catálogo
"""
import uuid

from sqlalchemy import Column, Numeric, Text, Uuid
from sqlalchemy.orm import relationship

from storefront.core.database import Base
from .order import order_products


class Product(Base):
    __tablename__ = "products"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    image_url = Column(Text, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)

    # Relationships (reverse side of Order.products)
    orders = relationship(
        "Order",
        secondary=order_products,
        back_populates="products",
    )
