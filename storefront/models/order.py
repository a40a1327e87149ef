"""
Modelos relacionados con órdenes/pedidos
"""
import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Table, Text, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from storefront.core.database import Base


# Única tabla de asociación pedido <-> producto.
# Order.products and Product.orders both map onto this table.
order_products = Table(
    "order_products",
    Base.metadata,
    Column("order_id", Uuid, ForeignKey("orders.id", ondelete="CASCADE"), primary_key=True),
    Column("product_id", Uuid, ForeignKey("products.id", ondelete="CASCADE"), primary_key=True),
)


class Order(Base):
    """
    Pedido de un cliente
    """
    __tablename__ = "orders"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    # Datos del cliente
    full_name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    phone_number = Column(Text, nullable=False)
    address = Column(Text, nullable=False)

    # Metadata
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    # Relationships
    products = relationship(
        "Product",
        secondary=order_products,
        back_populates="orders",
        lazy="selectin",
    )
