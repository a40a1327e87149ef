"""
Pytest fixtures and configuration for Storefront tests

This file provides shared fixtures that can be used across all test modules:
- an in-memory SQLite database built from the ORM models
- a TestClient wired to that database
- in-memory repositories for service tests

Author: TM3
Date: 2026-03-02
"""
import pytest
from datetime import datetime
from decimal import Decimal
from typing import Dict, Set, Tuple
from uuid import UUID, uuid4

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storefront import models  # noqa: F401
from storefront.core.database import Base, get_db
from storefront.domain.order import Order
from storefront.domain.product import Product
from storefront.main import app
from storefront.services.order_service import OrderService
from storefront.services.product_service import ProductService


# ============================================================================
# Database fixtures
# ============================================================================

@pytest.fixture(scope="function")
def db_engine():
    """
    Provides a fresh in-memory SQLite database for each test

    StaticPool keeps a single connection so every session sees the same data.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture(scope="function")
def db_session(session_factory):
    """
    Provides a SQLAlchemy session for each test

    Automatically closes the session after the test
    """
    session = session_factory()
    yield session
    session.close()


@pytest.fixture(scope="function")
def client(session_factory):
    """
    Provides a TestClient whose requests use the test database
    """
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ============================================================================
# In-memory repositories
# ============================================================================

class InMemoryProductRepository:
    """Same surface as ProductRepository, backed by dicts"""

    def __init__(self):
        self.products: Dict[UUID, Product] = {}
        # (order_id, product_id) pairs, shared with InMemoryOrderRepository
        self.links: Set[Tuple[UUID, UUID]] = set()

    def create(self, values):
        product = Product(id=uuid4(), **values)
        self.products[product.id] = product
        return product

    def find_all(self):
        return sorted(self.products.values(), key=lambda p: p.name)

    def find_by_id(self, product_id):
        return self.products.get(product_id)

    def find_by_ids(self, product_ids):
        return [self.products[pid] for pid in product_ids if pid in self.products]

    def update(self, product_id, values):
        if product_id not in self.products:
            return None
        product = self.products[product_id].model_copy(update=values)
        self.products[product_id] = product
        return product

    def delete(self, product_id):
        if self.products.pop(product_id, None) is None:
            return False
        self.links = {link for link in self.links if link[1] != product_id}
        return True

    def count_orders(self, product_id):
        return sum(1 for _, pid in self.links if pid == product_id)


class InMemoryOrderRepository:
    """Same surface as OrderRepository, backed by dicts"""

    def __init__(self, product_repository: InMemoryProductRepository):
        self.product_repository = product_repository
        self.rows: Dict[UUID, dict] = {}
        self.writes = 0

    def _build(self, order_id):
        product_ids = [pid for oid, pid in self.product_repository.links if oid == order_id]
        products = [self.product_repository.products[pid] for pid in product_ids]
        return Order(id=order_id, products=products, **self.rows[order_id])

    def create(self, values, product_ids):
        self.writes += 1
        order_id = uuid4()
        self.rows[order_id] = dict(values, created_at=datetime.now())
        for product_id in product_ids:
            self.product_repository.links.add((order_id, product_id))
        return self._build(order_id)

    def find_all(self):
        return [self._build(order_id) for order_id in self.rows]

    def find_by_id(self, order_id):
        if order_id not in self.rows:
            return None
        return self._build(order_id)

    def update(self, order_id, values, product_ids=None):
        if order_id not in self.rows:
            return None
        self.writes += 1
        self.rows[order_id].update(values)
        if product_ids is not None:
            links = self.product_repository.links
            self.product_repository.links = {link for link in links if link[0] != order_id}
            for product_id in product_ids:
                self.product_repository.links.add((order_id, product_id))
        return self._build(order_id)

    def delete(self, order_id):
        if self.rows.pop(order_id, None) is None:
            return False
        self.writes += 1
        links = self.product_repository.links
        self.product_repository.links = {link for link in links if link[0] != order_id}
        return True


@pytest.fixture
def product_repository():
    return InMemoryProductRepository()


@pytest.fixture
def order_repository(product_repository):
    return InMemoryOrderRepository(product_repository)


@pytest.fixture
def product_service(product_repository):
    return ProductService(product_repository)


@pytest.fixture
def order_service(order_repository, product_repository):
    return OrderService(order_repository, product_repository)


# ============================================================================
# Sample data
# ============================================================================

@pytest.fixture
def sample_product_data():
    """
    Provides sample product data for tests (wire format)
    """
    return {
        "name": "Wireless Mouse",
        "imageUrl": "https://cdn.example.com/img/mouse.png",
        "price": 29.8
    }


@pytest.fixture
def sample_product_values():
    """
    Provides validated product values as repositories receive them
    """
    return {
        "name": "Wireless Mouse",
        "image_url": "https://cdn.example.com/img/mouse.png",
        "price": Decimal("29.80")
    }


@pytest.fixture
def sample_order_data():
    """
    Provides sample order customer data for tests (wire format)
    """
    return {
        "fullName": "Jane Roe",
        "email": "jane@example.com",
        "phoneNumber": "+56 9 1234 5678",
        "address": "Av. Providencia 1234, Santiago"
    }


@pytest.fixture
def sample_customer_values():
    """
    Provides validated customer values as repositories receive them
    """
    return {
        "full_name": "Jane Roe",
        "email": "jane@example.com",
        "phone_number": "+56 9 1234 5678",
        "address": "Av. Providencia 1234, Santiago"
    }
