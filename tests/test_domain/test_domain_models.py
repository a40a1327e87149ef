"""
Unit tests for Product/Order domain models

Author: TM3
Date: 2026-03-02
"""
from datetime import datetime
from decimal import Decimal
from uuid import uuid4

from storefront.domain.order import Order, OrderUpdate
from storefront.domain.product import Product, ProductCreate


class TestDomainModels:
    """Test serialization and request schemas"""

    def test_product_to_dict_uses_camel_case_and_float_price(self):
        product = Product(id=uuid4(), name='Mouse', image_url='http://a.io/m.png', price=Decimal('29.80'))

        data = product.to_dict()

        assert data == {
            'id': str(product.id),
            'name': 'Mouse',
            'imageUrl': 'http://a.io/m.png',
            'price': 29.8,
        }

    def test_order_to_dict_nests_products(self):
        product = Product(id=uuid4(), name='Mouse', image_url='http://a.io/m.png', price=Decimal('1.00'))
        order = Order(
            id=uuid4(),
            full_name='Jane Roe',
            email='jane@example.com',
            phone_number='123',
            address='Somewhere 1',
            created_at=datetime(2026, 3, 2, 10, 30),
            products=[product],
        )

        data = order.to_dict()

        assert data['fullName'] == 'Jane Roe'
        assert data['phoneNumber'] == '123'
        assert data['createdAt'] == '2026-03-02T10:30:00'
        assert data['products'] == [product.to_dict()]
        assert order.product_ids == [product.id]

    def test_request_schemas_accept_camel_case(self):
        payload = ProductCreate.model_validate({'name': 'x', 'imageUrl': 'http://a.io', 'price': '2.5'})

        assert payload.image_url == 'http://a.io'
        assert payload.price == Decimal('2.5')

    def test_order_update_tracks_which_fields_were_sent(self):
        """Test omitted fields are distinguishable from explicit values"""
        payload = OrderUpdate.model_validate({'email': 'new@example.com', 'productIds': []})

        assert payload.model_dump(exclude_unset=True) == {
            'email': 'new@example.com',
            'product_ids': [],
        }
