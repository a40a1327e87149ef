"""
Products API tests

Author: TM3
Date: 2026-03-02
"""
from uuid import uuid4


class TestProductsApi:
    """Test /products endpoints"""

    def test_create_product(self, client, sample_product_data):
        """Test POST /products returns 201 with the stored product"""
        response = client.post("/products", json=sample_product_data)

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Wireless Mouse"
        assert body["imageUrl"] == sample_product_data["imageUrl"]
        assert body["price"] == 29.8
        assert body["id"]

    def test_create_product_with_invalid_url(self, client, sample_product_data):
        response = client.post("/products", json=dict(sample_product_data, imageUrl="nope"))

        assert response.status_code == 400
        assert response.json() == {
            "detail": "imageUrl must be a valid URL",
            "code": "VALIDATION_ERROR",
            "field": "imageUrl",
        }

    def test_create_product_with_negative_price(self, client, sample_product_data):
        response = client.post("/products", json=dict(sample_product_data, price=-5))

        assert response.status_code == 400
        assert response.json()["field"] == "price"

    def test_create_product_with_huge_price(self, client, sample_product_data):
        response = client.post("/products", json=dict(sample_product_data, price=1e30))

        assert response.status_code == 400
        assert response.json() == {
            "detail": "price must not be greater than 99999999.99",
            "code": "VALIDATION_ERROR",
            "field": "price",
        }

    def test_create_product_with_non_numeric_price(self, client, sample_product_data):
        response = client.post("/products", json=dict(sample_product_data, price="cheap"))

        assert response.status_code == 400
        assert response.json()["field"] == "price"

    def test_list_products(self, client, sample_product_data):
        client.post("/products", json=dict(sample_product_data, name="Zebra lamp"))
        client.post("/products", json=dict(sample_product_data, name="Acoustic panel"))

        response = client.get("/products")

        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["Acoustic panel", "Zebra lamp"]

    def test_get_product(self, client, sample_product_data):
        created = client.post("/products", json=sample_product_data).json()

        response = client.get(f"/products/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_unknown_product(self, client):
        response = client.get(f"/products/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    def test_patch_product(self, client, sample_product_data):
        created = client.post("/products", json=sample_product_data).json()

        response = client.patch(f"/products/{created['id']}", json={"price": "12.345"})

        assert response.status_code == 200
        assert response.json()["price"] == 12.35
        assert response.json()["name"] == created["name"]

    def test_delete_product_detaches_it_from_orders(self, client, sample_product_data, sample_order_data):
        """Test deleting a product removes it from orders that referenced it"""
        product = client.post("/products", json=sample_product_data).json()
        order = client.post("/orders", json=dict(sample_order_data, productIds=[product["id"]])).json()

        response = client.delete(f"/products/{product['id']}")

        assert response.status_code == 204
        assert client.get(f"/products/{product['id']}").status_code == 404
        assert client.get(f"/orders/{order['id']}").json()["products"] == []

    def test_delete_unknown_product(self, client):
        response = client.delete(f"/products/{uuid4()}")

        assert response.status_code == 404
