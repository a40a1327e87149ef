"""
Products API Endpoints
Handles product catalog management

Author: TM3
Date: 2026-03-02
"""
from fastapi import APIRouter, Depends, Response, status
from uuid import UUID

from storefront.api.dependencies import get_product_service
from storefront.domain.product import ProductCreate, ProductUpdate
from storefront.services.product_service import ProductService

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_product(
    payload: ProductCreate,
    service: ProductService = Depends(get_product_service),
):
    """Create a product"""
    return service.create(payload).to_dict()


@router.get("")
def get_products(service: ProductService = Depends(get_product_service)):
    """Get all products, ordered by name"""
    return [product.to_dict() for product in service.find_all()]


@router.get("/{product_id}")
def get_product(product_id: UUID, service: ProductService = Depends(get_product_service)):
    """Get a single product by ID"""
    return service.find_one(product_id).to_dict()


@router.patch("/{product_id}")
def update_product(
    product_id: UUID,
    payload: ProductUpdate,
    service: ProductService = Depends(get_product_service),
):
    """
    Update a product

    Only the fields present in the body are changed.
    """
    return service.update(product_id, payload).to_dict()


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: UUID, service: ProductService = Depends(get_product_service)):
    """Delete a product; it is also removed from every order that referenced it"""
    service.remove(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
