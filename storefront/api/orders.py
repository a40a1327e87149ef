"""
Orders API Endpoints
Handles customer orders and the products they reference

Author: TM3
Date: 2026-03-02
"""
from fastapi import APIRouter, Depends, Response, status
from uuid import UUID

from storefront.api.dependencies import get_order_service
from storefront.domain.order import OrderCreate, OrderUpdate
from storefront.services.order_service import OrderService

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_order(
    payload: OrderCreate,
    service: OrderService = Depends(get_order_service),
):
    """
    Create an order

    Body: fullName, email, phoneNumber, address, productIds.
    Returns 404 naming the productIds that do not exist.
    """
    return service.create(payload).to_dict()


@router.get("")
def get_orders(service: OrderService = Depends(get_order_service)):
    """Get all orders with their products"""
    return [order.to_dict() for order in service.find_all()]


@router.get("/{order_id}")
def get_order(order_id: UUID, service: OrderService = Depends(get_order_service)):
    """Get a single order with its products"""
    return service.find_one(order_id).to_dict()


@router.patch("/{order_id}")
def update_order(
    order_id: UUID,
    payload: OrderUpdate,
    service: OrderService = Depends(get_order_service),
):
    """
    Update an order

    Omitted fields stay unchanged. Sending productIds (even []) replaces
    the order's products; the request fails without changes if any id is
    unknown.
    """
    return service.update(order_id, payload).to_dict()


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_order(order_id: UUID, service: OrderService = Depends(get_order_service)):
    """Delete an order and its product associations"""
    service.remove(order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
