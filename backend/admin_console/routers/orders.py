"""Orders page API."""

from fastapi import Depends, HTTPException, status

from .. import models, schemas
from ..deps import get_orders
from ..exceptions import RecordNotFoundError
from ..models import ORDER_STATUSES
from ..services.controllers import OrdersController
from .pages import page_router

router = page_router("orders", models.Order, "Orders", get_orders)


@router.post("/{order_id}/status", response_model=models.Order)
def change_order_status(
    order_id: str,
    payload: schemas.StatusChange,
    orders: OrdersController = Depends(get_orders),
):
    order = orders.change_status(order_id, payload.status)
    if order is None:
        if payload.status not in ORDER_STATUSES:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid order status")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    return order


@router.get("/{order_id}/totals", response_model=schemas.OrderTotals)
def get_order_totals(order_id: str, orders: OrdersController = Depends(get_orders)):
    try:
        return orders.totals(order_id)
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found") from exc


@router.get("/{order_id}", response_model=models.Order)
def get_order(order_id: str, orders: OrdersController = Depends(get_orders)):
    try:
        return orders.get(order_id)
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found") from exc
