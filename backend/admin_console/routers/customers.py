"""Customers page API."""

from fastapi import Depends, HTTPException, status

from .. import models, schemas
from ..deps import get_customers
from ..exceptions import RecordNotFoundError
from ..services.controllers import CustomersController
from .pages import page_router

router = page_router("customers", models.Customer, "Customers", get_customers)


@router.get("/stats", response_model=schemas.CustomerStats)
def get_customer_stats(customers: CustomersController = Depends(get_customers)):
    return customers.stats()


@router.get("/{customer_id}", response_model=models.Customer)
def get_customer(customer_id: str, customers: CustomersController = Depends(get_customers)):
    try:
        return customers.get(customer_id)
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found") from exc
