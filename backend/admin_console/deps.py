"""FastAPI dependencies."""

from fastapi import Request

from .console import Console
from .services.controllers import CustomersController, OrdersController, ProductsController


def get_console(request: Request) -> Console:
    return request.app.state.console


def get_orders(request: Request) -> OrdersController:
    return get_console(request).orders


def get_products(request: Request) -> ProductsController:
    return get_console(request).products


def get_customers(request: Request) -> CustomersController:
    return get_console(request).customers
