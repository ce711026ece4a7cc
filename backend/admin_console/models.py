"""Record models held by the in-memory stores."""

from datetime import datetime
from decimal import Decimal
from typing import List, Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, Field, computed_field

OrderStatus = Literal["pending", "paid", "cancelled", "shipped", "delivered"]
PaymentMethod = Literal["credit_card", "paypal", "bank_transfer", "cash"]
ProductStatus = Literal["active", "inactive"]
CustomerStatus = Literal["active", "inactive"]

ORDER_STATUSES = frozenset(get_args(OrderStatus))
PRODUCT_STATUSES = frozenset(get_args(ProductStatus))
CUSTOMER_STATUSES = frozenset(get_args(CustomerStatus))


class RecordBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    created_at: datetime
    updated_at: Optional[datetime] = None


class OrderItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    product_id: str
    product_name: str
    quantity: int = Field(..., gt=0)
    price: Decimal = Field(..., ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> Decimal:
        return self.quantity * self.price


class Order(RecordBase):
    customer_id: str
    customer_name: str
    customer_email: str
    items: List[OrderItem] = Field(default_factory=list)
    status: OrderStatus = "pending"
    payment_method: PaymentMethod = "credit_card"
    shipping_address: str = ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def subtotal(self) -> Decimal:
        return sum((item.total for item in self.items), Decimal(0))


class Product(RecordBase):
    name: str
    description: str
    price: Decimal
    stock: int
    category: str
    sku: str
    status: ProductStatus = "active"
    image: Optional[str] = None


class Customer(RecordBase):
    name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    total_orders: int = 0
    total_spent: Decimal = Decimal(0)
    status: CustomerStatus = "active"
    last_order_date: Optional[datetime] = None
