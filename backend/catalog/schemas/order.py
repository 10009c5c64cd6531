"""Order schemas for API request/response."""

from decimal import Decimal

from pydantic import BaseModel, Field


class OrderWrite(BaseModel):
    customer_id: int
    product_id: int
    quantity: int = Field(..., gt=0)


class OrderResponse(BaseModel):
    id: int
    quantity: int
    customer_name: str
    product_name: str
    product_price: Decimal | None = None
    total: Decimal
