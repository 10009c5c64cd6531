from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field


# ── Product input ──
class ProductWrite(BaseModel):
    """Full set of writable fields. Updates overwrite every one of them."""
    product_name: str = Field(..., max_length=255)
    type_id: Optional[int] = None
    color_id: Optional[int] = None
    category_id: int
    size: Optional[str] = Field(None, max_length=100)
    mo_number: Optional[str] = Field(None, max_length=100)
    microwave_safe: bool = False
    description: Optional[str] = None
    is_active: bool = True
    price: Optional[Decimal] = Field(None, ge=0)
    quantity: int = Field(default=0, ge=0)
    reorder_level: int = Field(default=0, ge=0)
    warehouse_id: Optional[int] = None


# ── Aggregated product ──
class ProductDetail(BaseModel):
    id: int
    product_name: str
    type_id: Optional[int] = None
    color_id: Optional[int] = None
    category_id: Optional[int] = None
    size: Optional[str] = None
    mo_number: Optional[str] = None
    microwave_safe: bool
    description: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
    price: Optional[Decimal] = None
    quantity: Optional[int] = None
    reorder_level: Optional[int] = None
    warehouse_name: Optional[str] = None
    photos: list[str] = Field(default_factory=list)
    model_config = {"from_attributes": True}


class ProductListResponse(BaseModel):
    products: list[ProductDetail]
    totalCount: int
    page: int
    limit: int


class MessageResponse(BaseModel):
    message: str
    id: Optional[int] = None


# ── Lookups ──
class CategoryResponse(BaseModel):
    id: int
    name: str


class WarehouseResponse(BaseModel):
    id: int
    warehouse_name: str
