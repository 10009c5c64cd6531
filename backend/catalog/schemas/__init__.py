from catalog.schemas.product import (
    ProductWrite, ProductDetail, ProductListResponse, MessageResponse,
    CategoryResponse, WarehouseResponse,
)
from catalog.schemas.order import OrderWrite, OrderResponse

__all__ = [
    "ProductWrite", "ProductDetail", "ProductListResponse", "MessageResponse",
    "CategoryResponse", "WarehouseResponse",
    "OrderWrite", "OrderResponse",
]
