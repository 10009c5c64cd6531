"""Order CRUD endpoints. Totals are always computed server-side."""

from fastapi import APIRouter, Depends, status

from catalog.core.deps import get_order_service
from catalog.schemas.order import OrderWrite, OrderResponse
from catalog.schemas.product import MessageResponse
from catalog.services.orders import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("", response_model=list[OrderResponse])
async def list_orders(service: OrderService = Depends(get_order_service)):
    return await service.list_orders()


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_order(body: OrderWrite, service: OrderService = Depends(get_order_service)):
    order_id = await service.create_order(body)
    return MessageResponse(message="Order created successfully", id=order_id)


@router.put("/{order_id}", response_model=MessageResponse)
async def update_order(order_id: int, body: OrderWrite, service: OrderService = Depends(get_order_service)):
    await service.update_order(order_id, body)
    return MessageResponse(message="Order updated successfully", id=order_id)


@router.delete("/{order_id}", response_model=MessageResponse)
async def delete_order(order_id: int, service: OrderService = Depends(get_order_service)):
    await service.delete_order(order_id)
    return MessageResponse(message="Order deleted successfully", id=order_id)
