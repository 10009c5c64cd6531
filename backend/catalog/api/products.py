"""Product endpoints: aggregated reads and multipart writes."""

from decimal import Decimal

from fastapi import APIRouter, Depends, File, Form, Query, Response, UploadFile, status

from catalog.core.config import settings
from catalog.core.deps import get_product_service
from catalog.schemas.product import (
    ProductWrite, ProductDetail, ProductListResponse, MessageResponse,
)
from catalog.services.products import ProductService

router = APIRouter(prefix="/products", tags=["products"])


def product_form(
    product_name: str = Form(..., max_length=255),
    category_id: int = Form(...),
    type_id: int | None = Form(None),
    color_id: int | None = Form(None),
    size: str | None = Form(None, max_length=100),
    mo_number: str | None = Form(None, max_length=100),
    microwave_safe: bool = Form(False),
    description: str | None = Form(None),
    is_active: bool = Form(True),
    price: Decimal | None = Form(None, ge=0),
    quantity: int = Form(0, ge=0),
    reorder_level: int = Form(0, ge=0),
    warehouse_id: int | None = Form(None),
) -> ProductWrite:
    """Collect the multipart text fields. Booleans accept 1/0 as well as true/false."""
    return ProductWrite(
        product_name=product_name,
        category_id=category_id,
        type_id=type_id,
        color_id=color_id,
        size=size,
        mo_number=mo_number,
        microwave_safe=microwave_safe,
        description=description,
        is_active=is_active,
        price=price,
        quantity=quantity,
        reorder_level=reorder_level,
        warehouse_id=warehouse_id,
    )


@router.get("", response_model=ProductListResponse)
async def list_products(
    response: Response,
    page: int = Query(1, alias="_page"),
    limit: int = Query(settings.DEFAULT_PAGE_LIMIT, alias="_limit"),
    product_name_like: str | None = None,
    type_id: int | None = None,
    color_id: int | None = None,
    service: ProductService = Depends(get_product_service),
):
    # page/limit bounds are checked by the service so they answer 400, not 422
    result = await service.list_products(
        page=page,
        limit=limit,
        product_name_like=product_name_like,
        type_id=type_id,
        color_id=color_id,
    )
    response.headers["x-total-count"] = str(result.totalCount)
    return result


@router.get("/{product_id}", response_model=ProductDetail)
async def get_product(product_id: int, service: ProductService = Depends(get_product_service)):
    return await service.get_product(product_id)


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    data: ProductWrite = Depends(product_form),
    photos: list[UploadFile] = File(default=[]),
    service: ProductService = Depends(get_product_service),
):
    product_id = await service.create_product(data, photos)
    return MessageResponse(message="Product created successfully", id=product_id)


@router.put("/{product_id}", response_model=MessageResponse)
async def update_product(
    product_id: int,
    data: ProductWrite = Depends(product_form),
    photos: list[UploadFile] = File(default=[]),
    service: ProductService = Depends(get_product_service),
):
    await service.update_product(product_id, data, photos)
    return MessageResponse(message="Product updated successfully", id=product_id)


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    await service.delete_product(product_id)
    return MessageResponse(message="Product deleted successfully", id=product_id)
