from fastapi import APIRouter, Depends

from catalog.core.deps import get_database
from catalog.db.executor import Database
from catalog.schemas.product import CategoryResponse, WarehouseResponse
from catalog.services import lookups

router = APIRouter(tags=["lookups"])


@router.get("/mo-numbers", response_model=list[str])
async def list_mo_numbers(db: Database = Depends(get_database)):
    return await lookups.list_mo_numbers(db)


@router.get("/categories", response_model=list[CategoryResponse])
async def list_categories(db: Database = Depends(get_database)):
    return await lookups.list_categories(db)


@router.get("/warehouses", response_model=list[WarehouseResponse])
async def list_warehouses(db: Database = Depends(get_database)):
    return await lookups.list_warehouses(db)
