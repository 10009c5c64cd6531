"""Distinct values and reference rows used to fill product form pickers."""

from sqlalchemy import select

from catalog.db.executor import Database
from catalog.models import Category, Product, Warehouse
from catalog.schemas.product import CategoryResponse, WarehouseResponse


async def list_mo_numbers(db: Database) -> list[str]:
    rows = await db.fetch_all(
        select(Product.mo_number)
        .where(Product.mo_number.is_not(None))
        .distinct()
        .order_by(Product.mo_number)
    )
    return [row["mo_number"] for row in rows]


async def list_categories(db: Database) -> list[CategoryResponse]:
    rows = await db.fetch_all(select(Category.id, Category.name).order_by(Category.name))
    return [CategoryResponse.model_validate(dict(row)) for row in rows]


async def list_warehouses(db: Database) -> list[WarehouseResponse]:
    rows = await db.fetch_all(
        select(Warehouse.id, Warehouse.warehouse_name).order_by(Warehouse.warehouse_name)
    )
    return [WarehouseResponse.model_validate(dict(row)) for row in rows]
