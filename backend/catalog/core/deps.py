"""Dependency injection: per-request executor, storage sink and services."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.config import settings
from catalog.db.base import get_db
from catalog.db.executor import Database
from catalog.services.orders import OrderService
from catalog.services.products import ProductService
from catalog.services.storage import PhotoStorage


def get_database(session: AsyncSession = Depends(get_db)) -> Database:
    return Database(session)


def get_storage() -> PhotoStorage:
    return PhotoStorage(settings.UPLOAD_DIR)


def get_product_service(
    db: Database = Depends(get_database),
    storage: PhotoStorage = Depends(get_storage),
) -> ProductService:
    return ProductService(db, storage)


def get_order_service(db: Database = Depends(get_database)) -> OrderService:
    return OrderService(db)
