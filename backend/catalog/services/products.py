"""Product aggregation queries and product mutations."""

import logging

from fastapi import UploadFile
from sqlalchemy import select, insert, update, delete, func, distinct
from sqlalchemy.sql import Select

from catalog.core.config import settings
from catalog.core.errors import CatalogError, NotFoundError, ValidationError
from catalog.db.executor import Database
from catalog.models import Category, Inventory, Order, Photo, Price, Product, Warehouse
from catalog.schemas.product import ProductDetail, ProductListResponse, ProductWrite
from catalog.services.aggregation import fold_product_rows
from catalog.services.storage import PhotoStorage

logger = logging.getLogger(__name__)

PRODUCT_COLUMNS = (
    "id", "product_name", "type_id", "color_id", "category_id", "size", "mo_number",
    "microwave_safe", "description", "is_active", "created_at", "updated_at",
)
PRODUCT_FIELDS = (
    "product_name", "type_id", "color_id", "category_id", "size", "mo_number",
    "microwave_safe", "description", "is_active",
)


def _escape_like(s: str) -> str:
    """Escape SQL LIKE wildcards in user input."""
    return s.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def product_filters(
    product_name_like: str | None = None,
    type_id: int | None = None,
    color_id: int | None = None,
) -> list:
    """Conjunction of the filters that were actually supplied."""
    conditions = []
    if product_name_like:
        conditions.append(Product.product_name.like(f"%{_escape_like(product_name_like)}%", escape="\\"))
    if type_id is not None:
        conditions.append(Product.type_id == type_id)
    if color_id is not None:
        conditions.append(Product.color_id == color_id)
    return conditions


def aggregate_query(p) -> Select:
    """Join photo, price and inventory/warehouse rows onto the products in ``p``.

    Rows come back grouped per product, newest product first. Within a product
    the current price sorts first and photos follow insertion order.
    """
    return (
        select(
            *(p.c[name] for name in PRODUCT_COLUMNS),
            Price.price,
            Photo.id.label("photo_id"),
            Photo.photo,
            Inventory.quantity,
            Inventory.reorder_level,
            Warehouse.warehouse_name,
        )
        .select_from(p)
        .outerjoin(Photo, Photo.product_id == p.c.id)
        .outerjoin(Price, Price.product_id == p.c.id)
        .outerjoin(Inventory, Inventory.product_id == p.c.id)
        .outerjoin(Warehouse, Inventory.warehouse_id == Warehouse.id)
        .order_by(
            p.c.created_at.desc(),
            p.c.id.desc(),
            Price.effective_date.desc(),
            Price.id.desc(),
            Photo.id,
        )
    )


def current_price_query(product_id: int) -> Select:
    return (
        select(Price.price)
        .where(Price.product_id == product_id)
        .order_by(Price.effective_date.desc(), Price.id.desc())
        .limit(1)
    )


class ProductService:
    def __init__(self, db: Database, storage: PhotoStorage):
        self.db = db
        self.storage = storage

    # ── Queries ──

    async def list_products(
        self,
        page: int,
        limit: int,
        product_name_like: str | None = None,
        type_id: int | None = None,
        color_id: int | None = None,
    ) -> ProductListResponse:
        if page < 1 or limit < 1:
            raise ValidationError("Page and limit must be greater than 0")

        conditions = product_filters(product_name_like, type_id, color_id)

        # Paginate product identities before the join multiplies rows
        page_products = (
            select(Product)
            .where(*conditions)
            .order_by(Product.created_at.desc(), Product.id.desc())
            .limit(limit)
            .offset((page - 1) * limit)
            .subquery("p")
        )
        rows = await self.db.fetch_all(aggregate_query(page_products))

        count_query = select(func.count(distinct(Product.id))).where(*conditions)
        total = await self.db.scalar(count_query) or 0

        return ProductListResponse(
            products=fold_product_rows(rows),
            totalCount=total,
            page=page,
            limit=limit,
        )

    async def get_product(self, product_id: int) -> ProductDetail:
        p = Product.__table__.alias("p")
        rows = await self.db.fetch_all(aggregate_query(p).where(p.c.id == product_id))
        products = fold_product_rows(rows)
        if not products:
            raise NotFoundError("Product not found")
        return products[0]

    # ── Mutations ──
    # Each statement commits on its own. A failure part way through leaves
    # the statements before it in place; nothing is rolled back.

    async def create_product(self, data: ProductWrite, photos: list[UploadFile]) -> int:
        if data.price is None:
            raise ValidationError("price is required")
        self._validate_photos(photos)
        await self._check_category(data.category_id)
        await self._check_warehouse(data.warehouse_id)

        filenames = await self._store_photos(photos)
        try:
            product_id = await self._insert_product(data, filenames)
        except CatalogError:
            self._remove_files(filenames)
            raise

        logger.info(f"Created product {product_id} with {len(filenames)} photo(s)")
        return product_id

    async def _insert_product(self, data: ProductWrite, filenames: list[str]) -> int:
        product_id = await self.db.execute_returning(
            insert(Product)
            .values(
                **data.model_dump(include=set(PRODUCT_FIELDS)),
                created_at=func.now(),
                updated_at=func.now(),
            )
            .returning(Product.id)
        )
        await self.db.execute(
            insert(Price).values(product_id=product_id, price=data.price, effective_date=func.now())
        )
        for filename in filenames:
            await self.db.execute(insert(Photo).values(photo=filename, product_id=product_id))
        await self.db.execute(
            insert(Inventory).values(
                product_id=product_id,
                quantity=data.quantity,
                reorder_level=data.reorder_level,
                warehouse_id=data.warehouse_id,
            )
        )
        return product_id

    async def update_product(self, product_id: int, data: ProductWrite, photos: list[UploadFile]) -> None:
        """Overwrite every product and inventory field.

        Photos are replaced as a whole set, and only when new files are
        supplied: an update without files keeps the existing photos.
        A supplied price that differs from the current one is appended to
        the price history and becomes the current price.
        """
        await self._ensure_exists(product_id)
        self._validate_photos(photos)
        await self._check_category(data.category_id)
        await self._check_warehouse(data.warehouse_id)

        await self.db.execute(
            update(Product)
            .where(Product.id == product_id)
            .values(**data.model_dump(include=set(PRODUCT_FIELDS)), updated_at=func.now())
        )

        inventory_values = {
            "quantity": data.quantity,
            "reorder_level": data.reorder_level,
            "warehouse_id": data.warehouse_id,
        }
        updated = await self.db.execute(
            update(Inventory).where(Inventory.product_id == product_id).values(**inventory_values)
        )
        if not updated:
            await self.db.execute(insert(Inventory).values(product_id=product_id, **inventory_values))

        if data.price is not None:
            current = await self.db.scalar(current_price_query(product_id))
            if current is None or current != data.price:
                await self.db.execute(
                    insert(Price).values(product_id=product_id, price=data.price, effective_date=func.now())
                )

        if photos:
            filenames = await self._store_photos(photos)
            try:
                old_photos = await self.db.fetch_all(select(Photo.photo).where(Photo.product_id == product_id))
                await self.db.execute(delete(Photo).where(Photo.product_id == product_id))
                for filename in filenames:
                    await self.db.execute(insert(Photo).values(photo=filename, product_id=product_id))
            except CatalogError:
                self._remove_files(filenames)
                raise
            self._remove_files(row["photo"] for row in old_photos)
            logger.info(f"Replaced {len(old_photos)} photo(s) of product {product_id} with {len(filenames)}")

        logger.info(f"Updated product {product_id}")

    async def delete_product(self, product_id: int) -> None:
        await self._ensure_exists(product_id)
        await self._check_no_orders(product_id)

        photos = await self.db.fetch_all(
            select(Photo.id, Photo.photo).where(Photo.product_id == product_id)
        )
        self._remove_files(row["photo"] for row in photos)

        # Children before the parent row
        await self.db.execute(delete(Photo).where(Photo.product_id == product_id))
        await self.db.execute(delete(Price).where(Price.product_id == product_id))
        await self.db.execute(delete(Inventory).where(Inventory.product_id == product_id))
        await self.db.execute(delete(Product).where(Product.id == product_id))

        logger.info(f"Deleted product {product_id} and {len(photos)} photo(s)")

    # ── Helpers ──

    async def _ensure_exists(self, product_id: int) -> None:
        found = await self.db.scalar(select(Product.id).where(Product.id == product_id))
        if found is None:
            raise NotFoundError("Product not found")

    async def _check_category(self, category_id: int) -> None:
        count = await self.db.scalar(
            select(func.count()).select_from(Category).where(Category.id == category_id)
        )
        if not count:
            raise ValidationError("Invalid category_id")

    async def _check_warehouse(self, warehouse_id: int | None) -> None:
        if warehouse_id is None:
            return
        count = await self.db.scalar(
            select(func.count()).select_from(Warehouse).where(Warehouse.id == warehouse_id)
        )
        if not count:
            raise ValidationError("Invalid warehouse_id")

    async def _check_no_orders(self, product_id: int) -> None:
        count = await self.db.scalar(
            select(func.count()).select_from(Order).where(Order.product_id == product_id)
        )
        if count:
            raise ValidationError("Product has orders and cannot be deleted")

    def _validate_photos(self, photos: list[UploadFile]) -> None:
        if len(photos) > settings.MAX_PHOTOS_PER_PRODUCT:
            raise ValidationError(f"At most {settings.MAX_PHOTOS_PER_PRODUCT} photos per product")
        for photo in photos:
            self.storage.validate(photo)

    async def _store_photos(self, photos: list[UploadFile]) -> list[str]:
        filenames = []
        try:
            for photo in photos:
                filenames.append(await self.storage.save(photo))
        except CatalogError:
            self._remove_files(filenames)
            raise
        return filenames

    def _remove_files(self, filenames) -> None:
        for filename in filenames:
            self.storage.delete(filename)
