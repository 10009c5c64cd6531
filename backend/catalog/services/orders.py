"""Order CRUD with server-side totals."""

import logging
from decimal import Decimal, ROUND_HALF_UP

from sqlalchemy import select, insert, update, delete, func

from catalog.core.errors import NotFoundError, ValidationError
from catalog.db.executor import Database
from catalog.models import Customer, Order, Price, Product
from catalog.schemas.order import OrderResponse, OrderWrite
from catalog.services.products import current_price_query

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def compute_order_total(price: Decimal, quantity: int) -> Decimal:
    return (Decimal(price) * quantity).quantize(CENTS, rounding=ROUND_HALF_UP)


class OrderService:
    """Orders are not price-frozen: every create or update prices the order
    at the product's current price, not the price when it was first placed."""

    def __init__(self, db: Database):
        self.db = db

    async def list_orders(self) -> list[OrderResponse]:
        latest_price = (
            select(Price.price)
            .where(Price.product_id == Order.product_id)
            .order_by(Price.effective_date.desc(), Price.id.desc())
            .limit(1)
            .correlate(Order)
            .scalar_subquery()
        )
        rows = await self.db.fetch_all(
            select(
                Order.id,
                Order.quantity,
                Customer.name.label("customer_name"),
                Product.product_name,
                latest_price.label("product_price"),
                Order.total,
            )
            .join(Customer, Order.customer_id == Customer.id)
            .join(Product, Order.product_id == Product.id)
            .order_by(Order.id)
        )
        return [OrderResponse.model_validate(dict(row)) for row in rows]

    async def create_order(self, data: OrderWrite) -> int:
        await self._check_customer(data.customer_id)
        total = await self._price_order(data)
        order_id = await self.db.execute_returning(
            insert(Order)
            .values(
                customer_id=data.customer_id,
                product_id=data.product_id,
                quantity=data.quantity,
                total=total,
            )
            .returning(Order.id)
        )
        logger.info(f"Created order {order_id}: {data.quantity} x product {data.product_id} = {total}")
        return order_id

    async def update_order(self, order_id: int, data: OrderWrite) -> None:
        found = await self.db.scalar(select(Order.id).where(Order.id == order_id))
        if found is None:
            raise NotFoundError("Order not found")

        await self._check_customer(data.customer_id)
        total = await self._price_order(data)
        await self.db.execute(
            update(Order)
            .where(Order.id == order_id)
            .values(
                customer_id=data.customer_id,
                product_id=data.product_id,
                quantity=data.quantity,
                total=total,
            )
        )
        logger.info(f"Updated order {order_id}, total now {total}")

    async def delete_order(self, order_id: int) -> None:
        deleted = await self.db.execute(delete(Order).where(Order.id == order_id))
        if not deleted:
            raise NotFoundError("Order not found")
        logger.info(f"Deleted order {order_id}")

    async def _check_customer(self, customer_id: int) -> None:
        count = await self.db.scalar(
            select(func.count()).select_from(Customer).where(Customer.id == customer_id)
        )
        if not count:
            raise ValidationError("Invalid customer_id")

    async def _price_order(self, data: OrderWrite) -> Decimal:
        price = await self.db.scalar(current_price_query(data.product_id))
        if price is None:
            raise ValidationError(f"No price found for product {data.product_id}")
        return compute_order_total(price, data.quantity)
