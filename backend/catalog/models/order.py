"""Order model."""

from decimal import Decimal

from sqlalchemy import Numeric, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.db.base import Base
from catalog.models.mixins import IntegerPrimaryKeyMixin


class Order(IntegerPrimaryKeyMixin, Base):
    __tablename__ = "orders"

    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    # price x quantity, recomputed from the current price on every update
    total: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    customer_id: Mapped[int] = mapped_column(Integer, ForeignKey("customers.id"), nullable=False, index=True)
    product_id: Mapped[int] = mapped_column(Integer, ForeignKey("product.id"), nullable=False, index=True)

    customer = relationship("Customer", back_populates="orders")
    product = relationship("Product")

    def __repr__(self) -> str:
        return f"<Order {self.id} total={self.total}>"
