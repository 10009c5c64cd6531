"""Price history. The row with the latest effective_date is the current price."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Numeric, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.db.base import Base
from catalog.models.mixins import IntegerPrimaryKeyMixin


class Price(IntegerPrimaryKeyMixin, Base):
    __tablename__ = "price"

    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    effective_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    product_id: Mapped[int] = mapped_column(Integer, ForeignKey("product.id"), nullable=False, index=True)

    product = relationship("Product", back_populates="prices")

    def __repr__(self) -> str:
        return f"<Price product={self.product_id} price={self.price}>"
