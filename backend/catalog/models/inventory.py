"""Inventory and warehouse models."""

from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.db.base import Base
from catalog.models.mixins import IntegerPrimaryKeyMixin


class Warehouse(IntegerPrimaryKeyMixin, Base):
    __tablename__ = "warehouse"

    warehouse_name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    inventory = relationship("Inventory", back_populates="warehouse")

    def __repr__(self) -> str:
        return f"<Warehouse {self.warehouse_name}>"


class Inventory(IntegerPrimaryKeyMixin, Base):
    __tablename__ = "inventory"

    quantity: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    reorder_level: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    product_id: Mapped[int] = mapped_column(Integer, ForeignKey("product.id"), nullable=False, index=True)
    warehouse_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("warehouse.id", ondelete="SET NULL"), index=True
    )

    product = relationship("Product", back_populates="inventory")
    warehouse = relationship("Warehouse", back_populates="inventory")

    def __repr__(self) -> str:
        return f"<Inventory product={self.product_id} qty={self.quantity}>"
