"""Product model."""

from sqlalchemy import String, Text, Boolean, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.db.base import Base
from catalog.models.mixins import IntegerPrimaryKeyMixin, TimestampMixin


class Product(IntegerPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "product"

    product_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    type_id: Mapped[int | None] = mapped_column(Integer, index=True)
    color_id: Mapped[int | None] = mapped_column(Integer, index=True)
    size: Mapped[str | None] = mapped_column(String(100))
    mo_number: Mapped[str | None] = mapped_column(String(100))
    microwave_safe: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # No ON DELETE cascades: children are removed explicitly before the product
    category_id: Mapped[int] = mapped_column(Integer, ForeignKey("category.id"), nullable=False)

    # Relationships
    category = relationship("Category", back_populates="products")
    prices = relationship("Price", back_populates="product")
    photos = relationship("Photo", back_populates="product")
    inventory = relationship("Inventory", back_populates="product", uselist=False)

    def __repr__(self) -> str:
        return f"<Product {self.id}: {self.product_name}>"
