"""Category model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.db.base import Base
from catalog.models.mixins import IntegerPrimaryKeyMixin


class Category(IntegerPrimaryKeyMixin, Base):
    __tablename__ = "category"

    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    products = relationship("Product", back_populates="category")

    def __repr__(self) -> str:
        return f"<Category {self.name}>"
