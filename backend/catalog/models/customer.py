"""Customer model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.db.base import Base
from catalog.models.mixins import IntegerPrimaryKeyMixin


class Customer(IntegerPrimaryKeyMixin, Base):
    __tablename__ = "customers"

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    orders = relationship("Order", back_populates="customer")

    def __repr__(self) -> str:
        return f"<Customer {self.name}>"
