from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.db.base import Base
from catalog.models.mixins import IntegerPrimaryKeyMixin


class Photo(IntegerPrimaryKeyMixin, Base):
    __tablename__ = "photo"

    # Filename assigned by the storage sink, relative to UPLOAD_DIR
    photo: Mapped[str] = mapped_column(String(255), nullable=False)

    product_id: Mapped[int] = mapped_column(Integer, ForeignKey("product.id"), nullable=False, index=True)

    product = relationship("Product", back_populates="photos")

    def __repr__(self) -> str:
        return f"<Photo product={self.product_id} {self.photo}>"
