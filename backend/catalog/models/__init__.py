"""SQLAlchemy models for the catalog service."""

from catalog.models.category import Category
from catalog.models.product import Product
from catalog.models.price import Price
from catalog.models.photo import Photo
from catalog.models.inventory import Inventory, Warehouse
from catalog.models.customer import Customer
from catalog.models.order import Order

__all__ = [
    "Category",
    "Product",
    "Price",
    "Photo",
    "Inventory",
    "Warehouse",
    "Customer",
    "Order",
]
