"""Initial database schema - category, warehouse, product, price, photo, inventory, customers, orders

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # --- Categories ---
    op.create_table(
        "category",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False, unique=True),
    )

    # --- Warehouses ---
    op.create_table(
        "warehouse",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("warehouse_name", sa.String(255), nullable=False, unique=True),
    )

    # --- Products ---
    op.create_table(
        "product",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("product_name", sa.String(255), nullable=False),
        sa.Column("type_id", sa.Integer),
        sa.Column("color_id", sa.Integer),
        sa.Column("size", sa.String(100)),
        sa.Column("mo_number", sa.String(100)),
        sa.Column("microwave_safe", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("description", sa.Text),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.text("true")),
        sa.Column("category_id", sa.Integer, sa.ForeignKey("category.id"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_product_product_name", "product", ["product_name"])
    op.create_index("ix_product_type_id", "product", ["type_id"])
    op.create_index("ix_product_color_id", "product", ["color_id"])
    op.create_index("ix_product_created_at", "product", ["created_at"])

    # --- Prices ---
    op.create_table(
        "price",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("effective_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("product_id", sa.Integer, sa.ForeignKey("product.id"), nullable=False),
    )
    op.create_index("ix_price_product_id", "price", ["product_id"])

    # --- Photos ---
    op.create_table(
        "photo",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("photo", sa.String(255), nullable=False),
        sa.Column("product_id", sa.Integer, sa.ForeignKey("product.id"), nullable=False),
    )
    op.create_index("ix_photo_product_id", "photo", ["product_id"])

    # --- Inventory ---
    op.create_table(
        "inventory",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("quantity", sa.Integer, nullable=False, server_default=sa.text("0")),
        sa.Column("reorder_level", sa.Integer, nullable=False, server_default=sa.text("0")),
        sa.Column("product_id", sa.Integer, sa.ForeignKey("product.id"), nullable=False),
        sa.Column("warehouse_id", sa.Integer, sa.ForeignKey("warehouse.id", ondelete="SET NULL")),
    )
    op.create_index("ix_inventory_product_id", "inventory", ["product_id"])
    op.create_index("ix_inventory_warehouse_id", "inventory", ["warehouse_id"])

    # --- Customers ---
    op.create_table(
        "customers",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
    )

    # --- Orders ---
    op.create_table(
        "orders",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("quantity", sa.Integer, nullable=False),
        sa.Column("total", sa.Numeric(12, 2), nullable=False),
        sa.Column("customer_id", sa.Integer, sa.ForeignKey("customers.id"), nullable=False),
        sa.Column("product_id", sa.Integer, sa.ForeignKey("product.id"), nullable=False),
    )
    op.create_index("ix_orders_customer_id", "orders", ["customer_id"])
    op.create_index("ix_orders_product_id", "orders", ["product_id"])


def downgrade() -> None:
    op.drop_table("orders")
    op.drop_table("customers")
    op.drop_table("inventory")
    op.drop_table("photo")
    op.drop_table("price")
    op.drop_table("product")
    op.drop_table("warehouse")
    op.drop_table("category")
