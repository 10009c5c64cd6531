"""Shared test doubles for the executor, the storage sink and join rows."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from catalog.db.executor import Database
from catalog.services.storage import PhotoStorage


@pytest.fixture
def mock_db():
    return AsyncMock(spec=Database)


@pytest.fixture
def mock_storage():
    storage = MagicMock(spec=PhotoStorage)
    storage.delete.return_value = True
    return storage


@pytest.fixture
def product_row():
    """Factory for one flat row of the product/photo/price/inventory join."""

    def make(product_id=1, **overrides):
        row = {
            "id": product_id,
            "product_name": f"Product {product_id}",
            "type_id": 1,
            "color_id": 2,
            "category_id": 3,
            "size": "350ml",
            "mo_number": f"MO-{product_id:03d}",
            "microwave_safe": True,
            "description": None,
            "is_active": True,
            "created_at": datetime(2024, 1, product_id, tzinfo=timezone.utc),
            "updated_at": datetime(2024, 1, product_id, tzinfo=timezone.utc),
            "price": Decimal("9.90"),
            "photo_id": None,
            "photo": None,
            "quantity": 100,
            "reorder_level": 10,
            "warehouse_name": "Main",
        }
        row.update(overrides)
        return row

    return make


@pytest.fixture
def executed_sql():
    """SQL text of every write sent to the executor, in call order."""

    def collect(db):
        return [
            str(args[0])
            for name, args, kwargs in db.mock_calls
            if name in ("execute", "execute_returning")
        ]

    return collect
