"""Fold flat product join rows into nested product entities.

The list and detail queries return one row per product x photo x price x
inventory combination. ``fold_product_rows`` collapses them into one
``ProductDetail`` per product id in a single pass:

* the first row seen for an id provides every scalar column, including
  price, quantity, reorder_level and warehouse_name; later rows for the
  same id never overwrite them;
* every row carrying a photo appends it to that product's photo list,
  unless the same photo row (by ``photo_id``) was already appended.

The second rule keeps the photo list equal to the distinct photo rows even
when a product has several price or inventory rows and the join repeats
each photo once per extra row.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from catalog.schemas.product import ProductDetail

ENTITY_FIELDS = tuple(name for name in ProductDetail.model_fields if name != "photos")


def fold_product_rows(rows: Iterable[Mapping[str, Any]]) -> list[ProductDetail]:
    products: dict[int, ProductDetail] = {}
    seen_photos: dict[int, set] = {}

    for row in rows:
        product_id = row["id"]
        product = products.get(product_id)
        if product is None:
            product = ProductDetail(**{name: row.get(name) for name in ENTITY_FIELDS})
            products[product_id] = product
            seen_photos[product_id] = set()

        photo = row.get("photo")
        if photo is None:
            continue
        # Rows without a photo id (hand-built rows) fall back to the filename
        photo_key = row.get("photo_id")
        if photo_key is None:
            photo_key = photo
        if photo_key in seen_photos[product_id]:
            continue
        seen_photos[product_id].add(photo_key)
        product.photos.append(photo)

    return list(products.values())
