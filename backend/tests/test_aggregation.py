"""Unit tests for folding product join rows into product entities."""

from decimal import Decimal

from catalog.services.aggregation import fold_product_rows


def test_product_with_photos_gets_every_photo_in_row_order(product_row):
    """N photo rows should produce exactly N photos, in the order returned."""
    rows = [
        product_row(1, photo_id=11, photo="a.jpg"),
        product_row(1, photo_id=12, photo="b.jpg"),
        product_row(1, photo_id=13, photo="c.jpg"),
    ]

    products = fold_product_rows(rows)

    assert len(products) == 1
    assert products[0].id == 1
    assert products[0].photos == ["a.jpg", "b.jpg", "c.jpg"]


def test_product_without_photos_has_empty_list(product_row):
    """A product whose join row has no photo is kept, with photos == []."""
    products = fold_product_rows([product_row(5)])

    assert len(products) == 1
    assert products[0].photos == []
    assert products[0].model_dump()["photos"] == []


def test_no_rows_gives_no_products():
    assert fold_product_rows([]) == []


def test_products_come_back_in_first_seen_order(product_row):
    rows = [
        product_row(3, photo_id=31, photo="3a.jpg"),
        product_row(1),
        product_row(3, photo_id=32, photo="3b.jpg"),
        product_row(2, photo_id=21, photo="2a.jpg"),
    ]

    products = fold_product_rows(rows)

    assert [p.id for p in products] == [3, 1, 2]
    assert products[0].photos == ["3a.jpg", "3b.jpg"]


def test_scalars_come_from_the_first_row(product_row):
    """Later rows for the same product never overwrite price or inventory."""
    rows = [
        product_row(1, price=Decimal("12.00"), quantity=7, warehouse_name="North"),
        product_row(1, price=Decimal("8.00"), quantity=99, warehouse_name="South"),
    ]

    product = fold_product_rows(rows)[0]

    assert product.price == Decimal("12.00")
    assert product.quantity == 7
    assert product.warehouse_name == "North"


def test_price_fan_out_does_not_duplicate_photos(product_row):
    """Two price rows x three photos = six rows, but still three photos."""
    rows = []
    for price in (Decimal("15.00"), Decimal("10.00")):
        for photo_id, photo in ((1, "a.jpg"), (2, "b.jpg"), (3, "c.jpg")):
            rows.append(product_row(1, price=price, photo_id=photo_id, photo=photo))

    product = fold_product_rows(rows)[0]

    assert product.photos == ["a.jpg", "b.jpg", "c.jpg"]
    assert product.price == Decimal("15.00")


def test_distinct_photo_rows_with_same_filename_are_kept(product_row):
    rows = [
        product_row(1, photo_id=1, photo="same.jpg"),
        product_row(1, photo_id=2, photo="same.jpg"),
    ]

    assert fold_product_rows(rows)[0].photos == ["same.jpg", "same.jpg"]


def test_rows_without_photo_id_are_deduplicated_by_filename(product_row):
    rows = [
        product_row(1, photo="a.jpg"),
        product_row(1, photo="a.jpg"),
        product_row(1, photo="b.jpg"),
    ]
    del rows[0]["photo_id"]

    assert fold_product_rows(rows)[0].photos == ["a.jpg", "b.jpg"]
