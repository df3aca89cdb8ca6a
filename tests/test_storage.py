"""
Tests for the SQL access functions, run against a temporary database.
"""

import sqlite3
from decimal import Decimal

import pytest

from products_api import storage
from products_api.models import ProductPayload
from products_api.schema import clear_tables
from products_api.storage import ProductNotFound


def insert(conn, *products):
    conn.executemany("INSERT INTO products (name, price) VALUES (?, ?)", products)
    conn.commit()


class TestListProducts:

    def test_empty(self, conn):
        assert storage.list_products(conn, 10, 0) == []

    def test_limit_and_offset(self, conn):
        insert(conn, ("a", 1), ("b", 2), ("c", 3), ("d", 4))

        products = storage.list_products(conn, 2, 1)

        assert [p.name for p in products] == ["b", "c"]

    def test_ordered_by_id(self, conn):
        insert(conn, ("z", 1), ("a", 2))

        assert [p.id for p in storage.list_products(conn, 10, 0)] == [1, 2]


class TestGetProduct:

    def test_found(self, conn):
        insert(conn, ("Lamp", "19.90"))

        product = storage.get_product(conn, 1)

        assert product.id == 1
        assert product.name == "Lamp"
        assert product.price == Decimal("19.90")

    def test_not_found(self, conn):
        with pytest.raises(ProductNotFound) as excinfo:
            storage.get_product(conn, 7)
        assert excinfo.value.product_id == 7


class TestCreateProduct:

    def test_assigns_id(self, conn):
        first = storage.create_product(conn, ProductPayload(name="one", price=1))
        second = storage.create_product(conn, ProductPayload(name="two", price=2))

        assert (first.id, second.id) == (1, 2)
        assert second.price == Decimal("2.00")

    def test_returned_product_matches_stored_row(self, conn):
        created = storage.create_product(conn, ProductPayload(name="lamp", price=0.125))

        assert created == storage.get_product(conn, created.id)
        assert created.price == Decimal("0.13")

    def test_committed(self, conn, db_path):
        storage.create_product(conn, ProductPayload(name="kept", price="3.50"))

        other = sqlite3.connect(db_path)
        row = other.execute("SELECT name, price FROM products").fetchone()
        other.close()
        assert row == ("kept", 3.5)

    def test_default_price(self, conn):
        product = storage.create_product(conn, ProductPayload(name="free"))

        assert product.price == Decimal("0.00")

    def test_null_name_rejected_by_table(self, conn):
        payload = ProductPayload.model_construct(name=None, price=Decimal("1.00"))

        with pytest.raises(sqlite3.IntegrityError):
            storage.create_product(conn, payload)


class TestUpdateProduct:

    def test_updates_fields(self, conn):
        insert(conn, ("old", 1))

        product = storage.update_product(conn, 1, ProductPayload(name="new", price=2.5))

        assert (product.id, product.name, product.price) == (1, "new", Decimal("2.50"))
        assert storage.get_product(conn, 1) == product

    def test_zero_rows_affected_is_not_found(self, conn):
        insert(conn, ("only", 1))

        with pytest.raises(ProductNotFound):
            storage.update_product(conn, 2, ProductPayload(name="ghost"))

        assert storage.get_product(conn, 1).name == "only"


class TestDeleteProduct:

    def test_deletes_row(self, conn):
        insert(conn, ("doomed", 1))

        storage.delete_product(conn, 1)

        with pytest.raises(ProductNotFound):
            storage.get_product(conn, 1)

    def test_zero_rows_affected_is_not_found(self, conn):
        with pytest.raises(ProductNotFound):
            storage.delete_product(conn, 1)

    def test_second_delete_is_not_found(self, conn):
        insert(conn, ("doomed", 1))
        storage.delete_product(conn, 1)

        with pytest.raises(ProductNotFound):
            storage.delete_product(conn, 1)


class TestSchema:

    def test_clear_tables_restarts_ids(self, conn):
        insert(conn, ("a", 1), ("b", 2))

        clear_tables(conn.cursor())
        conn.commit()

        assert storage.create_product(conn, ProductPayload(name="fresh")).id == 1

    def test_price_range_enforced(self, conn):
        with pytest.raises(sqlite3.IntegrityError):
            storage.create_product(conn, ProductPayload(name="dear", price=100000000))
