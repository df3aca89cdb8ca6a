"""
Shared database schema definitions.
This module provides schema creation functions used by the application,
migrations and tests.
"""


def create_tables(cursor):
    """
    Create the products table.
    This function is idempotent - safe to call multiple times.
    """
    # NUMERIC(10,2) is not range-checked by SQLite, so the CHECK enforces it
    cursor.execute("""
        CREATE TABLE IF NOT EXISTS products (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            price NUMERIC(10,2) NOT NULL DEFAULT 0.00
                CHECK(price > -100000000 AND price < 100000000)
        )
    """)


def drop_tables(cursor):
    """
    Drop the products table.
    """
    cursor.execute("DROP TABLE IF EXISTS products")


def clear_tables(cursor):
    """
    Delete every product and restart the id sequence at 1.
    """
    cursor.execute("DELETE FROM products")
    cursor.execute("DELETE FROM sqlite_sequence WHERE name = 'products'")
