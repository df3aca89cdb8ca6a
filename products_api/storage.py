"""
SQL access to the products table.

Every function runs a single parameterized statement on the connection it is
given. A missing row is reported as ProductNotFound; any other sqlite3.Error
is left to the caller.
"""

from typing import List

from products_api.models import Product, ProductPayload


class ProductNotFound(LookupError):
    """No products row matches the requested id."""

    def __init__(self, product_id: int):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


def list_products(conn, limit: int, offset: int) -> List[Product]:
    """Return up to `limit` products after skipping `offset`, by ascending id."""
    cursor = conn.cursor()
    cursor.execute(
        "SELECT id, name, price FROM products ORDER BY id LIMIT ? OFFSET ?",
        (limit, offset)
    )
    return [Product.from_row(row) for row in cursor.fetchall()]


def get_product(conn, product_id: int) -> Product:
    cursor = conn.cursor()
    cursor.execute(
        "SELECT id, name, price FROM products WHERE id = ?",
        (product_id,)
    )
    row = cursor.fetchone()
    if row is None:
        raise ProductNotFound(product_id)
    return Product.from_row(row)


def create_product(conn, payload: ProductPayload) -> Product:
    """Insert a product and return it with the id the store assigned."""
    cursor = conn.cursor()
    cursor.execute(
        "INSERT INTO products (name, price) VALUES (?, ?)",
        payload.to_params()
    )
    conn.commit()
    return Product(id=cursor.lastrowid, name=payload.name, price=payload.price)


def update_product(conn, product_id: int, payload: ProductPayload) -> Product:
    """
    Overwrite name and price of an existing product.
    Raises ProductNotFound when the update touched no row.
    """
    cursor = conn.cursor()
    cursor.execute(
        "UPDATE products SET name = ?, price = ? WHERE id = ?",
        payload.to_params() + (product_id,)
    )
    affected = cursor.rowcount
    conn.commit()
    if affected == 0:
        raise ProductNotFound(product_id)
    return Product(id=product_id, name=payload.name, price=payload.price)


def delete_product(conn, product_id: int) -> None:
    """
    Delete a product.
    Raises ProductNotFound when the delete touched no row.
    """
    cursor = conn.cursor()
    cursor.execute("DELETE FROM products WHERE id = ?", (product_id,))
    affected = cursor.rowcount
    conn.commit()
    if affected == 0:
        raise ProductNotFound(product_id)
