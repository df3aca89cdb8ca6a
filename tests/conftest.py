"""
Pytest configuration and fixtures for integration tests.
"""

import os
import sys
import tempfile
import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from products_api.database import get_connection
from products_api.schema import create_tables


@pytest.fixture(scope="function")
def db_path():
    """
    Path of a fresh temporary database file, removed after the test.
    """
    db_fd, path = tempfile.mkstemp(suffix=".db")
    yield path

    # Cleanup
    os.close(db_fd)
    os.unlink(path)


@pytest.fixture(scope="function")
def conn(db_path):
    """
    Connection to a temporary database holding an empty products table.
    """
    connection = get_connection(db_path)
    create_tables(connection.cursor())
    connection.commit()
    yield connection
    connection.close()


@pytest.fixture(scope="function")
def client(db_path, monkeypatch):
    """
    Create a test client whose application opens the temporary database.
    """
    monkeypatch.setenv("DATABASE_PATH", db_path)

    from fastapi.testclient import TestClient
    from products_api.main import app

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def add_products(db_path):
    """
    Insert `count` products directly, bypassing the API.
    Product i is named "Product i" and priced (i + 1) * 10.
    """
    def _add(count=1):
        count = max(count, 1)
        connection = get_connection(db_path)
        connection.executemany(
            "INSERT INTO products (name, price) VALUES (?, ?)",
            [(f"Product {i}", (i + 1.0) * 10) for i in range(count)]
        )
        connection.commit()
        connection.close()

    return _add


@pytest.fixture
def sample_product_data():
    """Sample product payload for testing."""
    return {"name": "test product", "price": 11.22}
