"""
Database handle shared by the application and the per-request dependency.
"""

import logging
import sqlite3
from contextlib import contextmanager

from fastapi import Request

from products_api.schema import create_tables

logger = logging.getLogger(__name__)


def get_connection(database_path: str) -> sqlite3.Connection:
    """Open a connection whose rows can be read by column name."""
    # Sync dependencies and handlers may run on different worker threads
    conn = sqlite3.connect(database_path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


class Database:
    """
    Process-wide database handle.

    Opened once when the application starts and closed when it stops. Each
    request gets its own connection from connect(), so simultaneous requests
    never share one.
    """

    def __init__(self, database_path: str):
        self.database_path = database_path
        self._closed = True

    def open(self):
        """Make sure the products table exists and start handing out connections."""
        conn = get_connection(self.database_path)
        try:
            create_tables(conn.cursor())
            conn.commit()
        finally:
            conn.close()
        self._closed = False
        logger.info("Database opened at %s", self.database_path)

    def close(self):
        """Stop handing out connections."""
        self._closed = True
        logger.info("Database at %s closed", self.database_path)

    @property
    def closed(self) -> bool:
        """Whether the handle refuses new connections."""
        return self._closed

    @contextmanager
    def connect(self):
        """Yield a fresh connection and close it afterwards."""
        if self._closed:
            raise sqlite3.ProgrammingError("Database handle is closed")
        conn = get_connection(self.database_path)
        try:
            yield conn
        finally:
            conn.close()


def get_db(request: Request):
    """
    FastAPI dependency injecting a connection from the application's handle.
    """
    db: Database = request.app.state.db
    with db.connect() as conn:
        yield conn
