"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``) and applying migrations on application start
(``init_db``).  Each entity lives in its own table keyed by a
store‑assigned text identifier; business keys that must be unique carry
a ``UNIQUE`` constraint so the engine itself rejects duplicates.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # order_management_api/
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  No type detection is enabled; dates are stored as ISO text and
    parsed by the pydantic schemas on the way out.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS orders (
            id TEXT PRIMARY KEY,
            OrderID TEXT NOT NULL,
            ProductID TEXT NOT NULL,
            Quantity INTEGER NOT NULL,
            Price REAL NOT NULL
        );

        CREATE TABLE IF NOT EXISTS order_details (
            id TEXT PRIMARY KEY,
            OrderDetailID TEXT NOT NULL UNIQUE,
            OrderID TEXT NOT NULL,
            ProductID TEXT NOT NULL,
            Quantity INTEGER NOT NULL,
            Price REAL NOT NULL
        );

        CREATE TABLE IF NOT EXISTS payments (
            id TEXT PRIMARY KEY,
            PaymentID TEXT NOT NULL UNIQUE,
            OrderID TEXT NOT NULL,
            PaymentDate TEXT NOT NULL,
            PaymentMethod TEXT NOT NULL,
            PaymentAmount REAL NOT NULL
        );

        CREATE TABLE IF NOT EXISTS suppliers (
            id TEXT PRIMARY KEY,
            SupplierID TEXT NOT NULL UNIQUE,
            SupplierName TEXT NOT NULL,
            ContactInfo TEXT NOT NULL,
            Address TEXT NOT NULL
        );
        """,
    ),
    # Migration 2: indices for reference lookups by OrderID
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_orders_order_id ON orders(OrderID);
        CREATE INDEX IF NOT EXISTS idx_order_details_order_id ON order_details(OrderID);
        CREATE INDEX IF NOT EXISTS idx_payments_order_id ON payments(OrderID);
        """,
    ),
]


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any newer entries of
    ``MIGRATIONS``.  To change the schema, append a migration with an
    incremented version number.
    """
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
