"""
Generic SQLite persistence for entity records.

``EntityStore`` stores records of a single entity in that entity's
table.  Records are plain dicts keyed by field name plus the
store‑assigned ``id``.  Every public method opens its own connection and
closes it before returning, so a store instance holds no state besides
its configuration and may be shared between requests.

Failures of the storage engine are translated into the exceptions from
``core.errors``: unique constraint violations become ``DuplicateKey``,
anything else becomes ``StorageUnavailable``.  Absent records are
reported with ``None``/``False`` and left to the caller to interpret.
"""

import logging
import re
import sqlite3
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from ..core.db import get_connection
from ..core.errors import DuplicateKey, StorageUnavailable
from .entities import EntityConfig

logger = logging.getLogger(__name__)

_UNIQUE_RE = re.compile(r"UNIQUE constraint failed: \w+\.(\w+)")


class EntityStore:
    """CRUD operations over the table of one entity."""

    def __init__(self, config: EntityConfig):
        self.config = config
        self._columns = ", ".join(("id",) + config.fields)

    @contextmanager
    def _cursor(self, operation: str) -> Iterator[sqlite3.Cursor]:
        try:
            conn = get_connection()
        except sqlite3.Error as exc:
            raise StorageUnavailable(operation, str(exc)) from exc
        try:
            yield conn.cursor()
            conn.commit()
        except sqlite3.IntegrityError:
            conn.rollback()
            raise
        except sqlite3.Error as exc:
            conn.rollback()
            raise StorageUnavailable(operation, str(exc)) from exc
        finally:
            conn.close()

    def _duplicate(self, exc: sqlite3.IntegrityError, record: Dict[str, Any]) -> DuplicateKey:
        match = _UNIQUE_RE.search(str(exc))
        if match:
            field = match.group(1)
        elif self.config.unique_fields:
            field = self.config.unique_fields[0]
        else:
            field = "id"
        return DuplicateKey(self.config.name, field, record.get(field))

    def _values(self, record: Dict[str, Any]) -> list:
        return [record.get(name) for name in self.config.fields]

    def create(self, record_id: str, record: Dict[str, Any]) -> Dict[str, Any]:
        """Insert ``record`` under ``record_id`` and return the stored record."""
        placeholders = ", ".join("?" for _ in range(len(self.config.fields) + 1))
        try:
            with self._cursor("create") as cursor:
                cursor.execute(
                    f"INSERT INTO {self.config.table} ({self._columns}) VALUES ({placeholders})",
                    [record_id] + self._values(record),
                )
                row = cursor.execute(
                    f"SELECT {self._columns} FROM {self.config.table} WHERE id = ?",
                    (record_id,),
                ).fetchone()
        except sqlite3.IntegrityError as exc:
            raise self._duplicate(exc, record) from exc
        return dict(row)

    def list(self) -> List[Dict[str, Any]]:
        """Return all records in insertion order."""
        with self._cursor("list") as cursor:
            rows = cursor.execute(
                f"SELECT {self._columns} FROM {self.config.table} ORDER BY rowid"
            ).fetchall()
        return [dict(row) for row in rows]

    def get_by_id(self, record_id: str) -> Optional[Dict[str, Any]]:
        with self._cursor("get") as cursor:
            row = cursor.execute(
                f"SELECT {self._columns} FROM {self.config.table} WHERE id = ?",
                (record_id,),
            ).fetchone()
        return dict(row) if row else None

    def get_by_field(self, field: str, value: Any) -> Optional[Dict[str, Any]]:
        """Return the first stored record whose ``field`` equals ``value``."""
        if field not in self.config.fields:
            raise ValueError(f"Unknown field {field!r} for {self.config.name}")
        with self._cursor("lookup") as cursor:
            row = cursor.execute(
                f"SELECT {self._columns} FROM {self.config.table} WHERE {field} = ? ORDER BY rowid LIMIT 1",
                (value,),
            ).fetchone()
        return dict(row) if row else None

    def update_by_id(self, record_id: str, record: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Replace every field of the record at ``record_id``.

        Returns the updated record, or ``None`` without writing anything
        when no record has that id.
        """
        assignments = ", ".join(f"{name} = ?" for name in self.config.fields)
        try:
            with self._cursor("update") as cursor:
                cursor.execute(
                    f"UPDATE {self.config.table} SET {assignments} WHERE id = ?",
                    self._values(record) + [record_id],
                )
                if cursor.rowcount == 0:
                    return None
                row = cursor.execute(
                    f"SELECT {self._columns} FROM {self.config.table} WHERE id = ?",
                    (record_id,),
                ).fetchone()
        except sqlite3.IntegrityError as exc:
            raise self._duplicate(exc, record) from exc
        return dict(row)

    def delete_by_id(self, record_id: str) -> bool:
        """Delete the record at ``record_id``; ``False`` if there was none."""
        with self._cursor("delete") as cursor:
            cursor.execute(f"DELETE FROM {self.config.table} WHERE id = ?", (record_id,))
            deleted = cursor.rowcount > 0
        if deleted:
            logger.debug("Deleted %s %s", self.config.name, record_id)
        return deleted
