"""Fake DB-API connection for testing without a database server."""

from typing import Any, Dict, List, Optional, Tuple

COLUMN_KEYS = ["name", "nullable", "default_value", "char_length", "type"]


def column(
    name: str,
    data_type: str = "varchar",
    nullable: str = "YES",
    char_length: Optional[int] = None,
    default: Optional[str] = None,
) -> Dict[str, Any]:
    """Build a catalog column row as information_schema would return it."""
    return {
        "name": name,
        "nullable": nullable,
        "default_value": default,
        "char_length": char_length,
        "type": data_type,
    }


class FakeCursor:
    """Answers the two catalog queries from an in-memory table map."""

    def __init__(self, connection: "FakeConnection"):
        self.connection = connection
        self.description = None
        self.closed = False
        self._rows: List[Tuple] = []

    def execute(self, text: str, params=()):
        self.connection.queries.append((text, tuple(params)))
        if self.connection.fail_on and self.connection.fail_on in text:
            raise RuntimeError(f"relation does not exist: {self.connection.fail_on}")

        if "column_name" in text.lower():
            rows = self.connection.tables.get(params[0], [])
            self.description = [(key, None, None, None, None, None, None) for key in COLUMN_KEYS]
            self._rows = [tuple(row.get(key) for key in COLUMN_KEYS) for row in rows]
        else:
            self.description = [("name", None, None, None, None, None, None)]
            self._rows = [(name,) for name in sorted(self.connection.tables)]

    def fetchall(self) -> List[Tuple]:
        return list(self._rows)

    def close(self):
        self.closed = True


class FakeConnection:
    """Mock DB-API connection.

    Args:
        tables: Map of table name to catalog column rows
        fail_on: Raise from execute() when the query text contains this string
    """

    def __init__(self, tables: Dict[str, List[Dict[str, Any]]], fail_on: Optional[str] = None):
        self.tables = tables
        self.fail_on = fail_on
        self.queries: List[Tuple[str, Tuple]] = []
        self.closed = False

    def cursor(self) -> FakeCursor:
        return FakeCursor(self)

    def close(self):
        self.closed = True
