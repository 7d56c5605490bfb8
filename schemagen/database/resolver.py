"""Maps a DSN or explicit flag to a supported dialect and its introspector."""

import re
from typing import Dict, Optional, Type

from ..errors import ConfigurationError
from .base import DatabaseIntrospector
from .mssql import MSSQLIntrospector
from .mysql import MySQLIntrospector
from .postgres import PostgresIntrospector

INTROSPECTORS: Dict[str, Type[DatabaseIntrospector]] = {
    "mysql": MySQLIntrospector,
    "pg": PostgresIntrospector,
    "mssql": MSSQLIntrospector,
}

SUPPORTED_DIALECTS = tuple(INTROSPECTORS)

_DSN_DIALECT = re.compile(r"^(mysql|postgres|mssql)", re.IGNORECASE)


def resolve_dialect(dsn: Optional[str], dialect: Optional[str] = None) -> str:
    """Return "mysql", "pg" or "mssql" for the given DSN and optional flag."""
    if not dsn:
        raise ConfigurationError("dsn is required")

    if not dialect:
        match = _DSN_DIALECT.match(dsn)
        if not match:
            raise ConfigurationError("dialect is required", details={"dsn_prefix": dsn.split(":", 1)[0]})
        dialect = match.group(1)
        if dialect.lower() == "postgres":
            dialect = "pg"

    dialect = dialect.lower()
    if dialect not in INTROSPECTORS:
        raise ConfigurationError(
            'dialect must be either "mysql", "pg" or "mssql"',
            details={"dialect": dialect},
        )
    return dialect


def create_introspector(
    dsn: Optional[str],
    dialect: Optional[str] = None,
    database: Optional[str] = None,
    schema: Optional[str] = None,
    connection=None,
) -> DatabaseIntrospector:
    """Build the introspector for the resolved dialect."""
    resolved = resolve_dialect(dsn, dialect)
    introspector_cls = INTROSPECTORS[resolved]
    return introspector_cls(dsn, database=database, schema=schema, connection=connection)
