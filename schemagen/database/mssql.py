"""MSSQL information_schema introspector."""

from typing import Dict, Optional

from ..config import settings
from ..errors import ConfigurationError
from .base import DatabaseIntrospector, MetadataQuery
from .type_mappers import MSSQLTypeMapper

# DSN keys translated to ODBC connection string keywords
ODBC_KEYWORDS = {
    "driver": "Driver",
    "server": "Server",
    "database": "Database",
    "user": "UID",
    "username": "UID",
    "uid": "UID",
    "password": "PWD",
    "pwd": "PWD",
}


def parse_mssql_dsn(dsn: str) -> Dict[str, str]:
    """Parse a DSN of the form mssql://server=host;database=db;user=u;password=p;

    Keys are lower-cased. A segment without "=" is an error.
    """
    body = dsn.strip()
    if body.endswith(";"):
        body = body[:-1]
    if body.lower().startswith("mssql://"):
        body = body[len("mssql://"):]

    config = {}
    for segment in body.split(";"):
        if not segment:
            continue
        if "=" not in segment:
            raise ConfigurationError(
                f'Invalid MSSQL DSN segment "{segment}"; expected key=value',
                details={"segment": segment},
            )
        key, value = segment.split("=", 1)
        config[key.strip().lower()] = value.strip()
    return config


def quote_identifier(name: str) -> str:
    return "[" + name.replace("]", "]]") + "]"


class MSSQLIntrospector(DatabaseIntrospector):
    """Client for introspecting MSSQL schema through pyodbc.

    Catalog views are addressed as [database].[information_schema].[...]
    so the connection's current database does not matter. Queries fall
    back to the dbo schema, while generated names keep using the
    database when no schema is given.
    """

    DIALECT = "mssql"
    PARAM_MARKER = "?"
    DEFAULT_SCHEMA = "dbo"

    def __init__(self, dsn: str, database: Optional[str] = None, schema: Optional[str] = None, connection=None):
        self._config = parse_mssql_dsn(dsn)
        super().__init__(dsn, database=database, schema=schema, connection=connection)

    def create_type_mapper(self) -> MSSQLTypeMapper:
        return MSSQLTypeMapper()

    def _database_from_dsn(self) -> Optional[str]:
        return self._config.get("database")

    @property
    def query_schema(self) -> str:
        return self.schema or self.DEFAULT_SCHEMA

    @property
    def catalog_prefix(self) -> str:
        return f"{quote_identifier(self.database)}.[information_schema]"

    def odbc_connection_string(self) -> str:
        """Build the ODBC connection string from the parsed DSN."""
        config = dict(self._config)
        config["database"] = self.database
        port = config.pop("port", None)
        if port and "server" in config:
            config["server"] = f"{config['server']},{port}"

        parts = {"Driver": "{" + settings.mssql_odbc_driver + "}"}
        for key, value in config.items():
            keyword = ODBC_KEYWORDS.get(key, key)
            if keyword == "Driver" and not value.startswith("{"):
                value = "{" + value + "}"
            parts[keyword] = value
        return ";".join(f"{k}={v}" for k, v in parts.items())

    def _open_connection(self):
        try:
            import pyodbc
        except ImportError:
            raise ImportError(
                "pyodbc is required for MSSQL connections. "
                "Install it with: pip install pyodbc"
            )

        return pyodbc.connect(self.odbc_connection_string())

    def tables_query(self) -> MetadataQuery:
        m = self.PARAM_MARKER
        return MetadataQuery(
            text=(
                "SELECT table_name AS name "
                f"FROM {self.catalog_prefix}.[tables] "
                f"WHERE table_schema = {m} "
                f"AND table_catalog = {m} "
                f"AND table_type = {m} "
                f"AND table_name <> {m} "
                "ORDER BY table_name"
            ),
            params=(self.query_schema, self.database, "BASE TABLE", "sysdiagrams"),
        )

    def columns_query(self, table: str) -> MetadataQuery:
        m = self.PARAM_MARKER
        return MetadataQuery(
            text=(
                "SELECT column_name AS name, is_nullable AS nullable, "
                "column_default AS default_value, "
                "character_maximum_length AS char_length, data_type AS type "
                f"FROM {self.catalog_prefix}.[columns] "
                f"WHERE table_name = {m} "
                f"AND table_schema = {m} "
                f"AND table_catalog = {m} "
                "ORDER BY ordinal_position"
            ),
            params=(table, self.query_schema, self.database),
        )
