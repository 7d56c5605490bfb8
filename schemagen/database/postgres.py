"""PostgreSQL information_schema introspector."""

from typing import Optional

from .base import DatabaseIntrospector, MetadataQuery, parse_url_dsn
from .type_mappers import PostgresTypeMapper


class PostgresIntrospector(DatabaseIntrospector):
    """Client for introspecting PostgreSQL schema."""

    DIALECT = "pg"
    DEFAULT_SCHEMA = "public"

    def __init__(self, dsn: str, database: Optional[str] = None, schema: Optional[str] = None, connection=None):
        self._dsn_parts = parse_url_dsn(dsn)
        super().__init__(
            dsn,
            database=database,
            schema=schema or self.DEFAULT_SCHEMA,
            connection=connection,
        )

    def create_type_mapper(self) -> PostgresTypeMapper:
        return PostgresTypeMapper()

    def _database_from_dsn(self) -> Optional[str]:
        return self._dsn_parts["database"]

    def _open_connection(self):
        try:
            import psycopg2
        except ImportError:
            raise ImportError(
                "psycopg2 is required for PostgreSQL connections. "
                "Install it with: pip install psycopg2-binary"
            )

        # Connect with keywords so non-libpq schemes such as tcp:// work too
        parts = self._dsn_parts
        kwargs = {
            "host": parts["host"] or "localhost",
            "dbname": self.database,
        }
        if parts["port"]:
            kwargs["port"] = parts["port"]
        if parts["user"]:
            kwargs["user"] = parts["user"]
        if parts["password"]:
            kwargs["password"] = parts["password"]
        if "sslmode" in parts["options"]:
            kwargs["sslmode"] = parts["options"]["sslmode"]
        return psycopg2.connect(**kwargs)

    def tables_query(self) -> MetadataQuery:
        return MetadataQuery(
            text=(
                "SELECT table_name AS name "
                "FROM information_schema.tables "
                f"WHERE table_schema = {self.PARAM_MARKER} "
                f"AND table_catalog = {self.PARAM_MARKER} "
                "ORDER BY table_name"
            ),
            params=(self.schema, self.database),
        )

    def columns_query(self, table: str) -> MetadataQuery:
        return MetadataQuery(
            text=(
                "SELECT column_name AS name, is_nullable AS nullable, "
                "column_default AS default_value, "
                "character_maximum_length AS char_length, data_type AS type "
                "FROM information_schema.columns "
                f"WHERE table_name = {self.PARAM_MARKER} "
                f"AND table_schema = {self.PARAM_MARKER} "
                f"AND table_catalog = {self.PARAM_MARKER} "
                "ORDER BY ordinal_position"
            ),
            params=(table, self.schema, self.database),
        )
