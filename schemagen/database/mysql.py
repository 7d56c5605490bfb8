"""MySQL information_schema introspector."""

from typing import Optional

from .base import DatabaseIntrospector, MetadataQuery, parse_url_dsn
from .type_mappers import MySQLTypeMapper


class MySQLIntrospector(DatabaseIntrospector):
    """Client for introspecting MySQL schema.

    MySQL has no separate catalog level: the database name is the
    TABLE_SCHEMA value, and the schema option is only used for naming.
    """

    DIALECT = "mysql"

    def __init__(self, dsn: str, database: Optional[str] = None, schema: Optional[str] = None, connection=None):
        self._dsn_parts = parse_url_dsn(dsn)
        super().__init__(dsn, database=database, schema=schema, connection=connection)

    def create_type_mapper(self) -> MySQLTypeMapper:
        return MySQLTypeMapper()

    def _database_from_dsn(self) -> Optional[str]:
        return self._dsn_parts["database"]

    def _open_connection(self):
        try:
            import pymysql
        except ImportError:
            raise ImportError(
                "PyMySQL is required for MySQL connections. "
                "Install it with: pip install PyMySQL"
            )

        parts = self._dsn_parts
        kwargs = {
            "host": parts["host"] or "localhost",
            "user": parts["user"],
            "password": parts["password"] or "",
            "database": self.database,
        }
        if parts["port"]:
            kwargs["port"] = parts["port"]
        if "charset" in parts["options"]:
            kwargs["charset"] = parts["options"]["charset"]
        return pymysql.connect(**kwargs)

    def tables_query(self) -> MetadataQuery:
        return MetadataQuery(
            text=(
                "SELECT TABLE_NAME AS name "
                "FROM information_schema.TABLES "
                f"WHERE TABLE_SCHEMA = {self.PARAM_MARKER} "
                "ORDER BY TABLE_NAME"
            ),
            params=(self.database,),
        )

    def columns_query(self, table: str) -> MetadataQuery:
        return MetadataQuery(
            text=(
                "SELECT COLUMN_NAME AS name, IS_NULLABLE AS nullable, "
                "COLUMN_DEFAULT AS default_value, "
                "CHARACTER_MAXIMUM_LENGTH AS char_length, DATA_TYPE AS type "
                "FROM information_schema.COLUMNS "
                f"WHERE TABLE_NAME = {self.PARAM_MARKER} "
                f"AND TABLE_SCHEMA = {self.PARAM_MARKER} "
                "ORDER BY ORDINAL_POSITION"
            ),
            params=(table, self.database),
        )
