"""Dialect-specific mapping from information_schema types to SQLAlchemy types."""

from typing import Dict, Optional


class TypeMapper:
    """Maps normalized catalog type names to `sqlalchemy.types` expressions.

    Subclasses extend TYPE_MAP with the names their catalog reports.
    Values containing "(" are emitted verbatim; others get a length
    argument when they are in LENGTH_TYPES and the catalog reports one.
    """

    TYPE_MAP: Dict[str, str] = {
        "varchar": "VARCHAR",
        "char": "CHAR",
        "text": "TEXT",
        "int": "INTEGER",
        "smallint": "SMALLINT",
        "bigint": "BIGINT",
        "decimal": "DECIMAL",
        "numeric": "NUMERIC",
        "float": "FLOAT",
        "real": "REAL",
        "double": "FLOAT",
        "boolean": "BOOLEAN",
        "date": "DATE",
        "time": "TIME",
        "timestamp": "TIMESTAMP",
        "datetime": "DATETIME",
        "json": "JSON",
        "blob": "BLOB",
        "binary": "BINARY",
        "varbinary": "VARBINARY",
    }

    LENGTH_TYPES = {"VARCHAR", "CHAR", "NVARCHAR", "NCHAR", "BINARY", "VARBINARY"}

    def to_sqlalchemy_type(self, db_type: str, char_length: Optional[int] = None) -> str:
        """Convert a catalog type to a SQLAlchemy type expression."""
        type_name = self.TYPE_MAP.get((db_type or "").lower())
        if type_name is None:
            return "types.NullType()"
        if "(" in type_name:
            return f"types.{type_name}"
        # MSSQL reports -1 for (max) columns
        if type_name in self.LENGTH_TYPES and char_length and char_length > 0:
            return f"types.{type_name}({char_length})"
        return f"types.{type_name}()"


class MySQLTypeMapper(TypeMapper):
    """Type mapper for MySQL DATA_TYPE values."""

    TYPE_MAP = {
        **TypeMapper.TYPE_MAP,
        "tinyint": "SMALLINT",
        "mediumint": "INTEGER",
        "year": "SMALLINT",
        "bit": "BOOLEAN",
        "tinytext": "TEXT",
        "mediumtext": "TEXT",
        "longtext": "TEXT",
        "tinyblob": "BLOB",
        "mediumblob": "BLOB",
        "longblob": "BLOB",
        "enum": "VARCHAR",
        "set": "VARCHAR",
    }


class PostgresTypeMapper(TypeMapper):
    """Type mapper for PostgreSQL data_type values."""

    TYPE_MAP = {
        **TypeMapper.TYPE_MAP,
        "double precision": "FLOAT",
        "timestamp without time zone": "TIMESTAMP",
        "timestamp with time zone": "TIMESTAMP(timezone=True)",
        "time without time zone": "TIME",
        "time with time zone": "TIME(timezone=True)",
        "bytea": "LargeBinary()",
        "uuid": "UUID()",
        "jsonb": "JSON",
        "interval": "Interval()",
    }


class MSSQLTypeMapper(TypeMapper):
    """Type mapper for MSSQL data_type values."""

    TYPE_MAP = {
        **TypeMapper.TYPE_MAP,
        "nvarchar": "NVARCHAR",
        "nchar": "NCHAR",
        "ntext": "TEXT",
        "xml": "TEXT",
        "bit": "BOOLEAN",
        "tinyint": "SMALLINT",
        "datetime2": "DATETIME",
        "smalldatetime": "DATETIME",
        "datetimeoffset": "DATETIME(timezone=True)",
        "money": "NUMERIC",
        "smallmoney": "NUMERIC",
        "uniqueidentifier": "UUID()",
        "image": "LargeBinary()",
    }
