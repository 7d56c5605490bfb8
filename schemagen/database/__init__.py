"""Database introspection module for schemagen.

This module reads table and column metadata from information_schema
with specific implementations for MySQL, PostgreSQL and MSSQL.
"""

from .models import Column, Table, camelize
from .base import DatabaseIntrospector, MetadataQuery
from .filters import TableFilter
from .type_mappers import TypeMapper, MySQLTypeMapper, PostgresTypeMapper, MSSQLTypeMapper
from .mysql import MySQLIntrospector
from .postgres import PostgresIntrospector
from .mssql import MSSQLIntrospector
from .resolver import SUPPORTED_DIALECTS, create_introspector, resolve_dialect

__all__ = [
    # Data models
    "Column",
    "Table",
    "camelize",
    # Base classes
    "DatabaseIntrospector",
    "MetadataQuery",
    "TableFilter",
    # Type mappers
    "TypeMapper",
    "MySQLTypeMapper",
    "PostgresTypeMapper",
    "MSSQLTypeMapper",
    # Introspectors
    "MySQLIntrospector",
    "PostgresIntrospector",
    "MSSQLIntrospector",
    # Resolution
    "SUPPORTED_DIALECTS",
    "create_introspector",
    "resolve_dialect",
]
