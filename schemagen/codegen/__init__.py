"""Code generation module for schemagen.

Turns introspected tables into Python source declaring SQLAlchemy Core tables.
"""

from .generator import TableCodeGenerator, to_identifier

__all__ = [
    "TableCodeGenerator",
    "to_identifier",
]
