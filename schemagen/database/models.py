"""Database data models for schema introspection."""

import re
from typing import Optional, List, Dict, Any
from dataclasses import dataclass, field

from .type_mappers import TypeMapper


def camelize(name: str) -> str:
    """Convert underscored names to camel case ("foo_bar" -> "fooBar")."""
    return re.sub(r"_(.)", lambda m: m.group(1).upper(), name)


@dataclass
class Column:
    """Represents a column in the canonical information_schema shape."""
    name: str
    data_type: str
    is_nullable: bool = True
    default_value: Optional[str] = None
    char_length: Optional[int] = None
    _type_mapper: Optional[TypeMapper] = field(default=None, repr=False, compare=False)

    @property
    def property_name(self) -> str:
        return camelize(self.name)

    def to_sqlalchemy_type(self) -> str:
        """Render the SQLAlchemy type expression for this column."""
        if self._type_mapper:
            return self._type_mapper.to_sqlalchemy_type(self.data_type, self.char_length)
        return TypeMapper().to_sqlalchemy_type(self.data_type, self.char_length)

    def to_record(self) -> Dict[str, Any]:
        """Summary used in generation statistics."""
        return {
            "name": self.name,
            "property": self.property_name,
            "type": self.data_type,
            "nullable": self.is_nullable,
            "char_length": self.char_length,
        }


@dataclass
class Table:
    """Represents a database table."""
    name: str
    schema: Optional[str] = None
    columns: List[Column] = field(default_factory=list)
