"""SQLAlchemy table definition generator."""

import keyword
import re
from datetime import datetime
from typing import List, Optional

from .. import __version__
from ..database.models import Column, Table, camelize
from ..models import GeneratorOptions

PACKAGE_NAME = "schemagen-cli"

# Names bound by the generated module itself
RESERVED_NAMES = frozenset({"Column", "MetaData", "Table", "metadata", "types"})


def to_identifier(name: str) -> str:
    """Turn a table name into a valid Python identifier."""
    ident = re.sub(r"\W", "_", name)
    if not ident or ident[0].isdigit():
        ident = "_" + ident
    if keyword.iskeyword(ident) or ident in RESERVED_NAMES:
        ident += "_"
    return ident


class TableCodeGenerator:
    """Generates Python source declaring SQLAlchemy Core tables.

    Each generate_* method returns a chunk of text ready to be written.
    A chunk is its non-empty parts joined with the end-of-line token,
    followed by one more end-of-line token.
    """

    def __init__(self, options: GeneratorOptions, qualifier: str):
        self.options = options
        self.qualifier = qualifier
        self.indent = options.indent
        self.eol = options.eol
        # Tables live inside define_tables() when modularized
        self.base_indent = options.indent if options.modularize else ""

    def render(self, *parts: Optional[str]) -> str:
        """Join non-empty parts with the end-of-line token."""
        return self.eol.join(str(p) for p in parts if p) + self.eol

    def _try_camelize(self, name: str) -> str:
        return camelize(name) if self.options.camelize else name

    def generate_header(self, generated_at: Optional[datetime] = None) -> str:
        """Generate the prepend text, header comment, imports and preamble."""
        chunks = []

        if self.options.prepend:
            chunks.append(self.render(self.options.prepend + self.eol))

        if not self.options.omit_comments:
            generated_at = generated_at or datetime.now()
            header_comment = (
                f"# autogenerated by {PACKAGE_NAME} v{__version__} "
                f"on {generated_at.isoformat(timespec='seconds')}"
            )
            chunks.append(self.render(header_comment + self.eol))

        names = ["Column", "MetaData", "Table"]
        if self.options.include_meta:
            names.append("types")
        import_line = f"from sqlalchemy import {', '.join(names)}"

        if self.options.modularize:
            chunks.append(self.render(
                import_line,
                self.eol,
                "def define_tables(metadata):",
                self.indent + "tables = {}",
                self.eol,
            ))
        else:
            chunks.append(self.render(
                import_line,
                self.eol,
                "metadata = MetaData()",
                self.eol,
            ))

        return "".join(chunks)

    def generate_column(self, column: Column) -> str:
        """Generate one Column(...) argument line."""
        args = [repr(column.name)]
        if self.options.include_meta:
            args.append(column.to_sqlalchemy_type())
        if self.options.camelize:
            args.append(f"key={column.property_name!r}")
        if self.options.include_meta:
            args.append(f"nullable={column.is_nullable!r}")

        return f"{self.base_indent}{self.indent}Column({', '.join(args)}),"

    def generate_table(self, table: Table) -> str:
        """Generate the definition of a single table."""
        indent = self.base_indent
        inner = indent + self.indent
        lines: List[str] = []

        if not self.options.omit_comments:
            lines.append(f"{indent}# SQL definition for {self.qualifier}.{table.name}")

        if self.options.modularize:
            target = f"tables[{self._try_camelize(table.name)!r}]"
        else:
            target = to_identifier(self._try_camelize(table.name))

        lines.append(f"{indent}{target} = Table(")
        lines.append(f"{inner}{table.name!r},")
        lines.append(f"{inner}metadata,")
        lines.extend(self.generate_column(col) for col in table.columns)
        if self.options.include_schema:
            lines.append(f"{inner}schema={self.qualifier!r},")
        lines.append(f"{indent})")

        return self.render(*lines, self.eol)

    def generate_tail(self) -> str:
        """Generate the closing of define_tables() and the append text."""
        chunks = []
        if self.options.modularize:
            chunks.append(self.render(self.indent + "return tables"))
        if self.options.append:
            chunks.append(self.render(self.options.append))
        return "".join(chunks)
