"""Sequential generation pipeline.

open file -> connect -> write header -> fetch tables -> process tables
-> write tail -> close file, with output written as each step produces it.
"""

import codecs
import logging
import os
import sys
import time
from typing import Any, Callable, List, Optional

from .codegen import TableCodeGenerator
from .database import TableFilter, create_introspector
from .database.models import Table
from .errors import OutputError, SchemaGenError
from .models import GenerationStats, GeneratorOptions

logger = logging.getLogger(__name__)


class SchemaGenerator:
    """Runs one generation against a database.

    Example usage:
        options = GeneratorOptions(dsn="mysql://root@localhost/shop")
        stats = SchemaGenerator(options).run()
        print(stats.buffer)
    """

    def __init__(self, options: GeneratorOptions, connection: Any = None):
        """Initialize the pipeline.

        Args:
            options: Generation options
            connection: Optional open DB-API connection; skips the driver connect

        Raises:
            ConfigurationError: If the DSN, dialect or database cannot be resolved
        """
        self.options = options
        self.stats = GenerationStats()
        self.table_filter = TableFilter(options.include, options.exclude)
        self.introspector = create_introspector(
            options.dsn,
            dialect=options.dialect,
            database=options.database,
            schema=options.schema_name,
            connection=connection,
        )
        self.generator = TableCodeGenerator(options, self.introspector.qualifier)
        self.table_names: List[str] = []
        self._output = None
        self._owns_output = False
        self._encoder = None

    @property
    def steps(self) -> List[Callable[[], None]]:
        return [
            self.open_file,
            self.connect,
            self.write_head,
            self.fetch_tables,
            self.process_tables,
            self.write_tail,
        ]

    def run(self) -> GenerationStats:
        """Run every step in order and return the statistics.

        The output file and the connection are closed whether or not a
        step fails. The raised error carries the statistics in `.stats`.
        """
        try:
            for step in self.steps:
                step()
        except SchemaGenError as e:
            logger.error(e.message)
            e.stats = self.stats
            raise
        except Exception as e:
            logger.error(str(e))
            e.stats = self.stats
            raise
        finally:
            self.stats.finish()
            self.close_file()
            self.introspector.close()

        return self.stats

    def write(self, text: str) -> None:
        """Write a chunk to the output target and count its bytes."""
        if not text:
            return
        try:
            if self._encoder is None:
                # Shared across writes: at most one BOM per output
                self._encoder = codecs.getincrementalencoder(self.options.encoding)()
            data = self._encoder.encode(text)
        except (LookupError, UnicodeEncodeError) as e:
            raise OutputError(
                f"Cannot encode output as {self.options.encoding}: {e}",
                details={"encoding": self.options.encoding},
            ) from e

        if self._output is None:
            self.stats.buffer += text
            self.stats.bytes_written += len(data)
            return

        try:
            written = self._output.write(data)
            self._output.flush()
        except OSError as e:
            raise OutputError(f"Error writing output: {e}") from e
        self.stats.bytes_written += written or 0

    def open_file(self) -> None:
        target = self.options.output_file
        if not target:
            return

        if target == "-":
            sys.stdout.flush()
            self._output = sys.stdout.buffer
            return

        try:
            fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, self.options.mode)
            self._output = os.fdopen(fd, "wb")
        except OSError as e:
            raise OutputError(
                f"Cannot open output file {target}: {e}",
                details={"path": target},
            ) from e
        self._owns_output = True

    def connect(self) -> None:
        self.introspector.connect()

    def write_head(self) -> None:
        introspector = self.introspector
        logger.info(
            "Starting generation against %s%s",
            introspector.database,
            f".{introspector.schema}" if introspector.schema else "",
        )
        self.write(self.generator.generate_header())

    def fetch_tables(self) -> None:
        self.table_names = self.introspector.get_tables(self.table_filter)
        logger.debug("Found %d tables", len(self.table_names))

    def process_tables(self) -> None:
        for table_name in self.table_names:
            self.write_table(table_name)

    def write_table(self, table_name: str) -> None:
        introspector = self.introspector
        start = time.monotonic()
        logger.info(
            "Starting %s.%s%s...",
            introspector.database,
            f"{introspector.schema}." if introspector.schema else "",
            table_name,
        )

        columns = introspector.get_columns(table_name)
        logger.debug("  Found %d columns", len(columns))

        self.stats.tables[table_name] = {"columns": [col.to_record() for col in columns]}
        table = Table(name=table_name, schema=introspector.schema, columns=columns)
        self.write(self.generator.generate_table(table))

        logger.debug("  ...finished! (%dms)", (time.monotonic() - start) * 1000)

    def write_tail(self) -> None:
        self.write(self.generator.generate_tail())

    def close_file(self) -> None:
        if self._output is None:
            return

        output, self._output = self._output, None
        if not self._owns_output:
            return
        self._owns_output = False

        try:
            output.close()
        except OSError as e:
            logger.warning("Error closing file: %s", e)

        logger.info(
            "All done! Wrote %d bytes to %s in %sms",
            self.stats.bytes_written,
            self.options.output_file,
            self.stats.elapsed,
        )


def generate(options: Optional[GeneratorOptions] = None, connection: Any = None, **kwargs) -> GenerationStats:
    """Generate table definitions and return the run statistics.

    Options can be passed as a GeneratorOptions instance or as keyword
    arguments (dsn=..., dialect=..., schema=..., ...).
    """
    if options is None:
        options = GeneratorOptions(**kwargs)
    return SchemaGenerator(options, connection=connection).run()
