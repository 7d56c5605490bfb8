"""Pydantic models for generator options and run statistics."""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Dict, Any


class GeneratorOptions(BaseModel):
    """Options for a single generation run."""

    model_config = ConfigDict(populate_by_name=True)

    dsn: Optional[str] = None
    dialect: Optional[str] = None
    database: Optional[str] = None
    schema_name: Optional[str] = Field(default=None, alias="schema")

    # None collects output in GenerationStats.buffer, "-" writes to stdout
    output_file: Optional[str] = None
    mode: int = 0o644
    encoding: str = "utf-8"

    indent: str = "\t"
    eol: str = "\n"
    camelize: bool = False
    prepend: Optional[str] = None
    append: Optional[str] = None
    omit_comments: bool = False
    include_schema: bool = False
    modularize: bool = False
    include_meta: bool = False

    include: List[str] = Field(default_factory=list)
    exclude: List[str] = Field(default_factory=list)


class GenerationStats(BaseModel):
    """Statistics collected while generating."""

    start: datetime = Field(default_factory=datetime.now)
    end: Optional[datetime] = None
    elapsed: Optional[int] = None
    bytes_written: int = 0
    buffer: str = ""
    tables: Dict[str, Dict[str, List[Dict[str, Any]]]] = Field(default_factory=dict)

    def finish(self) -> None:
        """Record the end time and elapsed milliseconds."""
        self.end = datetime.now()
        self.elapsed = int((self.end - self.start).total_seconds() * 1000)
