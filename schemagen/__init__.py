"""schemagen - generate SQLAlchemy table definitions from information_schema."""

__version__ = "0.1.0"

from .models import GeneratorOptions, GenerationStats  # noqa: E402
from .pipeline import SchemaGenerator, generate  # noqa: E402

__all__ = [
    "__version__",
    "GeneratorOptions",
    "GenerationStats",
    "SchemaGenerator",
    "generate",
]
