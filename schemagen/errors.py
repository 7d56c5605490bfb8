"""Error types for schemagen."""

from typing import Optional, Dict, Any


class SchemaGenError(Exception):
    """Base exception for schemagen errors."""

    def __init__(self, message: str, code: str = "SCHEMAGEN_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        # Populated by the pipeline when a run fails part way through
        self.stats = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for reporting."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(SchemaGenError):
    """Missing or invalid generator options (DSN, dialect, database)."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)


class DatabaseConnectionError(SchemaGenError):
    """Error connecting to the database."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CONNECTION_ERROR", details=details)


class IntrospectionError(SchemaGenError):
    """Error while querying information_schema."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="INTROSPECTION_ERROR", details=details)


class OutputError(SchemaGenError):
    """Error opening or writing the output target."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="OUTPUT_ERROR", details=details)
