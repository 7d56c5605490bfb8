"""Configuration management for schemagen."""

import os
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional


def _find_env_file() -> Optional[str]:
    """Find .env file in multiple locations.

    Search order:
    1. Current working directory
    2. ~/.schemagen/.env
    3. Package directory (where this file is located)
    """
    if os.path.exists(".env"):
        return ".env"

    user_env = Path.home() / ".schemagen" / ".env"
    if user_env.exists():
        return str(user_env)

    package_dir = Path(__file__).parent.parent
    package_env = package_dir / ".env"
    if package_env.exists():
        return str(package_env)

    return None


class Settings(BaseSettings):
    """Application settings loaded from SCHEMAGEN_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SCHEMAGEN_",
        env_file=_find_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Connection
    dsn: Optional[str] = Field(
        default=None,
        description="Default connection string"
    )
    dialect: Optional[str] = Field(
        default=None,
        description="Default SQL dialect: mysql, pg or mssql"
    )
    mssql_odbc_driver: str = Field(
        default="ODBC Driver 17 for SQL Server",
        description="ODBC driver used when the MSSQL DSN does not name one"
    )

    # Output formatting
    indent: str = Field(
        default="\t",
        description="Indentation token for generated code"
    )
    eol: str = Field(
        default="\n",
        description="Line terminator for generated code"
    )
    encoding: str = Field(
        default="utf-8",
        description="Encoding of the generated file"
    )
    file_mode: int = Field(
        default=0o644,
        description="Permission mode of the generated file"
    )


# Global settings instance
settings = Settings()
