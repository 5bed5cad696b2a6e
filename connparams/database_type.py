"""Closed set of supported database vendors."""

import enum

from .errors import InvalidArgument


class DatabaseType(str, enum.Enum):
    """Database vendor tag; values are the lowercase names accepted in configuration."""

    POSTGRESQL = "postgresql"
    POSTGRESPLUS = "postgresplus"
    MSSQL = "mssql"
    ORACLE = "oracle"
    SYBASE = "sybase"
    DB2 = "db2"
    MYSQL = "mysql"
    MARIADB = "mariadb"

    @classmethod
    def from_name(cls, name: str) -> "DatabaseType":
        """Return the member whose name matches, ignoring case (e.g. 'MySQL' -> MYSQL)."""
        if not isinstance(name, str):
            raise InvalidArgument(f"Database type name must be a str, got {type(name).__name__}")
        try:
            return cls[name.strip().upper()]
        except KeyError as error:
            raise InvalidArgument(f"Unknown database type: `{name}`") from error
