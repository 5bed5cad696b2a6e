"""SQL Server vendor."""

from typing import ClassVar

from ..database_type import DatabaseType
from ..xa import XAHelper
from .base import Vendor


class SqlserverVendor(Vendor):
    """Vendor for SQL Server; credentials are part of the URL."""

    SUPPORTED_TYPES: ClassVar[tuple[DatabaseType, ...]] = (DatabaseType.MSSQL,)
    URL_PREFIX: ClassVar[str] = "jdbc:sqlserver://"
    XA_HELPER: ClassVar[XAHelper] = XAHelper.MSSQL

    def format_url(self, server: str, port: str, database: str, user: str, password: str) -> str:
        return (
            f"{self.URL_PREFIX}{server}:{port}"
            f";databaseName={database}"
            f";user={user}"
            f";password={password}"
        )
