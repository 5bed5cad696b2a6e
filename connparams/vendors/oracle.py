"""Oracle vendor (thin driver)."""

from typing import ClassVar

from ..database_type import DatabaseType
from ..xa import XAHelper
from .base import Vendor


class OracleVendor(Vendor):
    """Vendor for Oracle; the database is a SID appended after a colon."""

    SUPPORTED_TYPES: ClassVar[tuple[DatabaseType, ...]] = (DatabaseType.ORACLE,)
    URL_PREFIX: ClassVar[str] = "jdbc:oracle:thin:@"
    XA_HELPER: ClassVar[XAHelper] = XAHelper.ORACLE

    def format_url(self, server: str, port: str, database: str, user: str, password: str) -> str:
        return f"{self.URL_PREFIX}{server}:{port}:{database}"
