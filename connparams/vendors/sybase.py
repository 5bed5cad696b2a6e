"""Sybase vendor (jConnect TDS)."""

from typing import ClassVar

from ..database_type import DatabaseType
from ..xa import XAHelper
from .base import SlashDatabaseVendor


class SybaseVendor(SlashDatabaseVendor):
    """Vendor for Sybase (jdbc:sybase:Tds:server:port/database)."""

    SUPPORTED_TYPES: ClassVar[tuple[DatabaseType, ...]] = (DatabaseType.SYBASE,)
    URL_PREFIX: ClassVar[str] = "jdbc:sybase:Tds:"
    XA_HELPER: ClassVar[XAHelper] = XAHelper.SYBASE
