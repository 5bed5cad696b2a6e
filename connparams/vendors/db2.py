"""DB2 vendor."""

from typing import ClassVar

from ..database_type import DatabaseType
from ..xa import XAHelper
from .base import SlashDatabaseVendor


class Db2Vendor(SlashDatabaseVendor):
    """Vendor for DB2; the only vendor whose parameters can be duplicated."""

    SUPPORTED_TYPES: ClassVar[tuple[DatabaseType, ...]] = (DatabaseType.DB2,)
    URL_PREFIX: ClassVar[str] = "jdbc:db2://"
    XA_HELPER: ClassVar[XAHelper] = XAHelper.DB2
    CLONEABLE: ClassVar[bool] = True
