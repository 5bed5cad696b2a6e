"""MySQL and MariaDB vendors."""

from typing import ClassVar

from ..database_type import DatabaseType
from ..xa import XAHelper
from .base import SlashDatabaseVendor


class MysqlVendor(SlashDatabaseVendor):
    """Vendor for MySQL (jdbc:mysql://server:port/database)."""

    SUPPORTED_TYPES: ClassVar[tuple[DatabaseType, ...]] = (DatabaseType.MYSQL,)
    URL_PREFIX: ClassVar[str] = "jdbc:mysql://"
    XA_HELPER: ClassVar[XAHelper] = XAHelper.MYSQL


class MariadbVendor(SlashDatabaseVendor):
    """Vendor for MariaDB (jdbc:mariadb://server:port/database)."""

    SUPPORTED_TYPES: ClassVar[tuple[DatabaseType, ...]] = (DatabaseType.MARIADB,)
    URL_PREFIX: ClassVar[str] = "jdbc:mariadb://"
    XA_HELPER: ClassVar[XAHelper] = XAHelper.MARIADB
