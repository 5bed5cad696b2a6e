"""PostgreSQL and EnterpriseDB Postgres Plus vendors."""

from typing import ClassVar

from ..database_type import DatabaseType
from ..xa import XAHelper
from .base import SlashDatabaseVendor


class PostgresqlVendor(SlashDatabaseVendor):
    """Vendor for PostgreSQL (jdbc:postgresql://server:port/database)."""

    SUPPORTED_TYPES: ClassVar[tuple[DatabaseType, ...]] = (DatabaseType.POSTGRESQL,)
    URL_PREFIX: ClassVar[str] = "jdbc:postgresql://"
    # Shares the MSSQL recovery helper; there is no PostgreSQL-specific one.
    XA_HELPER: ClassVar[XAHelper] = XAHelper.MSSQL


class PostgresPlusVendor(SlashDatabaseVendor):
    """Vendor for Postgres Plus (jdbc:edb://server:port/database)."""

    SUPPORTED_TYPES: ClassVar[tuple[DatabaseType, ...]] = (DatabaseType.POSTGRESPLUS,)
    URL_PREFIX: ClassVar[str] = "jdbc:edb://"
    XA_HELPER: ClassVar[XAHelper] = XAHelper.POSTGRESPLUS
