"""Database vendors: one class per engine, each owning its URL template and XA helper."""

from typing import Optional, Union

from ..database_type import DatabaseType
from ..errors import InvalidArgument, UnsupportedOperation
from .base import Vendor, SlashDatabaseVendor
from .postgres import PostgresqlVendor, PostgresPlusVendor
from .sqlserver import SqlserverVendor
from .oracle import OracleVendor
from .sybase import SybaseVendor
from .db2 import Db2Vendor
from .mysql import MysqlVendor, MariadbVendor

_VENDOR_CLASSES: tuple[type[Vendor], ...] = (
    PostgresqlVendor,
    PostgresPlusVendor,
    SqlserverVendor,
    OracleVendor,
    SybaseVendor,
    Db2Vendor,
    MysqlVendor,
    MariadbVendor,
)


def get_vendor_for_type(database_type: Optional[Union[DatabaseType, str]]) -> Vendor:
    """Return a Vendor instance for the given database type (or case-insensitive type name)."""
    if isinstance(database_type, str) and not isinstance(database_type, DatabaseType):
        try:
            database_type = DatabaseType.from_name(database_type)
        except InvalidArgument as error:
            raise UnsupportedOperation(f"Unsupported database type: {database_type}") from error
    for vendor_cls in _VENDOR_CLASSES:
        if database_type in vendor_cls.SUPPORTED_TYPES:
            return vendor_cls()
    raise UnsupportedOperation(f"Unsupported database type: {database_type}")


__all__ = [
    "Vendor",
    "SlashDatabaseVendor",
    "PostgresqlVendor",
    "PostgresPlusVendor",
    "SqlserverVendor",
    "OracleVendor",
    "SybaseVendor",
    "Db2Vendor",
    "MysqlVendor",
    "MariadbVendor",
    "get_vendor_for_type",
]
