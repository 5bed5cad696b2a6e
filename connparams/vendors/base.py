"""Base Vendor type: subclasses turn connection fields into a vendor URL."""

from abc import ABC, abstractmethod
from typing import ClassVar, Optional

from pydantic import BaseModel

from ..database_type import DatabaseType
from ..xa import XAHelper


class Vendor(BaseModel, ABC):
    """Base for database vendors; subclasses implement format_url() for their URL template."""

    model_config = {"frozen": True}

    SUPPORTED_TYPES: ClassVar[tuple[DatabaseType, ...]] = ()
    """Database types this vendor handles."""

    URL_PREFIX: ClassVar[str] = ""
    """Leading part of every URL (e.g. 'jdbc:postgresql://')."""

    XA_HELPER: ClassVar[Optional[XAHelper]] = None
    """Identifier of the XA recovery helper associated with this vendor."""

    CLONEABLE: ClassVar[bool] = False
    """Whether ConnectionParameters of this vendor may be duplicated."""

    @property
    def xa_helper(self) -> Optional[XAHelper]:
        return type(self).XA_HELPER

    @property
    def cloneable(self) -> bool:
        return type(self).CLONEABLE

    @abstractmethod
    def format_url(self, server: str, port: str, database: str, user: str, password: str) -> str:
        """Return the connection URL.

        Values are concatenated as given: nothing is escaped or validated.
        """
        ...  # pylint: disable=unnecessary-ellipsis


class SlashDatabaseVendor(Vendor, ABC):
    """Vendors whose URL reads `<prefix>server:port/database`."""

    def format_url(self, server: str, port: str, database: str, user: str, password: str) -> str:
        return f"{self.URL_PREFIX}{server}:{port}/{database}"
