"""Immutable result of a ConnectionParametersBuilder."""

from __future__ import annotations

import re
from typing import Any, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .database_type import DatabaseType
from .errors import ParseError, UnsupportedOperation
from .utils.mask import mask
from .vendors import get_vendor_for_type
from .xa import XAHelper

if TYPE_CHECKING:
    from .builder import ConnectionParametersBuilder

_PORT_PATTERN = re.compile(r"[+-]?[0-9]+")


class ConnectionParameters(BaseModel):
    """Vendor URL plus the discrete fields it was derived from.

    Instances come from ConnectionParametersBuilder.build(); they are frozen,
    so the url always matches the other fields.
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(repr=False)
    user: str
    password: str
    database: str = Field(repr=False)
    server: str
    port: str
    database_type: DatabaseType
    xa_helper: XAHelper

    @field_validator("port", mode="before")
    @classmethod
    def _port_to_str(cls, value: Any):
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @model_validator(mode="after")
    def _check_derived_fields(self):
        vendor = get_vendor_for_type(self.database_type)
        expected = vendor.format_url(self.server, self.port, self.database, self.user, self.password)
        if self.url != expected:
            raise ValueError(f"url does not match the {self.database_type.name} template")
        if self.xa_helper is not vendor.xa_helper:
            raise ValueError(f"xa_helper must be {vendor.xa_helper.value} for {self.database_type.name}")
        return self

    def port_as_int(self) -> int:
        """Return the port as a positive int; raise ParseError otherwise."""
        if not _PORT_PATTERN.fullmatch(self.port):
            raise ParseError(f"Port is not numeric: `{self.port}`")
        port = int(self.port)
        if port <= 0:
            raise ParseError(f"Port is not positive: `{self.port}`")
        return port

    def __str__(self) -> str:
        text = (
            f"jdbc url: '{self.url}', "
            f"connection props: {self.server}:{self.port} {self.user}/{self.password}"
        )
        return mask(text, self.database)

    def to_builder(self) -> ConnectionParametersBuilder:
        """Return a new builder preloaded with this instance's fields and database type.

        Configuration never overrides the copied values.
        """
        from .builder import ConnectionParametersBuilder
        from .configuration import Configuration

        return (
            ConnectionParametersBuilder(self.server, self.port, config=Configuration())
            .database(self.database)
            .user(self.user)
            .password(self.password)
            .database_type(self.database_type)
        )

    def duplicate(self) -> ConnectionParameters:
        """Return an equal, independently built instance.

        Only cloneable vendors (currently DB2) support this.
        """
        if not get_vendor_for_type(self.database_type).cloneable:
            raise UnsupportedOperation(
                f"Not supported database type for duplication: {self.database_type.name}"
            )
        return self.to_builder().build()
