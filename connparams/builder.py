"""Fluent builder for ConnectionParameters."""

import logging
from typing import Optional, Union

from .configuration import (
    Configuration,
    SERVER_PARAM,
    PORT_PARAM,
    DATABASE_PARAM,
    USER_PARAM,
    PASSWORD_PARAM,
    DBTYPE_PARAM,
)
from .connection_parameters import ConnectionParameters
from .database_type import DatabaseType
from .errors import InvalidArgument, MissingConfiguration, UnsupportedOperation
from .vendors import get_vendor_for_type

logger = logging.getLogger(__name__)

DEFAULT_CREDENTIAL = "crashrec"
"""Used for database, user and password when configuration has no value."""


class ConnectionParametersBuilder:
    """Accumulates connection fields and builds one ConnectionParameters.

    Server and port are fixed at construction: configuration first, then the
    given defaults. Database, user and password default to configuration and
    can be overridden with the chained setters:

        params = (
            ConnectionParametersBuilder("localhost", "5432")
            .database("sales")
            .user("app")
            .password("secret")
            .database_type("postgresql")
            .build()
        )

    Not thread-safe; use one builder per construction.
    """

    def __init__(
        self,
        default_server: Optional[str] = None,
        default_port: Optional[Union[str, int]] = None,
        *,
        config: Optional[Configuration] = None,
    ):
        if config is None:
            config = Configuration.from_environ()
        if default_port is not None:
            default_port = str(default_port)
        self._server = config.get(SERVER_PARAM, default_server)
        self._port = config.get(PORT_PARAM, default_port)
        if self._server is None or self._port is None:
            raise MissingConfiguration("host or port is not defined")
        self._database = config.get(DATABASE_PARAM, DEFAULT_CREDENTIAL)
        self._user = config.get(USER_PARAM, DEFAULT_CREDENTIAL)
        self._password = config.get(PASSWORD_PARAM, DEFAULT_CREDENTIAL)
        # resolved in build() unless a setter picks the type first
        self._configured_type_name = config.get(DBTYPE_PARAM)
        self._database_type = None

    @property
    def server(self) -> str:
        return self._server

    @property
    def port(self) -> str:
        return self._port

    # chained setters

    def user(self, user_name: str) -> "ConnectionParametersBuilder":
        self._user = user_name
        return self

    def password(self, password: str) -> "ConnectionParametersBuilder":
        self._password = password
        return self

    def database(self, database_name: str) -> "ConnectionParametersBuilder":
        self._database = database_name
        return self

    def database_type(self, database_type: Union[DatabaseType, str]) -> "ConnectionParametersBuilder":
        """Select the vendor, by DatabaseType or case-insensitive name ('mysql', 'MySQL')."""
        if isinstance(database_type, DatabaseType):
            self._database_type = database_type
        elif isinstance(database_type, str):
            self._database_type = DatabaseType.from_name(database_type)
        else:
            raise InvalidArgument(f"Not a database type: `{database_type!r}`")
        return self

    def type(self, name: str) -> "ConnectionParametersBuilder":
        """Select the vendor by case-insensitive name."""
        self._database_type = DatabaseType.from_name(name)
        return self

    # build

    def build(self) -> ConnectionParameters:
        """Format the vendor URL and return the immutable ConnectionParameters."""
        database_type = self._database_type
        if database_type is None and self._configured_type_name is not None:
            try:
                database_type = DatabaseType.from_name(self._configured_type_name)
            except InvalidArgument as error:
                raise UnsupportedOperation(
                    f"Unsupported database type: {self._configured_type_name}"
                ) from error
        if database_type is None:
            raise UnsupportedOperation("Unsupported database type: None")
        vendor = get_vendor_for_type(database_type)
        url = vendor.format_url(
            server=self._server,
            port=self._port,
            database=self._database,
            user=self._user,
            password=self._password,
        )
        logger.debug(
            "Built %s connection parameters for %s:%s",
            database_type.name, self._server, self._port,
        )
        return ConnectionParameters(
            url=url,
            user=self._user,
            password=self._password,
            database=self._database,
            server=self._server,
            port=self._port,
            database_type=database_type,
            xa_helper=vendor.xa_helper,
        )
