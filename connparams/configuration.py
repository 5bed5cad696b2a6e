"""Explicit configuration for connection builders.

Values are looked up by the fixed keys below. A Configuration is usually built
from a plain mapping, or from the process environment when nothing is passed
to the builder.
"""

import logging
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import InvalidArgument

logger = logging.getLogger(__name__)

SERVER_PARAM = "host"
PORT_PARAM = "port"
DATABASE_PARAM = "database"
USER_PARAM = "user"
PASSWORD_PARAM = "password"
DBTYPE_PARAM = "dbtype"

KEYS: tuple[str, ...] = (
    SERVER_PARAM,
    PORT_PARAM,
    DATABASE_PARAM,
    USER_PARAM,
    PASSWORD_PARAM,
    DBTYPE_PARAM,
)


class EnvironmentSettings(BaseSettings):
    """Connection values read from environment variables named `<env_prefix><key>`."""

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=True, extra="ignore")

    host: Optional[str] = None
    port: Optional[str] = None
    database: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None
    dbtype: Optional[str] = None


class Configuration(BaseModel):
    """Frozen set of optional values keyed by host, port, database, user, password, dbtype."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    host: Optional[str] = None
    port: Optional[str] = None
    database: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None
    dbtype: Optional[str] = None

    @field_validator("port", mode="before")
    @classmethod
    def _port_to_str(cls, value: Any):
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "Configuration":
        """Build from any mapping; keys other than the fixed ones are ignored."""
        return cls(**{key: mapping[key] for key in KEYS if key in mapping})

    @classmethod
    def from_environ(cls, prefix: str = "") -> "Configuration":
        """Build from environment variables named `<prefix><key>` (e.g. prefix="DB_" reads DB_host)."""
        values = EnvironmentSettings(_env_prefix=prefix).model_dump(exclude_none=True)
        logger.debug("Configuration from environment: found %s", sorted(values))
        return cls(**values)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value stored under key, or default when it is not set."""
        if key not in KEYS:
            raise InvalidArgument(f"Unknown configuration key: `{key}`")
        value = getattr(self, key)
        return default if value is None else value
