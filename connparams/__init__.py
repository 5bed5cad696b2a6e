"""connparams: JDBC-style connection URLs and XA helpers for relational database vendors."""

from .builder import ConnectionParametersBuilder
from .configuration import Configuration
from .connection_parameters import ConnectionParameters
from .database_type import DatabaseType
from .errors import (
    ConnparamsError,
    MissingConfiguration,
    InvalidArgument,
    UnsupportedOperation,
    ParseError,
)
from .xa import XAHelper
