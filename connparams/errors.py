"""Errors raised while configuring and building connection parameters."""


class ConnparamsError(Exception):
    """Base class for every connparams error"""
    pass


class MissingConfiguration(ConnparamsError, LookupError):
    """A required value (server or port) has neither configuration nor default."""
    pass


class InvalidArgument(ConnparamsError, ValueError):
    """An argument does not name anything known (e.g. an unknown database type)."""
    pass


class UnsupportedOperation(ConnparamsError):
    """The operation is not available for the current database type."""
    pass


class ParseError(ConnparamsError, ValueError):
    """A stored value cannot be converted to the requested form."""
    pass
