# catalog/exceptions.py
from typing import Optional


class CatalogError(Exception):
    """Base class for errors raised by the catalog core"""
    pass


class ValidationError(CatalogError):
    """A caller precondition was violated. Raised before any database access."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def __str__(self) -> str:
        if self.field:
            return f"{self.field}: {self.message}"
        return self.message


class PersistenceError(CatalogError):
    """The storage layer failed during a read or write.

    The underlying exception is available as ``cause`` and is also chained
    as ``__cause__`` when raised with ``raise ... from``.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message
