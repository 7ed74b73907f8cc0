"""Exception hierarchy raised by the memory store."""

from common.messages import ErrorCode, get_message


class SimpleMemoryStoreError(Exception):
    """Base class for all store errors.

    ``code`` carries the :class:`~common.messages.ErrorCode` so callers (and the
    CLI) can report failures without parsing messages.
    """

    code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str | None = None, **context: object) -> None:
        self.context = context
        super().__init__(message or get_message(self.code, **context))


class InvalidElementError(SimpleMemoryStoreError, TypeError):
    """Raised when an element is not a mapping or holds non-data values."""

    code = ErrorCode.INVALID_ELEMENT


class IdAlreadySetError(SimpleMemoryStoreError, ValueError):
    """Raised when ``insert`` receives an element that already carries an id."""

    code = ErrorCode.ID_ALREADY_SET


class InvalidTypeError(SimpleMemoryStoreError, TypeError):
    """Raised when the collection name is missing or not a string."""

    code = ErrorCode.INVALID_TYPE


class NotFoundError(SimpleMemoryStoreError, LookupError):
    """Raised when ``replace``/``remove`` cannot find the target record."""

    code = ErrorCode.NOT_FOUND


class IdentifierMismatchError(SimpleMemoryStoreError, ValueError):
    """Raised when ``replace`` gets an element whose id differs from the target."""

    code = ErrorCode.IDENTIFIER_MISMATCH


class InvalidRequestError(SimpleMemoryStoreError, ValueError):
    """Raised for malformed requests, such as an unknown command line operation."""

    code = ErrorCode.INVALID_REQUEST

    def __init__(
        self, message: str | None = None, detail: str = "no details given", **context: object
    ) -> None:
        super().__init__(message, detail=detail, **context)


class StoreNotEmptyError(SimpleMemoryStoreError, RuntimeError):
    """Raised when default data would overwrite an existing ``tweets`` collection."""

    code = ErrorCode.STORE_NOT_EMPTY


__all__ = [
    "IdAlreadySetError",
    "IdentifierMismatchError",
    "InvalidElementError",
    "InvalidRequestError",
    "InvalidTypeError",
    "NotFoundError",
    "SimpleMemoryStoreError",
    "StoreNotEmptyError",
]
