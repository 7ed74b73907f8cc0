"""Centralized error codes and messages for SimpleMemoryStore.

Every user-facing error string is produced through :func:`get_message` so the
wording lives in one table.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes raised by the store."""

    # Generic
    INTERNAL_ERROR = "internal_error"
    INVALID_REQUEST = "invalid_request"

    # Input validation
    INVALID_ELEMENT = "invalid_element"
    ID_ALREADY_SET = "id_already_set"
    INVALID_TYPE = "invalid_type"
    UNSUPPORTED_VALUE = "unsupported_value"
    CYCLIC_VALUE = "cyclic_value"
    TOO_DEEPLY_NESTED = "too_deeply_nested"

    # Record lookup
    NOT_FOUND = "not_found"
    IDENTIFIER_MISMATCH = "identifier_mismatch"

    # Store lifecycle
    STORE_NOT_EMPTY = "store_not_empty"


class SuccessCode(str, Enum):
    """Success codes, used as structured log event names."""

    RECORD_INSERTED = "record_inserted"
    RECORD_REPLACED = "record_replaced"
    RECORD_REMOVED = "record_removed"
    STORE_RESET = "store_reset"
    STORE_SEEDED = "store_seeded"


MESSAGES: dict[str | ErrorCode | SuccessCode, str] = {
    # Generic
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred in the memory store",
    ErrorCode.INVALID_REQUEST: "Invalid request to memory store: {detail}",
    # Input validation
    ErrorCode.INVALID_ELEMENT: "Element is not an object to store: {element!r}",
    ErrorCode.ID_ALREADY_SET: "Element already has an .id value ({id!r}), but should not on insert",
    ErrorCode.INVALID_TYPE: "Type is not a valid string to be used as a collection type: {type!r}",
    ErrorCode.UNSUPPORTED_VALUE: "Value of type {kind} cannot be stored",
    ErrorCode.CYCLIC_VALUE: "Element contains a reference cycle and cannot be copied",
    ErrorCode.TOO_DEEPLY_NESTED: "Element is too deeply nested to be copied",
    # Record lookup
    ErrorCode.NOT_FOUND: "Element with id {id!r} does not exist in store type {type!r}",
    ErrorCode.IDENTIFIER_MISMATCH: (
        "Element .id {got!r} and given id {expected!r} are not identical; cannot replace"
    ),
    # Store lifecycle
    ErrorCode.STORE_NOT_EMPTY: (
        "Cannot init with default tweets and users because store memory is not empty"
    ),
}


def get_message(code: ErrorCode | SuccessCode | str, **kwargs: object) -> str:
    """Get formatted message for code.

    Args:
        code: Error or success code from enum
        **kwargs: Format arguments for message template

    Returns:
        Formatted message string
    """
    msg = MESSAGES.get(code, "Unknown error")
    if kwargs:
        return msg.format(**kwargs)
    return msg


__all__ = ["ErrorCode", "MESSAGES", "SuccessCode", "get_message"]
