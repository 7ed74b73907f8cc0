"""SimpleMemoryStore - a tiny in-process object store for teaching.

Records live in named collections ("types") and receive an ``id`` from a
counter shared by all collections of a store.

Example:
    >>> from simplememorystore import Store
    >>> store = Store()
    >>> store.insert("tweets", {"message": "hi"})
    {'message': 'hi', 'id': 101}
    >>> store.select("tweets", "101")
    {'message': 'hi', 'id': 101}
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _version

from .core import Store
from .exceptions import (
    IdAlreadySetError,
    IdentifierMismatchError,
    InvalidElementError,
    InvalidRequestError,
    InvalidTypeError,
    NotFoundError,
    SimpleMemoryStoreError,
    StoreNotEmptyError,
)
from .factory import create_store

try:  # pragma: no cover - trivial metadata access
    __version__ = _version("simplememorystore")
except PackageNotFoundError:  # Local, editable, or missing dist metadata
    __version__ = "0.0.0.dev0"

__all__ = [
    "IdAlreadySetError",
    "IdentifierMismatchError",
    "InvalidElementError",
    "InvalidRequestError",
    "InvalidTypeError",
    "NotFoundError",
    "SimpleMemoryStoreError",
    "Store",
    "StoreNotEmptyError",
    "__version__",
    "create_store",
]
