"""SimpleMemoryStore core.

Records are kept per collection ("type") in insertion order and identified by an
``id`` drawn from one counter shared by every collection of a store. All reads
and writes go through :func:`~simplememorystore.serialization.clone`, so no
caller ever holds a reference into the stored data.

The store is meant for training and lecture purposes, not production use.
"""

from __future__ import annotations

import math
import re
import threading
import time
from collections.abc import Mapping
from contextlib import AbstractContextManager
from typing import Any

from common.messages import SuccessCode
from common.utils.logger import get_logger

from .exceptions import (
    IdAlreadySetError,
    IdentifierMismatchError,
    InvalidElementError,
    InvalidTypeError,
    NotFoundError,
    StoreNotEmptyError,
)
from .interfaces.storage import IRecordStore, Record
from .serialization import clone

logger = get_logger("simplememorystore", component="store")

DEFAULT_ID_START = 100

_LEADING_INT = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]*|[0-9]+)", re.ASCII)


def coerce_id(value: Any) -> int | None:
    """Leniently convert ``value`` to an integer id.

    Integers pass through, floats are truncated and strings use their leading
    ASCII digits (``"12abc"`` -> 12), with ``0x`` marking hexadecimal
    (``"0x65"`` -> 101). Anything else yields ``None``, meaning "no id".
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if not match:
            return None
        sign, digits = match.groups()
        if digits[:2].lower() == "0x":
            if len(digits) == 2:
                return None
            number = int(digits[2:], 16)
        else:
            number = int(digits)
        return -number if sign == "-" else number
    return None


def _same_id(given: Any, expected: int) -> bool:
    if isinstance(given, bool) or not isinstance(given, (int, float)):
        return False
    return given == expected


class Store(IRecordStore):
    """In-memory collections of records with store-wide unique ids.

    Construct one instance and hand it to whatever needs it; every instance has
    its own memory and its own id counter. The first id issued is
    ``id_start + 1``. Operations are serialized by a re-entrant lock.
    """

    def __init__(self, id_start: int = DEFAULT_ID_START) -> None:
        if int(id_start) < 0:
            raise ValueError(f"id_start must be >= 0, got {id_start!r}")
        self._memory: dict[str, list[Record]] = {}
        self._last_id = int(id_start)
        self._lock = threading.RLock()

    # ----- Introspection ------------------------------------------------------
    @property
    def last_id(self) -> int:
        """Highest id issued so far (the start value before any insert)."""
        return self._last_id

    def types(self) -> list[str]:
        with self._lock:
            return list(self._memory)

    def count(self, type: str) -> int:
        with self._lock:
            return len(self._memory.get(type, ()))

    def snapshot(self) -> dict[str, list[Record]]:
        """Deep copy of the whole memory, keyed by collection name."""
        with self._lock:
            return clone(self._memory)

    def lock(self) -> AbstractContextManager:
        return self._lock

    # ----- Internal helpers ---------------------------------------------------
    def _next_id(self) -> int:
        self._last_id += 1
        return self._last_id

    def _locate(self, type: str, id: Any) -> tuple[int, Record] | None:
        records = self._memory.get(type) if isinstance(type, str) else None
        wanted = coerce_id(id)
        if not records or wanted is None:
            return None
        for index, record in enumerate(records):
            if record["id"] == wanted:
                return index, record
        return None

    # ----- Primary operations -------------------------------------------------
    def select(self, type: str, id: Any = None) -> Record | list[Record] | None:
        """Return one record, the whole collection, or ``None``.

        ``None`` is returned for an unknown or empty collection and for an id
        that matches no record. An id that cannot be read as an integer is
        ignored and the whole collection is returned.
        """
        with self._lock:
            records = self._memory.get(type) if isinstance(type, str) else None
            if not records:
                return None
            if coerce_id(id) is None:
                return clone(records)
            located = self._locate(type, id)
            return clone(located[1]) if located else None

    def insert(self, type: str, element: Mapping[str, Any]) -> Record:
        """Store a copy of ``element`` under a new id and return a copy of it."""
        if not isinstance(element, Mapping):
            raise InvalidElementError(element=element)
        if "id" in element:
            raise IdAlreadySetError(id=element["id"])
        if not type or not isinstance(type, str):
            raise InvalidTypeError(type=type)

        record = clone(element)
        with self._lock:
            record["id"] = self._next_id()
            self._memory.setdefault(type, []).append(record)
            logger.debug(SuccessCode.RECORD_INSERTED.value, type=type, id=record["id"])
            return clone(record)

    def replace(self, type: str, id: Any, new_element: Mapping[str, Any]) -> Record:
        """Swap the record ``id`` for a copy of ``new_element``.

        ``new_element["id"]`` must equal the stored id. The record keeps its
        position in the collection. Returns the record as it was before.
        """
        if not isinstance(new_element, Mapping):
            raise InvalidElementError(element=new_element)

        with self._lock:
            located = self._locate(type, id)
            if located is None:
                raise NotFoundError(id=id, type=type)
            index, current = located
            given = new_element.get("id")
            if not _same_id(given, current["id"]):
                raise IdentifierMismatchError(got=given, expected=current["id"])

            record = clone(new_element)
            record["id"] = current["id"]
            previous = clone(current)
            self._memory[type][index] = record
            logger.debug(SuccessCode.RECORD_REPLACED.value, type=type, id=record["id"])
            return previous

    def remove(self, type: str, id: Any) -> Record:
        """Delete the record ``id`` from ``type`` and return it."""
        with self._lock:
            located = self._locate(type, id)
            if located is None:
                raise NotFoundError(id=id, type=type)
            index, removed = located
            del self._memory[type][index]
            logger.debug(SuccessCode.RECORD_REMOVED.value, type=type, id=removed["id"])
            return removed

    # ----- Maintenance --------------------------------------------------------
    def init_with_default_data(self) -> Store:
        """Seed two users and two tweets referring to them."""
        with self._lock:
            if "tweets" in self._memory:
                raise StoreNotEmptyError()
            self.reset(True)
            ids = [self._next_id() for _ in range(4)]
            now = int(time.time() * 1000)
            self._memory["tweets"] = [
                {
                    "id": ids[0],
                    "message": "Hello world tweet",
                    "timestamp": now,
                    "user": {"id": ids[2]},
                },
                {
                    "id": ids[1],
                    "message": "Another nice tweet",
                    "timestamp": now,
                    "user": {"id": ids[3]},
                },
            ]
            self._memory["users"] = [
                {"id": ids[2], "firstname": "Super", "lastname": "Woman"},
                {"id": ids[3], "firstname": "Jane", "lastname": "Doe"},
            ]
            logger.debug(SuccessCode.STORE_SEEDED.value, ids=ids)
        return self

    def reset(self, confirm: bool = False) -> Store | None:
        """Remove every collection. Does nothing unless ``confirm is True``.

        The id counter is kept, so later inserts continue the sequence.
        """
        if confirm is not True:
            return None
        with self._lock:
            self._memory = {}
            logger.debug(SuccessCode.STORE_RESET.value, last_id=self._last_id)
        return self


__all__ = ["DEFAULT_ID_START", "Store", "coerce_id"]
