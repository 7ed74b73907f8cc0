"""Copy and JSON helpers for stored records.

Records are plain data: mappings with string keys, sequences, strings,
numbers, booleans and ``None``. :func:`clone` builds a fully independent copy of
such a value and rejects anything else, including reference cycles.
``serialize``/``deserialize`` enforce JSON (UTF-8) as the only wire format used
by the command line.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from typing import Any

from common.messages import ErrorCode, get_message

from .exceptions import InvalidElementError

_SCALARS = (str, int, bool, type(None))


def clone(value: Any) -> Any:
    """Return a deep, independent copy of a JSON-representable value.

    Mappings become ``dict``, lists and tuples become ``list``. Raises
    :class:`InvalidElementError` for non-data values (functions, sets, custom
    objects, non-string keys, NaN/infinity), for cyclic structures and for
    values nested deeper than the interpreter recursion limit allows.
    """
    try:
        return _clone(value, set())
    except RecursionError:
        raise InvalidElementError(get_message(ErrorCode.TOO_DEEPLY_NESTED)) from None


def _clone(value: Any, active: set[int]) -> Any:
    if isinstance(value, _SCALARS):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidElementError(get_message(ErrorCode.UNSUPPORTED_VALUE, kind="float"))
        return value

    if isinstance(value, (Mapping, list, tuple)):
        marker = id(value)
        if marker in active:
            raise InvalidElementError(get_message(ErrorCode.CYCLIC_VALUE))
        active.add(marker)
        try:
            if isinstance(value, Mapping):
                copied: dict[str, Any] = {}
                for key, item in value.items():
                    if not isinstance(key, str):
                        raise InvalidElementError(
                            get_message(ErrorCode.UNSUPPORTED_VALUE, kind=f"{type(key).__name__} key")
                        )
                    copied[key] = _clone(item, active)
                return copied
            return [_clone(item, active) for item in value]
        finally:
            active.discard(marker)

    raise InvalidElementError(get_message(ErrorCode.UNSUPPORTED_VALUE, kind=type(value).__name__))


def serialize(obj: Any) -> bytes:
    """Serialize an object to compact UTF-8 JSON bytes."""
    return json.dumps(obj, separators=(",", ":")).encode("utf-8")


def deserialize(raw: bytes | str | None) -> Any:
    """Deserialize UTF-8 JSON to Python objects.

    Raises ValueError when data is not valid JSON.
    """
    if raw is None:
        return None
    try:
        text = raw.decode("utf-8") if isinstance(raw, (bytes, bytearray)) else raw
        return json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
        raise ValueError(f"Data is not valid JSON: {exc}") from exc


__all__ = ["clone", "deserialize", "serialize"]
