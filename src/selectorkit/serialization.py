"""JSON helpers: serialise values and rebuild them with a given shape."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from selectorkit.config import SelectorKitConfig
from selectorkit.errors import SerializationError

__all__ = ["serialize", "deserialize_with_shape"]

logger = logging.getLogger("selectorkit.serialization")

T = TypeVar("T")


def _to_plain(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return value


def serialize(value: Any, config: SelectorKitConfig | None = None) -> str:
    """Return the JSON text for *value*.

    Dataclass instances and objects with a ``to_dict()`` method are
    converted to mappings first. Output is compact unless the config asks
    for indentation.
    """
    config = config or SelectorKitConfig()
    separators = None if config.json_indent is not None else (",", ":")
    try:
        return json.dumps(
            _to_plain(value),
            indent=config.json_indent,
            sort_keys=config.json_sort_keys,
            separators=separators,
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(
            f"Cannot serialise {type(value).__name__}: {exc}", cause=exc
        ) from exc


def _build_dataclass(shape: type[T], data: dict[str, Any]) -> T:
    init_fields = {f.name for f in dataclasses.fields(shape) if f.init}
    unknown = sorted(set(data) - init_fields)
    if unknown:
        raise SerializationError(
            f"Unknown field(s) for {shape.__name__}: {', '.join(unknown)}"
        )
    try:
        return shape(**data)
    except TypeError as exc:
        raise SerializationError(
            f"Cannot build {shape.__name__}: {exc}", cause=exc
        ) from exc


def deserialize_with_shape(shape: type[T], text: str) -> T:
    """Parse *text* and return a fresh instance of *shape* carrying its fields.

    Resolution order:
      1. ``shape.from_dict(data)`` if the class defines it.
      2. Dataclasses are constructed from their init fields; missing fields
         take their defaults and unknown ones are rejected.
      3. Any other class gets a bare instance (``__init__`` is not called)
         whose attributes are updated from the parsed mapping.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON: {exc}", cause=exc) from exc

    if not isinstance(data, dict):
        raise SerializationError(
            f"Expected a JSON object for {shape.__name__}, got {type(data).__name__}"
        )

    from_dict = getattr(shape, "from_dict", None)
    if callable(from_dict):
        logger.debug("Building %s via from_dict", shape.__name__)
        return from_dict(data)
    if dataclasses.is_dataclass(shape):
        logger.debug("Building dataclass %s from %d field(s)", shape.__name__, len(data))
        return _build_dataclass(shape, data)

    obj = shape.__new__(shape)
    try:
        vars(obj).update(data)
    except TypeError as exc:
        raise SerializationError(
            f"{shape.__name__} instances cannot hold arbitrary attributes", cause=exc
        ) from exc
    return obj
