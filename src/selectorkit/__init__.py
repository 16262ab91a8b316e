"""selectorkit: fluent CSS selector builder plus small object helpers."""
from __future__ import annotations

__version__ = "0.1.0"

from selectorkit.builder import SelectorBuilder, css_selector_builder
from selectorkit.config import SelectorKitConfig
from selectorkit.errors import (
    DuplicatePartError,
    OrderViolationError,
    SelectorError,
    SerializationError,
)
from selectorkit.model import PartKind, Rectangle, Selector
from selectorkit.serialization import deserialize_with_shape, serialize

__all__ = [
    "__version__",
    # builder
    "SelectorBuilder",
    "css_selector_builder",
    # model
    "PartKind",
    "Selector",
    "Rectangle",
    # serialization
    "serialize",
    "deserialize_with_shape",
    # config
    "SelectorKitConfig",
    # errors
    "SelectorError",
    "DuplicatePartError",
    "OrderViolationError",
    "SerializationError",
]
