"""Rectangle model: a width/height pair with an area."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle."""

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height
