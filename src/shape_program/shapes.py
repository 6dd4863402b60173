"""
Shape hierarchy: an abstract Shape plus the Circle and Rectangle variants.

Every shape exposes area() and perimeter() as pure functions of its own
dimensions. Dimensions must be real numbers and are stored as floats. Their
range is never checked, so zero and negative values flow straight through
the formulas.
"""

from __future__ import annotations

import math
import numbers
from abc import ABC, abstractmethod


def _as_dimension(name: str, value) -> float:
    """Widen a real number to float; anything else (strings included) is a TypeError."""
    if not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
    return float(value)


class Shape(ABC):
    """Capability set shared by all shapes: area() and perimeter()."""

    __slots__ = ()

    @abstractmethod
    def area(self) -> float:
        ...

    @abstractmethod
    def perimeter(self) -> float:
        ...

    def _dimensions(self) -> tuple | None:
        # Subclasses return their fields in constructor order.
        # None means no value semantics: compare by identity.
        return None

    def __eq__(self, other):
        if not isinstance(other, Shape):
            return NotImplemented
        if type(self) is not type(other):
            return False
        mine = self._dimensions()
        if mine is None:
            return self is other
        return mine == other._dimensions()

    def __hash__(self):
        dimensions = self._dimensions()
        if dimensions is None:
            return object.__hash__(self)
        return hash((type(self).__name__, dimensions))


class Circle(Shape):

    __slots__ = ("_radius",)

    def __init__(self, radius: float):
        self._radius = _as_dimension("radius", radius)

    @property
    def radius(self) -> float:
        return self._radius

    def area(self) -> float:
        return math.pi * self._radius * self._radius

    def perimeter(self) -> float:
        return 2 * math.pi * self._radius

    def _dimensions(self) -> tuple:
        return (self._radius,)

    def __repr__(self):
        return f"Circle(radius={self._radius!r})"


class Rectangle(Shape):

    __slots__ = ("_width", "_height")

    def __init__(self, width: float, height: float):
        self._width = _as_dimension("width", width)
        self._height = _as_dimension("height", height)

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def area(self) -> float:
        return self._width * self._height

    def perimeter(self) -> float:
        return 2 * (self._width + self._height)

    def _dimensions(self) -> tuple:
        return (self._width, self._height)

    def __repr__(self):
        return f"Rectangle(width={self._width!r}, height={self._height!r})"
