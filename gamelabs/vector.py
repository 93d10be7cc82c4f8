"""A small mutable two-dimensional vector used by the flocking simulation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Union

PI = 3.141592635

Operand = Union["Vector", float, int]


@dataclass
class Vector:
    """A mutable Euclidean vector with x and y components."""

    x: float = 0.0
    y: float = 0.0

    @staticmethod
    def _components(other: Operand) -> tuple[float, float]:
        if isinstance(other, Vector):
            return other.x, other.y
        if isinstance(other, Real):
            return float(other), float(other)
        raise TypeError(f"unsupported operand: {other!r}")

    def __add__(self, other: Operand) -> Vector:
        ox, oy = self._components(other)
        return Vector(self.x + ox, self.y + oy)

    def __sub__(self, other: Operand) -> Vector:
        ox, oy = self._components(other)
        return Vector(self.x - ox, self.y - oy)

    def __mul__(self, other: Operand) -> Vector:
        ox, oy = self._components(other)
        return Vector(self.x * ox, self.y * oy)

    __rmul__ = __mul__

    def __truediv__(self, other: Operand) -> Vector:
        ox, oy = self._components(other)
        return Vector(self.x / ox, self.y / oy)

    def __iadd__(self, other: Operand) -> Vector:
        ox, oy = self._components(other)
        self.x += ox
        self.y += oy
        return self

    def __isub__(self, other: Operand) -> Vector:
        ox, oy = self._components(other)
        self.x -= ox
        self.y -= oy
        return self

    def __imul__(self, other: Operand) -> Vector:
        ox, oy = self._components(other)
        self.x *= ox
        self.y *= oy
        return self

    def __itruediv__(self, other: Operand) -> Vector:
        ox, oy = self._components(other)
        self.x /= ox
        self.y /= oy
        return self

    def set(self, x: float, y: float) -> None:
        """Replace both components."""
        self.x = float(x)
        self.y = float(y)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def distance(self, other: Vector) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y

    def normalize(self) -> None:
        """Scale to unit length in place; a zero vector is left unchanged."""
        m = self.magnitude()
        if m > 0:
            self.set(self.x / m, self.y / m)

    def limit(self, maximum: float) -> None:
        """Reduce to unit length in place when the magnitude exceeds ``maximum``."""
        size = self.magnitude()
        if size > maximum:
            self.set(self.x / size, self.y / size)

    def set_magnitude(self, length: float) -> None:
        self.normalize()
        self *= length

    def angle_between(self, other: Vector) -> float:
        """Angle in radians between this vector and ``other``; 0 if either is zero."""
        if self.x == 0 and self.y == 0:
            return 0.0
        if other.x == 0 and other.y == 0:
            return 0.0
        amount = self.dot(other) / (self.magnitude() * other.magnitude())
        if amount <= -1:
            return PI
        if amount >= 1:
            return 0.0
        return math.acos(amount)

    def copy(self) -> Vector:
        return Vector(self.x, self.y)