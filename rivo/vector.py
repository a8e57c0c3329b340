"""Three-dimensional vector arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator

# Largest finite value of the engine's real type, used to report infinite mass.
REAL_MAX = 3.4028234663852886e38


@dataclass
class Vector3:
    """A mutable vector in three dimensions."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def copy(self) -> Vector3:
        """Return an independent copy of this vector."""
        return Vector3(self.x, self.y, self.z)

    def __mul__(self, other):
        """Scale by a number, or take the dot product with another vector."""
        if isinstance(other, Vector3):
            return self.scalar_product(other)
        if isinstance(other, Real):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __imul__(self, other):
        if isinstance(other, Vector3):
            raise TypeError("in-place multiplication takes a scalar, not a vector")
        if not isinstance(other, Real):
            return NotImplemented
        self.x *= other
        self.y *= other
        self.z *= other
        return self

    def __add__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iadd__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __sub__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __isub__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __mod__(self, other):
        """Vector (cross) product."""
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.vector_product(other)

    def __imod__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x, self.y, self.z = self.vector_product(other)
        return self

    def add_scaled_vector(self, vec: Vector3, scale: float) -> None:
        """Add ``vec`` scaled by ``scale`` to this vector in place."""
        self.x += vec.x * scale
        self.y += vec.y * scale
        self.z += vec.z * scale

    def invert(self) -> None:
        """Flip the sign of every component."""
        self.x = -self.x
        self.y = -self.y
        self.z = -self.z

    def magnitude(self) -> float:
        return math.sqrt(self.square_magnitude())

    def square_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalize(self) -> None:
        """Scale a non-zero vector to unit length; a zero vector is left alone."""
        length = self.magnitude()
        if length > 0:
            self *= 1.0 / length

    def component_product(self, vec: Vector3) -> Vector3:
        return Vector3(self.x * vec.x, self.y * vec.y, self.z * vec.z)

    def component_product_update(self, vec: Vector3) -> None:
        self.x *= vec.x
        self.y *= vec.y
        self.z *= vec.z

    def scalar_product(self, vec: Vector3) -> float:
        return self.x * vec.x + self.y * vec.y + self.z * vec.z

    def vector_product(self, vec: Vector3) -> Vector3:
        return Vector3(
            self.y * vec.z - self.z * vec.y,
            self.z * vec.x - self.x * vec.z,
            self.x * vec.y - self.y * vec.x,
        )

    def clear(self) -> None:
        """Set every component to zero."""
        self.x = self.y = self.z = 0.0