"""Point masses with linear motion."""

from __future__ import annotations

from typing import Iterable

from .vector import REAL_MAX, Vector3


def _as_vector(value: Vector3 | Iterable[float]) -> Vector3:
    return Vector3(*value)


class Particle:
    """The simplest simulated body: position, velocity and acceleration, no orientation."""

    def __init__(
        self,
        position: Iterable[float] = (0.0, 0.0, 0.0),
        velocity: Iterable[float] = (0.0, 0.0, 0.0),
        acceleration: Iterable[float] = (0.0, 0.0, 0.0),
        damping: float = 1.0,
        inverse_mass: float = 0.0,
    ) -> None:
        self._position = _as_vector(position)
        self._velocity = _as_vector(velocity)
        self._acceleration = _as_vector(acceleration)
        self._force_accum = Vector3()
        self.damping = float(damping)
        self.inverse_mass = float(inverse_mass)

    @property
    def position(self) -> Vector3:
        return self._position

    @position.setter
    def position(self, value: Iterable[float]) -> None:
        self._position = _as_vector(value)

    @property
    def velocity(self) -> Vector3:
        return self._velocity

    @velocity.setter
    def velocity(self, value: Iterable[float]) -> None:
        self._velocity = _as_vector(value)

    @property
    def acceleration(self) -> Vector3:
        return self._acceleration

    @acceleration.setter
    def acceleration(self, value: Iterable[float]) -> None:
        self._acceleration = _as_vector(value)

    @property
    def force_accum(self) -> Vector3:
        """Force gathered for the next integration step."""
        return self._force_accum.copy()

    @property
    def mass(self) -> float:
        """Mass of the particle; REAL_MAX when the inverse mass is zero."""
        if self.inverse_mass == 0:
            return REAL_MAX
        return 1.0 / self.inverse_mass

    @mass.setter
    def mass(self, value: float) -> None:
        if value == 0:
            raise ValueError("mass must be non-zero")
        self.inverse_mass = 1.0 / value

    def has_finite_mass(self) -> bool:
        return self.inverse_mass > 0.0

    def add_force(self, force: Vector3) -> None:
        """Accumulate a force to be applied on the next integration step."""
        self._force_accum += force

    def clear_accumulator(self) -> None:
        self._force_accum.clear()

    def integrate(self, duration: float) -> None:
        """Advance the particle by ``duration`` seconds, then clear accumulated force."""
        if not duration > 0.0:
            raise ValueError("duration must be positive")

        self._position.add_scaled_vector(self._velocity, duration)

        resulting_acc = self._acceleration.copy()
        resulting_acc.add_scaled_vector(self._force_accum, self.inverse_mass)

        self._velocity.add_scaled_vector(resulting_acc, duration)
        self._velocity *= self.damping ** duration

        self.clear_accumulator()