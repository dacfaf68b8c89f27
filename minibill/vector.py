"""A small mutable two-dimensional vector."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Vector2:
    """A 2D vector with in-place normalisation and axis inversion."""

    x: float = 0.0
    y: float = 0.0

    def length(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> None:
        """Scale the vector to unit length in place.

        A zero vector has no direction; its components become NaN, just as
        floating-point division of zero by zero would produce.
        """
        length = self.length()
        if length == 0.0:
            self.x = math.nan
            self.y = math.nan
            return
        self.x /= length
        self.y /= length

    def invert_x(self) -> None:
        """Flip the sign of the x component."""
        self.x = -self.x

    def invert_y(self) -> None:
        """Flip the sign of the y component."""
        self.y = -self.y