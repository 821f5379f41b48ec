"""
Mutable 2D vector.

Backed by a float64 numpy array so it can be handed to the spatial
helpers without conversion. All arithmetic mutates in place and returns
self for chaining. The zero vector is never an error: normalizing it is
a no-op.
"""

import math
import numpy as np

from .spatial import distance_2d, clamp_speed


class Vector2:
    """
    Mutable 2D vector with in-place arithmetic.

    Attributes:
        x: Horizontal component
        y: Vertical component (screen space, +y is down)
    """

    __slots__ = ('_xy',)

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self._xy = np.array([x, y], dtype=np.float64)

    @property
    def x(self) -> float:
        return float(self._xy[0])

    @x.setter
    def x(self, value: float):
        self._xy[0] = value

    @property
    def y(self) -> float:
        return float(self._xy[1])

    @y.setter
    def y(self, value: float):
        self._xy[1] = value

    @classmethod
    def from_array(cls, arr) -> 'Vector2':
        """Build from any [x, y] sequence"""
        return cls(float(arr[0]), float(arr[1]))

    @classmethod
    def from_angle(cls, angle: float, length: float = 1.0) -> 'Vector2':
        """Build a vector of given length pointing along angle (radians)"""
        return cls(math.cos(angle) * length, math.sin(angle) * length)

    def set(self, x: float, y: float) -> 'Vector2':
        self._xy[0] = x
        self._xy[1] = y
        return self

    def add(self, other: 'Vector2') -> 'Vector2':
        """In-place sum"""
        self._xy += other._xy
        return self

    def scale(self, n: float) -> 'Vector2':
        """In-place multiply by scalar"""
        self._xy *= n
        return self

    def magnitude(self) -> float:
        return float(np.sqrt(np.dot(self._xy, self._xy)))

    def clamp_magnitude(self, max_magnitude: float) -> 'Vector2':
        """
        Rescale to exactly max_magnitude if longer, otherwise leave unchanged.

        Args:
            max_magnitude: Upper bound on vector length

        Returns:
            self
        """
        self._xy[:] = clamp_speed(self._xy, max_magnitude)
        return self

    def normalize(self) -> 'Vector2':
        """Rescale to unit length; the zero vector is left as is"""
        mag = self.magnitude()
        if mag > 0:
            self._xy /= mag
        return self

    def angle(self) -> float:
        """Heading in radians (atan2(y, x))"""
        return math.atan2(self._xy[1], self._xy[0])

    def distance_to(self, other: 'Vector2') -> float:
        return distance_2d(self._xy, other._xy)

    def copy(self) -> 'Vector2':
        return Vector2(self._xy[0], self._xy[1])

    def as_array(self) -> np.ndarray:
        """Return a float64 copy [x, y]"""
        return self._xy.copy()

    def to_list(self) -> list:
        return self._xy.tolist()

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return bool(np.array_equal(self._xy, other._xy))

    def __repr__(self) -> str:
        return f"Vector2({self.x!r}, {self.y!r})"
