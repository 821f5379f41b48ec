"""
Bounded health meter.

Every mutator clamps, so 0 <= current <= max holds at all times.
Amounts are usually a rate multiplied by elapsed seconds.
"""

from .constants import HEALTH_MAX, HEALTH_INITIAL
from .errors import InvalidArgumentError


class HealthResource:
    """
    Scalar health meter clamped to [0, max].

    Reaching zero has no side effects; the meter simply stays pinned
    until something increases it again.
    """

    def __init__(self, current: float = HEALTH_INITIAL, maximum: float = HEALTH_MAX):
        if maximum <= 0:
            raise InvalidArgumentError(f"Health maximum must be positive, got {maximum}")
        self.max = float(maximum)
        self.current = min(max(float(current), 0.0), self.max)

    def increase(self, amount: float):
        """
        Raise health by amount, capped at max.

        Args:
            amount: Non-negative increment

        Raises:
            InvalidArgumentError: amount is negative
        """
        _check_amount(amount)
        self.current = min(self.current + amount, self.max)

    def decrease(self, amount: float):
        """
        Lower health by amount, floored at 0.

        Args:
            amount: Non-negative decrement

        Raises:
            InvalidArgumentError: amount is negative
        """
        _check_amount(amount)
        self.current = max(self.current - amount, 0.0)

    @property
    def fraction(self) -> float:
        """Fill ratio for health bar rendering (0.0-1.0)"""
        return self.current / self.max

    @property
    def is_depleted(self) -> bool:
        return self.current <= 0.0

    def label(self) -> str:
        """Health bar caption, e.g. '50/100'"""
        return f"{round(self.current)}/{self.max:g}"

    def to_dict(self) -> dict:
        return {'current': self.current, 'max': self.max}

    @classmethod
    def from_dict(cls, data: dict) -> 'HealthResource':
        return cls(current=data['current'], maximum=data.get('max', HEALTH_MAX))

    def __repr__(self) -> str:
        return f"HealthResource(current={self.current!r}, max={self.max!r})"


def _check_amount(amount: float):
    if amount < 0:
        raise InvalidArgumentError(f"Health amount must be non-negative, got {amount}")
