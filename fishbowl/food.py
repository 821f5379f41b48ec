"""
Food items.

Food is placed by the host (or listed in a tank file). The simulation
only removes it once a creature reaches it.
"""

from dataclasses import dataclass

from .vector import Vector2
from .constants import FOOD_DEFAULT_RADIUS, FOOD_DEFAULT_COLOR


@dataclass(eq=False)
class FoodItem:
    """
    A pellet of food.

    Identity-compared: two pellets at the same spot are still two pellets.

    Attributes:
        position: Centre of the pellet
        radius: Pellet radius (adds to a creature's reach)
        color: Render color
    """
    position: Vector2
    radius: float = FOOD_DEFAULT_RADIUS
    color: str = FOOD_DEFAULT_COLOR

    def __post_init__(self):
        if not isinstance(self.position, Vector2):
            self.position = Vector2.from_array(self.position)

    def to_dict(self) -> dict:
        return {
            'position': self.position.to_list(),
            'radius': self.radius,
            'color': self.color,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'FoodItem':
        return cls(
            position=Vector2.from_array(data['position']),
            radius=data.get('radius', FOOD_DEFAULT_RADIUS),
            color=data.get('color', FOOD_DEFAULT_COLOR),
        )
