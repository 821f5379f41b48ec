"""
Data types mirroring the tank YAML schema.

These dataclasses are populated by loader.py from YAML files.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional

from .constants import (
    DEFAULT_FISH_WIDTH,
    DEFAULT_FISH_HEIGHT,
    DEFAULT_MAX_SPEED,
    HEALTH_INITIAL,
    FOOD_DEFAULT_RADIUS,
    FOOD_DEFAULT_COLOR,
    TICK_SUMMARY_INTERVAL,
)


# ============================================================================
# Creature Definition
# ============================================================================

@dataclass
class CreatureSpec:
    """A fish to place in the tank"""
    name: str
    color: str = "blue"
    gender: str = ""
    x: Optional[float] = None  # None = tank centre
    y: Optional[float] = None  # None = tank centre
    width: float = DEFAULT_FISH_WIDTH
    height: float = DEFAULT_FISH_HEIGHT
    max_speed: float = DEFAULT_MAX_SPEED
    health: float = HEALTH_INITIAL
    player_controlled: bool = False


# ============================================================================
# Food Definition
# ============================================================================

@dataclass
class FoodSpec:
    """A food pellet present when the tank opens"""
    x: float
    y: float
    radius: float = FOOD_DEFAULT_RADIUS
    color: str = FOOD_DEFAULT_COLOR


# ============================================================================
# Tank Definition
# ============================================================================

@dataclass
class SimulationSettings:
    """Loop driver defaults"""
    tick_delta_seconds: float = 1.0 / 60.0
    autonomous_foraging: bool = False
    summary_interval: int = TICK_SUMMARY_INTERVAL


@dataclass
class TankConfig:
    """Complete tank definition"""
    tank_id: str
    name: str
    bounds: Dict[str, float]  # {width, height}
    creatures: List[CreatureSpec]
    food: List[FoodSpec] = field(default_factory=list)
    simulation: SimulationSettings = field(default_factory=SimulationSettings)
    seed: Optional[int] = None
    description: Optional[str] = None
