"""
Tank population.

Builds a World from a tank definition with deterministic initial
headings. Player fish get a fresh InputState for the host to drive.
"""

from typing import List, Optional, Tuple

from .creature import Creature
from .controls import InputState
from .food import FoodItem
from .health import HealthResource
from .simulation import World
from .vector import Vector2
from .data_types import TankConfig, CreatureSpec, FoodSpec
from .rng import make_seed, make_generator, random_direction
from .spatial import clamp_to_extent
from .constants import INITIAL_SPEED


def spawn_world(
    tank: TankConfig,
    bounds: Optional[Tuple[float, float]] = None,
    seed: Optional[int] = None
) -> World:
    """
    Populate a World from a tank definition.

    Args:
        tank: Tank definition
        bounds: Optional (width, height) override (e.g. host viewport size)
        seed: Optional seed override (defaults to tank.seed, then 0)

    Returns:
        World with creatures and starting food
    """
    if bounds is None:
        bounds = (tank.bounds['width'], tank.bounds['height'])
    if seed is None:
        seed = tank.seed if tank.seed is not None else 0

    world = World(bounds=bounds)
    world.creatures = spawn_creatures(tank.creatures, world.bounds, seed, tank.tank_id)
    world.food = [_make_food(spec) for spec in tank.food]

    return world


def spawn_creatures(
    specs: List[CreatureSpec],
    bounds: Tuple[float, float],
    seed: int,
    tank_id: str = "tank"
) -> List[Creature]:
    """
    Create creatures from specs in order.

    Args:
        specs: Creature definitions
        bounds: (width, height) of the tank
        seed: Tank seed
        tank_id: Tank identifier (seed component)

    Returns:
        List of Creature instances
    """
    width, height = bounds
    creatures = []

    for i, spec in enumerate(specs):
        creature_id = f"{spec.name.lower()}-{i:04d}"
        creature_seed = make_seed(seed, tank_id, creature_id)

        x = width / 2 if spec.x is None else spec.x
        y = height / 2 if spec.y is None else spec.y
        clamped_x = clamp_to_extent(x, spec.width / 2, width)
        clamped_y = clamp_to_extent(y, spec.height / 2, height)
        if (clamped_x, clamped_y) != (x, y):
            print(f"[WARN] {creature_id} placed outside the tank at ({x}, {y}), "
                  f"moved to ({clamped_x}, {clamped_y})")

        # Initial drift in a random direction
        direction = random_direction(make_seed(creature_seed, "initial_velocity"))
        velocity = direction * INITIAL_SPEED

        creature = Creature(
            creature_id=creature_id,
            name=spec.name,
            position=Vector2(clamped_x, clamped_y),
            velocity=Vector2.from_array(velocity),
            width=spec.width,
            height=spec.height,
            color=spec.color,
            gender=spec.gender,
            is_player_controlled=spec.player_controlled,
            input_state=InputState() if spec.player_controlled else None,
            max_speed=spec.max_speed,
            health=HealthResource(current=spec.health),
            steering_rng=make_generator(make_seed(creature_seed, "steering")),
        )

        creatures.append(creature)

    return creatures


def _make_food(spec: FoodSpec) -> FoodItem:
    return FoodItem(position=Vector2(spec.x, spec.y), radius=spec.radius, color=spec.color)
