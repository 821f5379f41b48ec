"""
Creature (fish) runtime representation and per-tick behaviour.

A creature owns its position, velocity, heading and health. Player
creatures additionally hold a reference to an InputState owned by the
host. The update order is fixed: control, integration, boundary
steering, peer collision.
"""

import math
import numpy as np
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .vector import Vector2
from .health import HealthResource
from .controls import InputState
from .food import FoodItem
from .peers import PeerView
from .rng import make_seed, make_generator, angle_jitter
from .spatial import (
    heading,
    edge_repulsion,
    clamp_to_extent,
    smooth_angle_transition,
)
from .errors import InvalidArgumentError, PreconditionFailedError
from .constants import (
    DEFAULT_MAX_SPEED,
    DEFAULT_FISH_WIDTH,
    DEFAULT_FISH_HEIGHT,
    BURST_SPEED_MULTIPLIER,
    BURST_COST_PER_SECOND,
    MOVE_COST_PER_SECOND,
    IDLE_COST_PER_SECOND,
    REST_REGEN_PER_SECOND,
    REST_REGEN_CEILING,
    FOOD_HEALTH_GAIN,
    FORAGE_STEP,
    BOUNDARY_THRESHOLD,
    STEERING_RATE,
    STEERING_JITTER,
    COLLISION_DAMPING,
)


class CreatureStatus(Enum):
    """Behavioural state shown above a fish"""
    IDLE = "Idle"
    AWAKE = "Awake"
    RESTING = "Resting"
    SPEEDING = "Speeding"

    @property
    def label(self) -> str:
        """Overlay text; only resting and speeding are announced"""
        if self is CreatureStatus.RESTING:
            return "Resting"
        if self is CreatureStatus.SPEEDING:
            return "Speeding!"
        return ""


@dataclass(eq=False)
class Creature:
    """
    Runtime fish in the tank.

    Attributes:
        creature_id: Unique identifier (format: "{name}-{index:04d}" when spawned)
        name: Display name
        position: Centre in tank coordinates (+y is down)
        velocity: Displacement per tick
        width: Body length along the heading
        height: Body depth
        color: Render color
        gender: Free-form label for the info board
        is_player_controlled: True iff input_state is present
        input_state: Host-owned InputState (player fish only)
        max_speed: Speed cap used by steering, collision and foraging
        scale: Render/collision scale factor
        orientation: Heading in radians (derived from velocity if omitted)
        health: Health meter (starts at 50/100)
        food_eaten: Number of food items consumed
        status: Current CreatureStatus
        last_update_time: Simulated clock after the latest update (seconds)
        steering_rng: Generator for steering jitter (seeded from creature_id if omitted)
    """
    creature_id: str
    name: str
    position: Vector2
    velocity: Vector2
    width: float = DEFAULT_FISH_WIDTH
    height: float = DEFAULT_FISH_HEIGHT
    color: str = "blue"
    gender: str = ""
    is_player_controlled: bool = False
    input_state: Optional[InputState] = None
    max_speed: float = DEFAULT_MAX_SPEED
    scale: float = 1.0
    orientation: Optional[float] = None
    health: Optional[HealthResource] = None
    food_eaten: int = 0
    status: CreatureStatus = CreatureStatus.IDLE
    last_update_time: float = 0.0
    steering_rng: Optional[np.random.Generator] = None

    def __post_init__(self):
        """Validate control wiring, coerce vectors, initialize defaults"""
        if self.is_player_controlled and self.input_state is None:
            raise PreconditionFailedError(
                f"Player-controlled creature {self.creature_id} has no InputState")
        if not self.is_player_controlled and self.input_state is not None:
            raise PreconditionFailedError(
                f"Autonomous creature {self.creature_id} was given an InputState")

        if not isinstance(self.position, Vector2):
            self.position = Vector2.from_array(self.position)
        if not isinstance(self.velocity, Vector2):
            self.velocity = Vector2.from_array(self.velocity)

        if self.orientation is None:
            self.orientation = self.velocity.angle()

        if self.health is None:
            self.health = HealthResource()

        if self.steering_rng is None:
            self.steering_rng = make_generator(make_seed(self.creature_id, "steering"))

    # ------------------------------------------------------------------
    # Per-tick update
    # ------------------------------------------------------------------

    def update(
        self,
        bounds_width: float,
        bounds_height: float,
        peers,
        elapsed_seconds: float,
        self_row: Optional[int] = None
    ):
        """
        Advance this creature by one tick.

        Args:
            bounds_width: Tank width
            bounds_height: Tank height
            peers: PeerView snapshot (or a sequence of creatures, snapshotted here)
            elapsed_seconds: Simulated time since the previous tick
            self_row: This creature's row in the PeerView. Found by identity
                when peers is a sequence, by creature_id as a last resort.

        Raises:
            InvalidArgumentError: elapsed_seconds is negative
        """
        if elapsed_seconds < 0:
            raise InvalidArgumentError(f"elapsed_seconds must be >= 0, got {elapsed_seconds}")

        if not isinstance(peers, PeerView):
            peers = list(peers)
            if self_row is None:
                self_row = next((i for i, c in enumerate(peers) if c is self), None)
            peers = PeerView.from_creatures(peers)

        if self.is_player_controlled:
            self.apply_control(elapsed_seconds)

        self.position.add(self.velocity)

        self.avoid_boundaries(bounds_width, bounds_height)
        self.resolve_collisions(peers, self_row)

        self.last_update_time += elapsed_seconds

    def apply_control(self, elapsed_seconds: float):
        """
        Map the current InputState onto velocity, status and health.

        Resting halts the fish and regenerates health (only while at or
        below the regen ceiling). Moving costs health, bursting costs more.
        Holding still costs a small upkeep.
        """
        movement = self.input_state.movement_vector()

        if movement.resting:
            self.status = CreatureStatus.RESTING
            self.velocity.set(0.0, 0.0)
            if self.health.current <= REST_REGEN_CEILING:
                self.health.increase(REST_REGEN_PER_SECOND * elapsed_seconds)
            return

        self.status = CreatureStatus.AWAKE

        if movement.is_moving:
            self.velocity.set(movement.dx, movement.dy)
            self.orientation = self.velocity.angle()

            if movement.burst:
                self.status = CreatureStatus.SPEEDING
                self.velocity.scale(BURST_SPEED_MULTIPLIER)
                self.health.decrease(BURST_COST_PER_SECOND * elapsed_seconds)

            if elapsed_seconds > 0:
                self.health.decrease(MOVE_COST_PER_SECOND * elapsed_seconds)
        else:
            self.velocity.set(0.0, 0.0)
            self.health.decrease(IDLE_COST_PER_SECOND * elapsed_seconds)

    def avoid_boundaries(self, bounds_width: float, bounds_height: float):
        """
        Steer away from nearby tank walls, then keep the body inside.

        Within BOUNDARY_THRESHOLD of a wall the heading turns gradually
        toward the combined push direction (with a little jitter) and the
        fish swims on at max_speed.
        """
        delta_x = edge_repulsion(self.position.x, bounds_width, BOUNDARY_THRESHOLD)
        delta_y = edge_repulsion(self.position.y, bounds_height, BOUNDARY_THRESHOLD)

        if delta_x != 0.0 or delta_y != 0.0:
            target_angle = math.atan2(delta_y, delta_x) + angle_jitter(self.steering_rng, STEERING_JITTER)
            self.orientation = smooth_angle_transition(self.orientation, target_angle, STEERING_RATE)
            self._velocity_from_orientation()

        self.position.set(
            clamp_to_extent(self.position.x, self.width / 2, bounds_width),
            clamp_to_extent(self.position.y, self.height / 2, bounds_height),
        )

    def resolve_collisions(self, peers: PeerView, self_row: Optional[int] = None):
        """
        Push away from every overlapping peer.

        Each overlap nudges velocity away from the peer in proportion to
        the overlap depth, then speed is clamped to max_speed and the
        heading follows velocity. Peers are processed in snapshot order.
        The row at self_row (or, if not given, the row holding this
        creature_id) is never treated as a peer.
        """
        if len(peers) == 0:
            return

        diff = self.position.as_array() - peers.positions  # (N, 2)
        distances = np.sqrt(np.sum(diff ** 2, axis=1))  # (N,)
        min_distances = (self.width + peers.widths) / 2 * self.scale  # (N,)

        overlapping = distances < min_distances
        if self_row is None:
            self_row = peers.row_of(self.creature_id)
        if self_row is not None:
            overlapping[self_row] = False

        for row in np.flatnonzero(overlapping):
            overlap = min_distances[row] - distances[row]
            avoidance_angle = math.atan2(diff[row, 1], diff[row, 0]) + math.pi

            self.velocity.x -= COLLISION_DAMPING * math.cos(avoidance_angle) * overlap
            self.velocity.y -= COLLISION_DAMPING * math.sin(avoidance_angle) * overlap
            self.velocity.clamp_magnitude(self.max_speed)

            self.orientation = self.velocity.angle()

    def _velocity_from_orientation(self):
        self.velocity.set(
            math.cos(self.orientation) * self.max_speed,
            math.sin(self.orientation) * self.max_speed,
        )

    # ------------------------------------------------------------------
    # Feeding
    # ------------------------------------------------------------------

    def is_near_food(self, food: FoodItem) -> bool:
        """
        Eat the food if it is within reach.

        Reach is half the body width plus the food radius. A hit counts
        as a meal immediately (food_eaten and health go up), so do not
        call this just to look.

        Returns:
            True if the food was eaten
        """
        distance = self.position.distance_to(food.position)
        if distance < self.width / 2 + food.radius:
            self.eat_food()
            return True
        return False

    def eat_food(self):
        self.food_eaten += 1
        self.health.increase(FOOD_HEALTH_GAIN)

    def move_towards_food(self, food_items: Sequence[FoodItem]):
        """
        Bias velocity toward the nearest food item.

        Ties go to the first item in iteration order. No food, no change.
        """
        if not food_items:
            return

        here = self.position.as_array()
        food_positions = np.array([f.position.as_array() for f in food_items], dtype=np.float64)
        offsets = food_positions - here  # (M, 2)
        dist_sq = np.sum(offsets ** 2, axis=1)
        nearest = int(np.argmin(dist_sq))  # argmin returns the first minimum

        angle_to_food = heading(offsets[nearest])
        self.velocity.add(Vector2.from_angle(angle_to_food, FORAGE_STEP))
        self.velocity.clamp_magnitude(self.max_speed)

        self.orientation = self.velocity.angle()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains_point(self, x: float, y: float) -> bool:
        """Hit-test for pointer selection (within half the body width)"""
        return math.hypot(self.position.x - x, self.position.y - y) <= self.width / 2

    @property
    def status_label(self) -> str:
        return self.status.label

    def describe(self) -> str:
        """One-line info board text for a selected fish"""
        return (f"Color: {self.color}, Size: {self.width:g}x{self.height:g}, "
                f"Name: {self.name}, Gender: {self.gender}, food eaten: {self.food_eaten}")

    def to_dict(self) -> dict:
        """
        Serialize creature to JSON-compatible dict.

        Returns:
            Dict with all render-relevant and state fields
        """
        return {
            'creature_id': self.creature_id,
            'name': self.name,
            'gender': self.gender,
            'color': self.color,
            'position': self.position.to_list(),
            'velocity': self.velocity.to_list(),
            'orientation': float(self.orientation),
            'width': self.width,
            'height': self.height,
            'max_speed': self.max_speed,
            'scale': self.scale,
            'is_player_controlled': self.is_player_controlled,
            'health': self.health.to_dict(),
            'food_eaten': self.food_eaten,
            'status': self.status.value,
            'status_label': self.status_label,
            'last_update_time': self.last_update_time,
            'input': self.input_state.to_dict() if self.input_state is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Creature':
        """
        Deserialize creature from dict.

        A fresh InputState is created for player fish and seeded with the
        stored flags. Steering jitter restarts from the id-derived seed.
        """
        input_state = None
        if data.get('is_player_controlled', False):
            input_state = InputState()
            for flag, value in (data.get('input') or {}).items():
                setattr(input_state, flag, bool(value))

        return cls(
            creature_id=data['creature_id'],
            name=data['name'],
            position=Vector2.from_array(data['position']),
            velocity=Vector2.from_array(data['velocity']),
            width=data.get('width', DEFAULT_FISH_WIDTH),
            height=data.get('height', DEFAULT_FISH_HEIGHT),
            color=data.get('color', 'blue'),
            gender=data.get('gender', ''),
            is_player_controlled=data.get('is_player_controlled', False),
            input_state=input_state,
            max_speed=data.get('max_speed', DEFAULT_MAX_SPEED),
            scale=data.get('scale', 1.0),
            orientation=data.get('orientation'),
            health=HealthResource.from_dict(data['health']) if 'health' in data else None,
            food_eaten=data.get('food_eaten', 0),
            status=CreatureStatus(data.get('status', CreatureStatus.IDLE.value)),
            last_update_time=data.get('last_update_time', 0.0),
        )
