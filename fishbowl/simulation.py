"""
Fishbowl simulation kernel.

World aggregate and the loop that advances it one tick at a time.
The loop never samples wall-clock time for simulation purposes: the
driver passes elapsed seconds into every tick.
"""

import time
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .creature import Creature
from .food import FoodItem
from .peers import PeerView
from .errors import InvalidArgumentError
from .constants import DEFAULT_BOUNDS, TICK_TIME_WINDOW, TICK_SUMMARY_INTERVAL


@dataclass
class World:
    """
    Everything one tank holds.

    Attributes:
        creatures: Fish in update order
        food: Food items currently in the water
        bounds: (width, height) of the tank
        clock: Simulated seconds elapsed
        tick_count: Ticks completed
    """
    creatures: List[Creature] = field(default_factory=list)
    food: List[FoodItem] = field(default_factory=list)
    bounds: Tuple[float, float] = DEFAULT_BOUNDS
    clock: float = 0.0
    tick_count: int = 0

    def __post_init__(self):
        width, height = self.bounds
        if width <= 0 or height <= 0:
            raise InvalidArgumentError(f"Tank bounds must be positive, got {self.bounds}")
        self.bounds = (float(width), float(height))

    @property
    def player(self) -> Optional[Creature]:
        """First player-controlled creature, if any"""
        for creature in self.creatures:
            if creature.is_player_controlled:
                return creature
        return None

    def get_creature(self, creature_id: str) -> Optional[Creature]:
        for creature in self.creatures:
            if creature.creature_id == creature_id:
                return creature
        return None


class SimulationLoop:
    """
    Advances a World tick by tick.

    TICK CONTRACT:

    Phase A: Update (snapshot peers)
    --------------------------------
    A PeerView is taken from tick-start positions, then every creature
    updates in list order. Collisions read the snapshot, never a sibling
    that has already moved this tick.

    Phase B: Feeding
    ----------------
    After every update, each food item is offered to creatures in list
    order. The first creature within reach eats it; later creatures do
    not see it. Eaten items leave the world.
    """

    def __init__(self, autonomous_foraging: bool = False, verbose: bool = False,
                 summary_interval: int = TICK_SUMMARY_INTERVAL):
        """
        Args:
            autonomous_foraging: Steer non-player fish toward the nearest food before updating
            verbose: Print a tick summary every summary_interval ticks
            summary_interval: Ticks between summaries when verbose
        """
        self.autonomous_foraging = autonomous_foraging
        self.verbose = verbose
        self.summary_interval = summary_interval

        # Performance metrics
        self._tick_times: List[float] = []
        self._tick_time_sum: float = 0.0
        self._tick_time_window: int = TICK_TIME_WINDOW
        self._last_tick_count: int = 0
        self._last_creature_count: int = 0
        self._last_food_count: int = 0

    def tick(self, world: World, elapsed_seconds: float) -> List[FoodItem]:
        """
        Advance world by one tick.

        Args:
            world: World to mutate
            elapsed_seconds: Simulated time since the previous tick

        Returns:
            Food items eaten during this tick

        Raises:
            InvalidArgumentError: elapsed_seconds is negative
        """
        if elapsed_seconds < 0:
            raise InvalidArgumentError(f"elapsed_seconds must be >= 0, got {elapsed_seconds}")

        start_time = time.perf_counter()
        width, height = world.bounds

        # ============================================================
        # PHASE A: CREATURE UPDATES
        # ============================================================
        peers = PeerView.from_creatures(world.creatures)

        for row, creature in enumerate(world.creatures):
            if self.autonomous_foraging and not creature.is_player_controlled:
                creature.move_towards_food(world.food)
            creature.update(width, height, peers, elapsed_seconds, self_row=row)

        # ============================================================
        # PHASE B: FEEDING
        # ============================================================
        eaten = []
        remaining = []
        for food in world.food:
            if any(creature.is_near_food(food) for creature in world.creatures):
                eaten.append(food)
            else:
                remaining.append(food)
        world.food = remaining

        world.clock += elapsed_seconds
        world.tick_count += 1

        self._record_tick_time(time.perf_counter() - start_time)
        self._last_tick_count = world.tick_count
        self._last_creature_count = len(world.creatures)
        self._last_food_count = len(world.food)

        if self.verbose and self.summary_interval > 0 and world.tick_count % self.summary_interval == 0:
            self.print_tick_summary()

        return eaten

    def run(self, world: World, n_ticks: int, elapsed_seconds: float) -> int:
        """
        Run n_ticks fixed-step ticks.

        Returns:
            Total food items eaten
        """
        eaten_total = 0
        for _ in range(n_ticks):
            eaten_total += len(self.tick(world, elapsed_seconds))
        return eaten_total

    def add_food(self, world: World, item: FoodItem):
        """Drop an externally supplied food item into the tank"""
        world.food.append(item)

    def select_creature(self, world: World, x: float, y: float) -> Optional[Creature]:
        """
        Pick the creature under a pointer.

        Returns:
            First creature (in world order) whose body contains (x, y), or None
        """
        for creature in world.creatures:
            if creature.contains_point(x, y):
                return creature
        return None

    def get_snapshot(self, world: World) -> dict:
        """
        Render payload for the current world state.

        Returns:
            Dict with tick_count, clock, bounds, creatures, food, timing
        """
        return {
            'tick_count': world.tick_count,
            'clock': world.clock,
            'bounds': list(world.bounds),
            'creature_count': len(world.creatures),
            'creatures': [c.to_dict() for c in world.creatures],
            'food': [f.to_dict() for f in world.food],
            'timing': self.get_tick_stats(),
        }

    def get_tick_stats(self) -> dict:
        """
        Get current tick timing statistics.

        Returns:
            Dict with tick_count, avg_tick_time_ms, last_tick_time_ms
        """
        if not self._tick_times:
            return {
                'tick_count': self._last_tick_count,
                'avg_tick_time_ms': 0.0,
                'last_tick_time_ms': 0.0
            }

        avg_time = self._tick_time_sum / len(self._tick_times)
        last_time = self._tick_times[-1]

        return {
            'tick_count': self._last_tick_count,
            'avg_tick_time_ms': avg_time * 1000.0,
            'last_tick_time_ms': last_time * 1000.0
        }

    def _record_tick_time(self, elapsed: float):
        """
        Record tick timing for rolling average.

        Args:
            elapsed: Tick time in seconds
        """
        self._tick_times.append(elapsed)
        self._tick_time_sum += elapsed

        # Maintain rolling window
        if len(self._tick_times) > self._tick_time_window:
            removed = self._tick_times.pop(0)
            self._tick_time_sum -= removed

    def print_tick_summary(self):
        """Print tick summary to console (lightweight monitoring)"""
        stats = self.get_tick_stats()
        print(f"Tick {stats['tick_count']:5d} | "
              f"Avg: {stats['avg_tick_time_ms']:6.3f} ms | "
              f"Last: {stats['last_tick_time_ms']:6.3f} ms | "
              f"Creatures: {self._last_creature_count} | "
              f"Food: {self._last_food_count}")
