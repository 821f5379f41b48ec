"""
Headless tank runner.

Loads a tank file, runs a fixed number of ticks at the tank's tick delta,
and prints periodic summaries plus a final per-fish report. Player input
can be scripted with --hold (keys held for the whole run).

Example:
    python scripts/run_headless.py --tank data/tanks/default.yaml --ticks 600 --hold right --hold s
"""

import argparse
import sys
from pathlib import Path
from typing import Tuple

from fishbowl.loader import load_tank, ConfigLoadError
from fishbowl.spawning import spawn_world
from fishbowl.simulation import SimulationLoop
from fishbowl.food import FoodItem
from fishbowl.vector import Vector2


REPO_ROOT = Path(__file__).parent.parent


def food_position(raw: str) -> Tuple[float, float]:
    """argparse type for --food: 'x,y' in tank coordinates"""
    try:
        x, y = (float(v) for v in raw.split(','))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected x,y (e.g. 300,250), got '{raw}'")
    return x, y


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a fishbowl tank without a display")
    parser.add_argument('--tank', type=Path, default=REPO_ROOT / "data" / "tanks" / "default.yaml",
                        help="Tank YAML file")
    parser.add_argument('--schemas', type=Path, default=REPO_ROOT / "data" / "schemas",
                        help="Directory holding tank.schema.json")
    parser.add_argument('--ticks', type=int, default=600, help="Number of ticks to run")
    parser.add_argument('--dt', type=float, default=None,
                        help="Seconds per tick (default: tank setting)")
    parser.add_argument('--seed', type=int, default=None, help="Override tank seed")
    parser.add_argument('--hold', action='append', default=[],
                        help="Key held by the player for the whole run (repeatable, e.g. ArrowRight, s)")
    parser.add_argument('--food', action='append', default=[], type=food_position,
                        help="Extra food pellet as x,y (repeatable)")
    parser.add_argument('--forage', action='store_true', help="Autonomous fish steer toward food")
    parser.add_argument('--quiet', action='store_true', help="Suppress periodic tick summaries")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        tank = load_tank(args.tank, args.schemas)
    except ConfigLoadError as e:
        print(f"[FAIL] {e}")
        return 1

    world = spawn_world(tank, seed=args.seed)
    loop = SimulationLoop(
        autonomous_foraging=args.forage or tank.simulation.autonomous_foraging,
        verbose=not args.quiet,
        summary_interval=tank.simulation.summary_interval
    )
    dt = args.dt if args.dt is not None else tank.simulation.tick_delta_seconds

    for x, y in args.food:
        loop.add_food(world, FoodItem(position=Vector2(x, y)))

    player = world.player
    if player is not None:
        for key in args.hold:
            key_name = {'up': 'ArrowUp', 'down': 'ArrowDown',
                        'left': 'ArrowLeft', 'right': 'ArrowRight'}.get(key, key)
            if not player.input_state.handle_key_down(key_name):
                print(f"[WARN] Key '{key}' is not bound, ignoring")
    elif args.hold:
        print("[WARN] Tank has no player fish, --hold ignored")

    print(f"[OK] Tank '{tank.name}' loaded: {len(world.creatures)} fish, "
          f"{len(world.food)} food, bounds={world.bounds}, dt={dt}s")

    eaten = loop.run(world, args.ticks, dt)

    print(f"\n[OK] Ran {world.tick_count} ticks ({world.clock:.2f}s simulated), {eaten} food eaten")
    for creature in world.creatures:
        print(f"  {creature.creature_id}: pos=({creature.position.x:7.2f}, {creature.position.y:7.2f}) "
              f"health={creature.health.label()} status={creature.status.value} "
              f"food_eaten={creature.food_eaten}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
