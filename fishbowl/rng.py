"""
Deterministic RNG utilities for the fishbowl simulation.

Uses SHA256 hashing to derive stable seeds from hierarchical components
(tank_seed, creature_name, index, component_name). All randomness uses
numpy.random.Generator(PCG64) for reproducible cross-session results.
"""

import hashlib
import numpy as np
from typing import Any


def make_seed(*components: Any) -> int:
    """
    Generate deterministic 64-bit seed from hierarchical components.

    Uses SHA256 to hash components into stable seed value.

    Args:
        *components: Seed components (tank_seed, creature_name, index, etc.)

    Returns:
        64-bit integer seed for numpy RNG

    Example:
        creature_seed = make_seed(tank_seed, name, index)
        velocity_seed = make_seed(creature_seed, "initial_velocity")
    """
    hash_input = ":".join(str(c) for c in components)

    hash_bytes = hashlib.sha256(hash_input.encode('utf-8')).digest()
    seed = int.from_bytes(hash_bytes[:8], byteorder='big')

    return seed


def make_generator(seed: int) -> np.random.Generator:
    """Create a PCG64-backed generator from a seed produced by make_seed()"""
    return np.random.Generator(np.random.PCG64(seed))


def random_direction(seed: int) -> np.ndarray:
    """
    Generate random 2D direction.

    Components are drawn uniformly from [-1, 1] and normalized, so
    diagonals are slightly favoured. A draw landing on the origin is
    rejected and redrawn.

    Args:
        seed: RNG seed (from make_seed())

    Returns:
        2D unit vector as numpy array [x, y]
    """
    rng = make_generator(seed)

    while True:
        vec = rng.uniform(-1.0, 1.0, size=2)
        length_sq = np.dot(vec, vec)
        if length_sq > 1e-12:
            return vec / np.sqrt(length_sq)


def angle_jitter(rng: np.random.Generator, amplitude: float) -> float:
    """Uniform offset in [-amplitude, amplitude)"""
    return float(rng.uniform(-amplitude, amplitude))
