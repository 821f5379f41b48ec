"""
Spatial utility functions for 2D tank geometry.

Helper functions for distances, heading arithmetic, and edge steering.
All helpers are stateless and total: degenerate inputs produce a
defined result instead of an error.
"""

import math
import numpy as np


def distance_2d(pos_a: np.ndarray, pos_b: np.ndarray) -> float:
    """
    Calculate Euclidean distance between two 2D points.

    Args:
        pos_a: Position [x, y]
        pos_b: Position [x, y]

    Returns:
        Distance in tank units
    """
    diff = pos_a - pos_b
    return float(np.sqrt(np.dot(diff, diff)))


def heading(vec: np.ndarray) -> float:
    """Angle of a 2D vector in radians (atan2(y, x); 0.0 for the zero vector)"""
    return math.atan2(float(vec[1]), float(vec[0]))


def wrap_angle(angle: float) -> float:
    """
    Wrap an angle difference into [-pi, pi].

    Args:
        angle: Angle in radians (any magnitude)

    Returns:
        Equivalent angle within [-pi, pi]
    """
    while angle > math.pi:
        angle -= 2.0 * math.pi
    while angle < -math.pi:
        angle += 2.0 * math.pi
    return angle


def smooth_angle_transition(current: float, target: float, rate: float) -> float:
    """
    Rotate current heading toward target along the shortest arc.

    Args:
        current: Current heading (radians)
        target: Target heading (radians)
        rate: Fraction of the angular gap to close (0-1)

    Returns:
        New heading (radians, not re-wrapped)
    """
    return current + wrap_angle(target - current) * rate


def clamp_speed(velocity: np.ndarray, max_speed: float) -> np.ndarray:
    """
    Cap the length of a 2D vector (Vector2.clamp_magnitude delegates here).

    Args:
        velocity: Per-tick displacement [vx, vy]
        max_speed: Longest allowed displacement

    Returns:
        velocity itself when within the cap, else a rescaled copy of length max_speed
    """
    speed = float(np.hypot(velocity[0], velocity[1]))
    if speed <= max_speed:
        return velocity
    return velocity * (max_speed / speed)


def edge_repulsion(coord: float, extent: float, threshold: float) -> float:
    """
    Linear push away from the nearest edge of [0, extent].

    Full strength (1.0) at an edge, zero at `threshold` units inside.
    The low edge wins when both are within reach (narrow tanks).

    Args:
        coord: Position along the axis
        extent: Axis length (tank width or height)
        threshold: Reaction distance from an edge

    Returns:
        Signed push: positive toward +axis, negative toward -axis, 0.0 if clear
    """
    if coord < threshold:
        return (threshold - coord) / threshold
    if coord > extent - threshold:
        return -(threshold - (extent - coord)) / threshold
    return 0.0


def clamp_to_extent(coord: float, half_size: float, extent: float) -> float:
    """Clamp a centre coordinate so a body of half_size stays within [0, extent]"""
    return max(half_size, min(coord, extent - half_size))
