#!/usr/bin/env python3
"""
Frame count for a seamless animation loop.

After lcm(periods) steps every planet has completed a whole number of revolutions,
so frame 0 and frame N are identical.
"""
import math
from functools import reduce
from typing import Iterable

from .data_models import Scene


def lcm_of(periods: Iterable[int]) -> int:
    """
    Least common multiple of positive integer periods, folded left to right.

    Raises:
        ValueError: if periods is empty or contains a non-positive value
    """
    values = [int(p) for p in periods]
    if not values:
        raise ValueError("at least one period is required")
    if any(p <= 0 for p in values):
        raise ValueError(f"periods must be positive, got {values}")
    return reduce(lambda a, b: (a * b) // math.gcd(a, b), values)


def resolve_loop_frame_count(scene: Scene) -> int:
    return lcm_of(scene.periods)
