#!/usr/bin/env python3
"""
General utilities for the solar system generator.
"""
import math
from typing import Optional, Sequence, Tuple, Union


def try_float(val) -> Optional[float]:
    if isinstance(val, bool):
        return None
    try:
        f = float(val)
    except (TypeError, ValueError):
        return None
    return f if math.isfinite(f) else None


def try_int(val) -> Optional[int]:
    f = try_float(val)
    if f is None or not f.is_integer():
        return None
    return int(f)


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves going up (Python's round() goes to even)."""
    return math.floor(x + 0.5)


def color_from_int(value: int) -> Tuple[int, int, int]:
    value = max(0, min(0xFFFFFF, int(value)))
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def parse_color(c: Union[str, Sequence[int]]) -> Optional[Tuple[int, int, int]]:
    """
    Accept '#rrggbb', '#rgb' or an [r, g, b] list; return an RGB tuple or None.
    """
    if isinstance(c, str):
        s = c.strip().lstrip("#")
        if len(s) == 3:
            s = "".join(ch * 2 for ch in s)
        if len(s) != 6:
            return None
        try:
            return color_from_int(int(s, 16))
        except ValueError:
            return None
    try:
        r, g, b = (int(v) for v in c)
    except (TypeError, ValueError):
        return None
    return (max(0, min(255, r)), max(0, min(255, g)), max(0, min(255, b)))
