#!/usr/bin/env python3
"""
Orbital kinematics for the solar system generator.

Responsibilities
- Warp a normalized orbital phase so bodies move faster near periapsis (warp).
- Evaluate a body's pixel position at any integer time step (position_at).
- Derive the start/end angles of the visible trail behind a body (trail_arc) and
  sample points along it for stroking (arc_point).

Conventions
- Phase 0 maps to the apoapsis end of the major axis; phase 0.5 to periapsis,
  the extremum nearest the sun.
- Positions are integer pixels on the canvas, y growing downwards.
- trail_arc angles use the drawing surface's ellipse convention: x radius is the
  minor axis, y radius the major axis, the whole ellipse rotated by orbit.rotation.
  This is a quarter turn away from the convention used by position_at, which is
  why the two use different angular offsets.

Numerical notes
- The speed curve is a hand-fitted rational function, not a Kepler equation solve.
  As the shape parameter s = 1 - e approaches 0 it spends more of the period near
  phase 0 and 1 (apoapsis); at s = 1 it is the identity.
- Everything here is pure; frames may be evaluated in any order or in parallel.
"""

import logging
import math
from typing import Optional, Tuple, Union

from .constants import DEG_90, DEG_180, DEG_270, DEG_360
from .data_models import Orbit, Planet
from .utils import round_half_up

logger = logging.getLogger(__name__)


def _g(n: float) -> float:
    return 0.5 * (1.0 + (1.0 / math.sqrt(n / (n + 4.0))))


def _h(x: float, n: float) -> float:
    g = _g(n)
    return (0.5 * ((-1.0 / (n * ((2.0 * x) - g))) - g)) + 0.5


def warp(t: float, s: float) -> float:
    """
    Map normalized phase t to a warped phase approximating Kepler-like speed.

    The curve is symmetric about t = 0.5, i.e. warp(t, s) == 1 - warp(1 - t, s),
    and monotonically non-decreasing in t.

    Args:
        t: Normalized phase in [0, 1]
        s: Shape parameter 1 - eccentricity, in (0, 1]

    Returns:
        Warped phase in [0, 1]. An out-of-range t is logged and yields 0.0.
        For s <= 0 (a flat orbit) the limiting step function is returned.
    """
    if not 0.0 <= t <= 1.0:
        logger.warning("warp: invalid phase t=%r", t)
        return 0.0
    if s <= 0.0:
        if t == 0.5:
            return 0.5
        return 0.0 if t < 0.5 else 1.0
    if t < 0.5:
        return ((1.0 - s) * _h(t, 1.0 / s)) + (s * t)
    return 1.0 - (((1.0 - s) * _h(1.0 - t, 1.0 / s)) + (s * (1.0 - t)))


def relative_phase(orbit: Orbit, t: int) -> float:
    """Phase of the orbit at time step t, in [0, 1). Zero-period orbits sit at phase 0."""
    if orbit.period <= 0:
        return 0.0
    return ((t + orbit.phase_offset) % orbit.period) / orbit.period


def _orbit_of(body: Union[Planet, Orbit]) -> Orbit:
    return body.orbit if isinstance(body, Planet) else body


def position_at(body: Union[Planet, Orbit], t: int) -> Tuple[int, int]:
    """
    Find the position to draw a body at.

    Uses the parametric closed form of an ellipse rotated by the orbit's rotation
    about its centre (focus_x, focus_y).

    Args:
        body: A Planet or its Orbit
        t: Time step; any integer, negative values included

    Returns:
        (x, y) integer pixel coordinates of the body's centre
    """
    orb = _orbit_of(body)
    rel_t = relative_phase(orb, t)
    radial = (DEG_360 * warp(rel_t, 1.0 - orb.eccentricity)) + DEG_180

    phi = DEG_90 + orb.rotation
    cos_r, sin_r = math.cos(radial), math.sin(radial)
    cos_p, sin_p = math.cos(phi), math.sin(phi)
    x = (orb.semi_major_axis * cos_r * cos_p) - (orb.semi_minor_axis * sin_r * sin_p) + orb.focus_x
    y = (orb.semi_major_axis * cos_r * sin_p) + (orb.semi_minor_axis * sin_r * cos_p) + orb.focus_y
    return (round_half_up(x), round_half_up(y))


def _arc_angle(orbit: Orbit, t: int) -> float:
    return (DEG_360 * warp(relative_phase(orbit, t), 1.0 - orbit.eccentricity)) + DEG_270


def trail_arc(body: Union[Planet, Orbit], t: int, trail_fraction: float) -> Optional[Tuple[float, float]]:
    """
    Angles bounding the trail behind a body at time t.

    The trail covers the last floor(period / trail_fraction) time steps.

    Returns:
        (start_angle, end_angle) in radians, or None when trails are disabled
        (trail_fraction == 0) or the orbit has no period.
    """
    orb = _orbit_of(body)
    if trail_fraction == 0 or orb.period <= 0:
        return None
    start_t = t - math.floor(orb.period / trail_fraction)
    return (_arc_angle(orb, start_t), _arc_angle(orb, t))


def arc_sweep(start_angle: float, end_angle: float) -> float:
    """Forward angular distance from start to end, in [0, 2*pi)."""
    return (end_angle - start_angle) % DEG_360


def arc_point(orbit: Orbit, angle: float) -> Tuple[float, float]:
    """
    Point on the orbit ellipse at a trail_arc angle (not rounded).
    """
    ex = orbit.semi_minor_axis * math.cos(angle)
    ey = orbit.semi_major_axis * math.sin(angle)
    cos_t, sin_t = math.cos(orbit.rotation), math.sin(orbit.rotation)
    return (orbit.focus_x + ex * cos_t - ey * sin_t,
            orbit.focus_y + ex * sin_t + ey * cos_t)


def ellipse_perimeter(a: float, b: float) -> float:
    """Ramanujan's approximation of an ellipse perimeter with radii a and b."""
    return math.pi * ((3 * (a + b)) - math.sqrt(((3 * a) + b) * (a + (3 * b))))
