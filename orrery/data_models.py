#!/usr/bin/env python3
"""
Data models for the solar system generator.

This module defines the dataclasses shared between generation, kinematics and rendering.

Units and usage
- All lengths are in pixels [px] on the output canvas; y grows downwards.
- Time is measured in integer steps; one step is one animation frame.
- Orbit, Planet, Star and Scene are frozen: they are built once by the generator and
  only read afterwards, so frames may be computed in any order.
- OrbitSeed and PlanetSeed are the partial records the generator fills in.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class Orbit:
    """
    Fully specified elliptical orbit around the sun.

    Fields:
    - semi_major_axis / semi_minor_axis: ellipse radii in pixels (minor <= major)
    - rotation: orientation of the major axis in radians
    - period: time steps for one revolution
    - phase_offset: time step at which the orbit starts, in [0, period)
    - focus_x / focus_y: centre of the ellipse, placed so one focus sits on the sun
    - eccentricity: sqrt(1 - minor^2 / major^2)
    """
    semi_major_axis: float
    semi_minor_axis: float
    rotation: float
    period: int
    phase_offset: int
    focus_x: int
    focus_y: int
    eccentricity: float


@dataclass(frozen=True)
class Planet:
    """An orbiting body: render radius, RGB color and its orbit."""
    size: int
    color: Color
    orbit: Orbit


@dataclass(frozen=True)
class Star:
    """Background point light; brightness is a palette class from 0 (dim) to 4."""
    x: int
    y: int
    brightness: int


@dataclass(frozen=True)
class Scene:
    """
    Everything needed to render any frame.

    planets is ordered: later planets paint over earlier ones.
    """
    width: int
    height: int
    sun_x: int
    sun_y: int
    sun_size: int
    planets: Tuple[Planet, ...] = ()
    stars: Tuple[Star, ...] = ()

    @property
    def periods(self) -> Tuple[int, ...]:
        return tuple(p.orbit.period for p in self.planets)


@dataclass
class OrbitSeed:
    """Partially specified orbit; None means 'pick at random'."""
    semi_major_axis: Optional[float] = None
    semi_minor_axis: Optional[float] = None
    rotation: Optional[float] = None
    period: Optional[int] = None
    phase_offset: Optional[int] = None


@dataclass
class PlanetSeed:
    """Partially specified planet as read from a seed file or built in code."""
    size: Optional[int] = None
    color: Optional[Color] = None
    orbit: OrbitSeed = field(default_factory=OrbitSeed)
