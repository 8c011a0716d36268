#!/usr/bin/env python3
"""
Procedural generation of the sun, starfield and planets.

Every random draw goes through an injected source with a random() method returning
a float in [0, 1) (random.Random satisfies it), so a fixed seed reproduces a scene.
Fields already present on a PlanetSeed are never overwritten.
"""
import logging
import math
import random
from dataclasses import replace
from typing import Iterable, List, Optional, Protocol, Sequence, Tuple

from .config import ConfigError, GeneratorConfig, validate_config
from .constants import COLORSPACE_SIZE, DEG_360, MAXIMUM_PLANET_SIZE
from .data_models import Orbit, OrbitSeed, Planet, PlanetSeed, Scene, Star
from .kinematics import ellipse_perimeter
from .utils import color_from_int, round_half_up

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def random(self) -> float: ...


def sun_position(width: int, height: int, alignment: str) -> Tuple[int, int]:
    """Pixel position of the sun for a canvas and one of the SUN_ALIGNMENTS."""
    half_w, half_h = width // 2, height // 2
    if alignment == "center":
        return (half_w, half_h)
    if alignment == "left":
        return (min(half_h, half_w), half_h)
    if alignment == "right":
        return (width - min(half_h, half_w), half_h)
    if alignment == "top":
        return (half_w, min(half_w, half_h))
    if alignment == "bottom":
        return (half_w, height - min(half_w, half_h))
    raise ValueError(f"unknown sun alignment: {alignment!r}")


def orbit_radius_bounds(width: int, height: int, sun_size: int) -> Tuple[float, float]:
    """
    (min_radius, max_radius) for random semi-major axes.

    The ceiling is a quarter of the smaller canvas side. It is loose: long ellipses
    can still leave the canvas on non-square outputs.
    """
    return float(sun_size), min(width, height) / 4.0


def generate_stars(width: int, height: int, density: float, rng: RandomSource) -> List[Star]:
    """
    Sample floor(width * height * density) independent background stars.

    brightness = 4 - floor(sqrt(U * 25)) puts (9 - 2k)/25 of the mass on class k, so
    class 0 (the dimmest palette entry) is the most common.
    """
    count = math.floor(width * height * density)
    stars = []
    for _ in range(count):
        x = math.floor(rng.random() * width)
        y = math.floor(rng.random() * height)
        brightness = 4 - math.floor(math.sqrt(rng.random() * 25))
        stars.append(Star(x=x, y=y, brightness=brightness))
    return stars


def initialize_orbit(seed: OrbitSeed, sun_x: float, sun_y: float,
                     min_radius: float, max_radius: float, rng: RandomSource) -> Orbit:
    """
    Fill in the missing fields of an orbit seed, in dependency order.

    Args:
        seed: Partially specified orbit (left untouched)
        sun_x, sun_y: Sun position in pixels; it becomes one focus of the ellipse
        min_radius: Smallest random semi-major axis (>= 1 keeps the period positive)
        max_radius: Largest random semi-major axis
        rng: Source of uniform floats in [0, 1)

    Returns:
        A fully specified Orbit
    """
    r_maj = seed.semi_major_axis
    if r_maj is None:
        r_maj = round_half_up(min_radius + (rng.random() * (max_radius - min_radius)))
    r_min = seed.semi_minor_axis
    if r_min is None:
        r_min = round_half_up(rng.random() * r_maj)
    theta = seed.rotation
    if theta is None:
        theta = rng.random() * DEG_360
    period = seed.period
    if period is None:
        period = round_half_up(ellipse_perimeter(r_min, r_maj))
    offset = seed.phase_offset
    if offset is None:
        offset = math.floor(rng.random() * period)
    elif period > 0:
        offset %= period

    # linear eccentricity: distance from the ellipse centre to either focus
    c = math.sqrt(max(0.0, (r_maj * r_maj) - (r_min * r_min)))
    ecc = math.sqrt(max(0.0, 1.0 - ((r_min * r_min) / (r_maj * r_maj)))) if r_maj > 0 else 0.0

    return Orbit(
        semi_major_axis=r_maj,
        semi_minor_axis=r_min,
        rotation=theta,
        period=int(period),
        phase_offset=int(offset),
        focus_x=math.floor(sun_x + (c * math.sin(theta))),
        focus_y=math.floor(sun_y - (c * math.cos(theta))),
        eccentricity=ecc,
    )


def initialize_planet(seed: PlanetSeed, sun_x: float, sun_y: float,
                      min_radius: float, max_radius: float, rng: RandomSource) -> Planet:
    """Turn a (possibly empty) PlanetSeed into a Planet; size and color are drawn first."""
    size = seed.size
    if size is None:
        size = max(1, math.ceil(rng.random() * MAXIMUM_PLANET_SIZE))
    color = seed.color
    if color is None:
        color = color_from_int(round_half_up(rng.random() * COLORSPACE_SIZE))
    orbit = initialize_orbit(seed.orbit, sun_x, sun_y, min_radius, max_radius, rng)
    return Planet(size=size, color=color, orbit=orbit)


def _pad_seeds(seeds: Optional[Sequence[PlanetSeed]], count: int) -> List[PlanetSeed]:
    out = [replace(s, orbit=replace(s.orbit)) for s in (seeds or [])][:count]
    while len(out) < count:
        out.append(PlanetSeed())
    return out


def generate_scene(config: GeneratorConfig, rng: Optional[RandomSource] = None,
                   seeds: Optional[Iterable[PlanetSeed]] = None) -> Scene:
    """
    Validate the configuration, then build the immutable Scene.

    Raises:
        ConfigError: with every violated rule, before any random draw is made
    """
    errors = validate_config(config)
    if errors:
        raise ConfigError(errors)
    if rng is None:
        rng = random.Random(config.seed)

    width, height = config.output_width, config.output_height
    sun_x, sun_y = sun_position(width, height, config.sun_alignment)

    stars = generate_stars(width, height, config.star_density, rng)

    min_radius, max_radius = orbit_radius_bounds(width, height, config.sun_size)
    planets = []
    for i, seed in enumerate(_pad_seeds(list(seeds or []), config.num_planets)):
        planet = initialize_planet(seed, sun_x, sun_y, min_radius, max_radius, rng)
        o = planet.orbit
        logger.debug(
            "planet %d: size=%d color=%s a=%s b=%s rot=%.3f period=%d offset=%d e=%.3f",
            i, planet.size, planet.color, o.semi_major_axis, o.semi_minor_axis,
            o.rotation, o.period, o.phase_offset, o.eccentricity,
        )
        planets.append(planet)

    logger.info("Generated scene %dx%d: sun at (%d, %d), %d stars, %d planets",
                width, height, sun_x, sun_y, len(stars), len(planets))
    return Scene(
        width=width,
        height=height,
        sun_x=sun_x,
        sun_y=sun_y,
        sun_size=config.sun_size,
        planets=tuple(planets),
        stars=tuple(stars),
    )
