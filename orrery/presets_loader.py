#!/usr/bin/env python3
"""
Planet seed JSON loading.

A seed file pins down some or all properties of the planets; anything left out is
picked at random by the generator. Seeds are applied in order, so the first record
describes the first (bottom-most) planet.

Schema
======
[
  {
    "size": 2,                       # optional, px
    "color": "#ff0000",              # optional, "#rrggbb" or [r, g, b]
    "orbit": {                       # optional
      "semi_major_axis": 100,        # px
      "semi_minor_axis": 60,         # px, <= semi_major_axis
      "rotation": 0.0,               # radians
      "period": 200,                 # time steps
      "phase_offset": 0              # time steps, [0, period)
    }
  }
]

The top level may also be {"planets": [...]}. camelCase keys (semiMajorAxis,
semiMinorAxis, phaseOffset) are accepted as well.
"""
import json
import logging
from typing import Any, Dict, List

from .data_models import OrbitSeed, PlanetSeed
from .utils import parse_color, try_float, try_int

logger = logging.getLogger(__name__)

_ORBIT_KEYS = {
    "semi_major_axis": ("semi_major_axis", "semiMajorAxis"),
    "semi_minor_axis": ("semi_minor_axis", "semiMinorAxis"),
    "rotation": ("rotation",),
    "period": ("period", "orbitalPeriod"),
    "phase_offset": ("phase_offset", "phaseOffset", "orbitalOffset"),
}


class SeedFileError(Exception):
    """The seed file could not be read or does not hold a list of planet records."""


def _read_json(path: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise SeedFileError(f"cannot read planet seeds from {path}: {e}") from e


def _lookup(d: Dict[str, Any], names) -> Any:
    for n in names:
        if n in d:
            return d[n]
    return None


def _orbit_seed(raw: Dict[str, Any], index: int) -> OrbitSeed:
    seed = OrbitSeed()
    for field_name, names in _ORBIT_KEYS.items():
        value = _lookup(raw, names)
        if value is None:
            continue
        if field_name in ("period", "phase_offset"):
            parsed = try_int(value)
            ok = parsed is not None and (parsed > 0 if field_name == "period" else parsed >= 0)
        else:
            parsed = try_float(value)
            ok = parsed is not None and (parsed >= 0 or field_name == "rotation")
        if not ok:
            logger.warning("planet %d: ignoring invalid orbit %s=%r", index, field_name, value)
            continue
        setattr(seed, field_name, parsed)

    if seed.semi_major_axis is not None and seed.semi_major_axis < 1:
        logger.warning("planet %d: ignoring semi_major_axis below 1", index)
        seed.semi_major_axis = None
    if (seed.semi_major_axis is not None and seed.semi_minor_axis is not None
            and seed.semi_minor_axis > seed.semi_major_axis):
        logger.warning("planet %d: semi_minor_axis exceeds semi_major_axis; ignoring it", index)
        seed.semi_minor_axis = None
    if seed.period is not None and seed.phase_offset is not None and seed.phase_offset >= seed.period:
        seed.phase_offset %= seed.period
    return seed


def planet_seed_from_dict(raw: Dict[str, Any], index: int = 0) -> PlanetSeed:
    """Build a PlanetSeed from one JSON record; invalid fields are logged and left random."""
    seed = PlanetSeed()
    size = raw.get("size")
    if size is not None:
        parsed = try_int(size)
        if parsed is not None and parsed >= 1:
            seed.size = parsed
        else:
            logger.warning("planet %d: ignoring invalid size=%r", index, size)
    color = raw.get("color")
    if color is not None:
        seed.color = parse_color(color)
        if seed.color is None:
            logger.warning("planet %d: ignoring invalid color=%r", index, color)
    orbit = raw.get("orbit")
    if isinstance(orbit, dict):
        seed.orbit = _orbit_seed(orbit, index)
    elif orbit is not None:
        logger.warning("planet %d: orbit must be an object", index)
    return seed


def load_planet_seeds(path: str) -> List[PlanetSeed]:
    """
    Load planet seeds from a JSON file.

    Raises:
        SeedFileError: if the file is unreadable or not a list of objects
    """
    data = _read_json(path)
    if isinstance(data, dict):
        data = data.get("planets")
    if not isinstance(data, list):
        raise SeedFileError(f"{path}: expected a list of planet records")
    seeds: List[PlanetSeed] = []
    for i, raw in enumerate(data):
        if not isinstance(raw, dict):
            raise SeedFileError(f"{path}: planet record {i} is not an object")
        seeds.append(planet_seed_from_dict(raw, i))
    logger.info("Loaded %d planet seeds from %s", len(seeds), path)
    return seeds

