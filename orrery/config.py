#!/usr/bin/env python3
"""
Run configuration and validation.

GeneratorConfig mirrors the command line options. validate_config() checks every
rule and returns all violations at once so the user can fix them in one go.
"""
import math
from dataclasses import dataclass
from typing import List, Optional

from .constants import (
    DEFAULT_DELAY_PER_FRAME,
    DEFAULT_NUM_PLANETS,
    DEFAULT_OUTPUT_HEIGHT,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_OUTPUT_WIDTH,
    DEFAULT_STAR_DENSITY,
    DEFAULT_SUN_ALIGNMENT,
    DEFAULT_SUN_SIZE,
    DEFAULT_TOTAL_FRAMES,
    DEFAULT_TRAIL_FRACTION,
    MINIMUM_OUTPUT_DIMENSION,
    SUN_ALIGNMENTS,
)


class ConfigError(ValueError):
    """Raised when a configuration breaks one or more rules; .errors lists them all."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


@dataclass
class GeneratorConfig:
    # generation
    star_density: float = DEFAULT_STAR_DENSITY
    num_planets: int = DEFAULT_NUM_PLANETS
    sun_size: int = DEFAULT_SUN_SIZE
    sun_alignment: str = DEFAULT_SUN_ALIGNMENT
    seed: Optional[int] = None
    # output
    trail_fraction: float = DEFAULT_TRAIL_FRACTION
    output_width: int = DEFAULT_OUTPUT_WIDTH
    output_height: int = DEFAULT_OUTPUT_HEIGHT
    perfect_loop: bool = False
    delay_per_frame: int = DEFAULT_DELAY_PER_FRAME
    total_frames: int = DEFAULT_TOTAL_FRAMES
    output_path: str = DEFAULT_OUTPUT_PATH


def _is_int(v) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def _is_number(v) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool) and math.isfinite(v)


def validate_config(cfg: GeneratorConfig) -> List[str]:
    """Return a message for every invalid option; an empty list means the config is usable."""
    errors: List[str] = []

    if not _is_number(cfg.star_density) or not 0 <= cfg.star_density <= 1:
        errors.append("--star-density (-s) must be a number from 0 to 1 (inclusive)")
    if not _is_int(cfg.num_planets) or cfg.num_planets < 1:
        errors.append("--num-planets (-n) must be an integer greater than 0")
    if not _is_int(cfg.sun_size) or cfg.sun_size < 1:
        errors.append("--sun-size (-c) must be an integer greater than 0")
    if cfg.sun_alignment not in SUN_ALIGNMENTS:
        errors.append("--sun-alignment (-a) must be one of: " + ", ".join(SUN_ALIGNMENTS))
    if cfg.seed is not None and not _is_int(cfg.seed):
        errors.append("--seed must be an integer")

    if not _is_number(cfg.trail_fraction) or cfg.trail_fraction < 0:
        errors.append("--trail-fraction (-f) must be a non-negative number")
    if not _is_int(cfg.output_width) or cfg.output_width < MINIMUM_OUTPUT_DIMENSION:
        errors.append(f"--output-width (-W) must be an integer greater than or equal to {MINIMUM_OUTPUT_DIMENSION}")
    if not _is_int(cfg.output_height) or cfg.output_height < MINIMUM_OUTPUT_DIMENSION:
        errors.append(f"--output-height (-H) must be an integer greater than or equal to {MINIMUM_OUTPUT_DIMENSION}")
    if not _is_int(cfg.delay_per_frame) or cfg.delay_per_frame < 1:
        errors.append("--delay-per-frame (-d) must be an integer greater than 0")
    if not _is_int(cfg.total_frames) or cfg.total_frames < 1:
        errors.append("--total-frames (-t) must be an integer greater than 0")

    return errors
