#!/usr/bin/env python3
"""
Solar GIF entry point: generate a random solar system and write it as an animated GIF.

What this module does
- Parses the command line into a GeneratorConfig and validates it, reporting every
  invalid option before anything is generated.
- Generates the immutable Scene (sun, starfield, planets), optionally pinning planets
  from a JSON seed file.
- Renders frames 0..N-1 with pygame and streams them, in order, into a Pillow GIF.
  N is --total-frames, or the LCM of all orbital periods with --perfect-loop.
- Optionally dumps each frame as a PNG and/or opens a preview window afterwards.

Units and conventions
- Lengths are pixels, time is integer steps (one step per frame).
- Colors are RGB tuples in 0..255.

Running
1) Install dependencies: `pip install pygame pillow tqdm`
2) Run this module: `python solar_gif.py -n 5 -l -o system.gif`

Exit status: 0 on success, 1 for invalid options or seed files, 2 if writing fails.
"""

import argparse
import logging
import os
import sys
from typing import Iterator, List, Optional

from PIL import Image
from tqdm import tqdm

from orrery.config import GeneratorConfig, validate_config
from orrery.constants import (
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
)
from orrery.encoder import dump_frame, encode_gif, surface_to_image
from orrery.generation import generate_scene
from orrery.looping import resolve_loop_frame_count
from orrery.presets_loader import SeedFileError, load_planet_seeds
from orrery.renderer import FrameComposer
from orrery.utils import try_float

logger = logging.getLogger("solar_gif")

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"

# Past this many frames a perfect loop is very slow to render and large on disk
LARGE_LOOP_WARNING = 5000


def number(text: str):
    """
    argparse type for numeric options: an int for whole numbers, a float otherwise.

    Anything else is passed through unchanged so validate_config can report it
    together with every other invalid option.
    """
    value = try_float(text)
    if value is None:
        return text
    return int(value) if value.is_integer() else value


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="solar-gif",
        description="Randomly generate a solar system and render it to an animated GIF.",
    )
    gen = p.add_argument_group("generation")
    gen.add_argument("-s", "--star-density", type=number, default=DEFAULT_STAR_DENSITY,
                     help="Fraction of pixels that hold a star, 0..1.")
    gen.add_argument("-n", "--num-planets", type=number, default=DEFAULT_NUM_PLANETS, help="Number of planets.")
    gen.add_argument("-c", "--sun-size", type=number, default=DEFAULT_SUN_SIZE,
                     help="Sun radius in pixels; also the smallest orbit radius.")
    gen.add_argument("-a", "--sun-alignment", default=DEFAULT_SUN_ALIGNMENT,
                     help="Where the sun sits: center, left, right, top or bottom.")
    gen.add_argument("-p", "--planet-file", default=None,
                     help="JSON file of planet seeds; missing fields are random.")
    gen.add_argument("--seed", type=number, default=None, help="Random seed for a reproducible system.")

    out = p.add_argument_group("output")
    out.add_argument("-f", "--trail-fraction", type=number, default=DEFAULT_TRAIL_FRACTION,
                     help="Trails cover period/FRACTION steps; 0 disables trails.")
    out.add_argument("-W", "--output-width", type=number, default=DEFAULT_OUTPUT_WIDTH, help="Width in pixels.")
    out.add_argument("-H", "--output-height", type=number, default=DEFAULT_OUTPUT_HEIGHT, help="Height in pixels.")
    out.add_argument("-l", "--perfect-loop", action="store_true",
                     help="Render exactly one common period so the GIF loops seamlessly.")
    out.add_argument("-d", "--delay-per-frame", type=number, default=DEFAULT_DELAY_PER_FRAME,
                     help="Delay between frames in milliseconds.")
    out.add_argument("-t", "--total-frames", type=number, default=DEFAULT_TOTAL_FRAMES,
                     help="Number of frames (ignored with --perfect-loop).")
    out.add_argument("-o", "--output", default=DEFAULT_OUTPUT_PATH, help="Output GIF path.")
    out.add_argument("--frames-dir", default=None, help="Also save every frame as a PNG in this directory.")
    out.add_argument("--preview", action="store_true", help="Play the animation in a window when done.")

    p.add_argument("-v", "--verbose", action="store_true", help="Log per-planet details.")
    return p


def config_from_args(ns: argparse.Namespace) -> GeneratorConfig:
    return GeneratorConfig(
        star_density=ns.star_density,
        num_planets=ns.num_planets,
        sun_size=ns.sun_size,
        sun_alignment=ns.sun_alignment,
        seed=ns.seed,
        trail_fraction=ns.trail_fraction,
        output_width=ns.output_width,
        output_height=ns.output_height,
        perfect_loop=ns.perfect_loop,
        delay_per_frame=ns.delay_per_frame,
        total_frames=ns.total_frames,
        output_path=ns.output,
    )


def iter_frames(composer: FrameComposer, num_frames: int,
                frames_dir: Optional[str] = None, progress: bool = True) -> Iterator[Image.Image]:
    """Yield frames 0..num_frames-1 as Pillow images, strictly in time order."""
    for t in tqdm(range(num_frames), desc="Rendering", unit="frame", disable=not progress):
        surf = composer.render(t)
        if frames_dir:
            dump_frame(surf, frames_dir, t)
        yield surface_to_image(surf)


def main(argv: Optional[List[str]] = None) -> int:
    ns = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.INFO, format=LOG_FORMAT)

    cfg = config_from_args(ns)
    errors = validate_config(cfg)
    if errors:
        for msg in errors:
            logger.error(msg)
        return 1

    seeds = None
    if ns.planet_file:
        try:
            seeds = load_planet_seeds(ns.planet_file)
        except SeedFileError as e:
            logger.error("%s", e)
            return 1

    scene = generate_scene(cfg, seeds=seeds)

    num_frames = cfg.total_frames
    if cfg.perfect_loop:
        try:
            num_frames = resolve_loop_frame_count(scene)
        except ValueError as e:
            logger.error("Cannot build a perfect loop: %s", e)
            return 1
        logger.info("Perfect loop over periods %s: %d frames", list(scene.periods), num_frames)
        if num_frames > LARGE_LOOP_WARNING:
            logger.warning("Perfect loop needs %d frames; this may take a long time", num_frames)

    composer = FrameComposer(scene, cfg.trail_fraction)
    try:
        if ns.frames_dir:
            os.makedirs(ns.frames_dir, exist_ok=True)
        encode_gif(iter_frames(composer, num_frames, ns.frames_dir), cfg.output_path, cfg.delay_per_frame)
    except (OSError, ValueError):
        logger.exception("Failed to write %s", cfg.output_path)
        return 2

    if ns.preview:
        from orrery.preview import PreviewWindow
        PreviewWindow(composer, num_frames, cfg.delay_per_frame).run()

    return 0


if __name__ == "__main__":
    sys.exit(main())
