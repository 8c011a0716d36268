#!/usr/bin/env python3
"""
Output of rendered frames: animated GIF through Pillow, single PNG frames through pygame.
"""
import logging
import os
from typing import Iterable

import pygame
from PIL import Image

from .constants import FRAME_FILE_PATTERN

logger = logging.getLogger(__name__)


def surface_to_image(surf: pygame.Surface) -> Image.Image:
    """Copy a pygame Surface into a new RGB Pillow image."""
    return Image.frombytes("RGB", surf.get_size(), pygame.image.tobytes(surf, "RGB"))


def frame_path(directory: str, t: int) -> str:
    return os.path.join(directory, FRAME_FILE_PATTERN.format(t))


def dump_frame(surf: pygame.Surface, directory: str, t: int) -> str:
    """Save one frame as frameNNNNNNNN.png and return its path."""
    path = frame_path(directory, t)
    pygame.image.save(surf, path)
    return path


def encode_gif(frames: Iterable[Image.Image], path: str, delay_ms: int) -> int:
    """
    Write frames, in the order given, to an endlessly repeating GIF.

    frames may be a generator; it is consumed exactly once.

    Returns:
        Number of frames written

    Raises:
        ValueError: if frames is empty
    """
    it = iter(frames)
    first = next(it, None)
    if first is None:
        raise ValueError("cannot encode a GIF without frames")

    count = 1

    def _rest():
        nonlocal count
        for im in it:
            count += 1
            yield im

    first.save(
        path,
        format="GIF",
        save_all=True,
        append_images=_rest(),
        duration=delay_ms,
        loop=0,
    )
    logger.info("Wrote %d frames to %s", count, path)
    return count
