#!/usr/bin/env python3
"""
Frame composition on a pygame Surface.

Paint order per frame: background and stars, sun, trails, planets. Trails and planets
follow Scene.planets order, so later planets paint over earlier ones.

The static layer (background, stars, sun) never changes and is drawn once, then
blitted under every frame.
"""
import math
from typing import Optional, Tuple

import pygame
from pygame import gfxdraw

from .constants import BACKGROUND_COLOR, STAR_COLORS, SUN_COLOR, TRAIL_SEGMENT_PX
from .data_models import Planet, Scene
from .kinematics import arc_point, arc_sweep, position_at, trail_arc

# gfxdraw takes 16-bit signed coordinates
SAFE_COORD_LIMIT = 30000


def _safe_point(pt) -> Optional[Tuple[int, int]]:
    x, y = int(pt[0]), int(pt[1])
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None


def draw_disc(surf: pygame.Surface, center, radius: int, color) -> None:
    c = _safe_point(center)
    if c is None or radius < 1:
        return
    gfxdraw.filled_circle(surf, c[0], c[1], radius, color)
    gfxdraw.aacircle(surf, c[0], c[1], radius, color)


def draw_trail(surf: pygame.Surface, planet: Planet, start_angle: float, end_angle: float) -> None:
    """Stroke the orbit ellipse from start_angle forward to end_angle."""
    orb = planet.orbit
    sweep = arc_sweep(start_angle, end_angle)
    if sweep <= 0.0:
        return
    radius = max(orb.semi_major_axis, orb.semi_minor_axis, 1)
    steps = max(2, math.ceil(sweep * radius / TRAIL_SEGMENT_PX))
    pts = [arc_point(orb, start_angle + sweep * i / steps) for i in range(steps + 1)]
    pts = [p for p in (_safe_point(p) for p in pts) if p]
    if len(pts) > 1:
        pygame.draw.aalines(surf, planet.color, False, pts)


class FrameComposer:
    """
    Renders frames of a Scene.

    Reuses one output Surface; callers that keep frames must copy or convert them
    before asking for the next one.
    """

    def __init__(self, scene: Scene, trail_fraction: float = 0.0):
        self.scene = scene
        self.trail_fraction = trail_fraction
        self.size = (scene.width, scene.height)
        self.background = self._draw_static_layer()
        self.surface = pygame.Surface(self.size)

    def _draw_static_layer(self) -> pygame.Surface:
        scene = self.scene
        surf = pygame.Surface(self.size)
        surf.fill(BACKGROUND_COLOR)
        for star in scene.stars:
            surf.set_at((star.x, star.y), STAR_COLORS[star.brightness])
        draw_disc(surf, (scene.sun_x - 1, scene.sun_y - 1), scene.sun_size, SUN_COLOR)
        return surf

    def render(self, t: int) -> pygame.Surface:
        """Draw the frame for time step t and return the (shared) Surface."""
        surf = self.surface
        surf.blit(self.background, (0, 0))

        if self.trail_fraction:
            for planet in self.scene.planets:
                arc = trail_arc(planet, t, self.trail_fraction)
                if arc is not None:
                    draw_trail(surf, planet, *arc)

        for planet in self.scene.planets:
            draw_disc(surf, position_at(planet, t), planet.size, planet.color)

        return surf
