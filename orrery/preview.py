#!/usr/bin/env python3
"""
Passive preview window: plays the animation loop until the window is closed.
"""
import logging

import pygame

from .renderer import FrameComposer

logger = logging.getLogger(__name__)


class PreviewWindow:
    """
    Pygame loop that re-renders frames 0..num_frames-1 forever at the GIF's frame rate.
    """

    def __init__(self, composer: FrameComposer, num_frames: int, delay_ms: int):
        self.composer = composer
        self.num_frames = max(1, num_frames)
        self.fps = max(1, round(1000 / max(1, delay_ms)))
        self.running = True

    def run(self) -> None:
        pygame.init()
        pygame.display.set_caption("Solar GIF - Preview")
        surface = pygame.display.set_mode(self.composer.size)
        clock = pygame.time.Clock()
        logger.info("Previewing %d frames at %d fps; close the window to exit", self.num_frames, self.fps)

        t = 0
        try:
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                surface.blit(self.composer.render(t), (0, 0))
                pygame.display.flip()
                t = (t + 1) % self.num_frames
                clock.tick(self.fps)
        finally:
            pygame.quit()
