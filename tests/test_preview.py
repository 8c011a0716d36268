"""
Tests for the preview window, using SDL's dummy video driver.
"""
import pygame

from orrery.data_models import Scene
from orrery.preview import PreviewWindow
from orrery.renderer import FrameComposer


def test_preview_stops_on_quit(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    scene = Scene(width=64, height=64, sun_x=32, sun_y=32, sun_size=2)
    composer = FrameComposer(scene)
    rendered = []
    real_render = composer.render

    def render(t):
        rendered.append(t)
        return real_render(t)

    monkeypatch.setattr(composer, "render", render)
    monkeypatch.setattr(pygame.event, "get", lambda: [pygame.event.Event(pygame.QUIT)])

    window = PreviewWindow(composer, num_frames=4, delay_ms=33)
    assert window.fps == 30
    window.run()
    assert window.running is False
    assert rendered == [0]
