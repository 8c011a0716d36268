import random

import pytest

from orrery.config import GeneratorConfig
from orrery.data_models import OrbitSeed, PlanetSeed
from orrery.generation import initialize_planet


class CountingRandom(random.Random):
    """random.Random that counts how many values were drawn."""

    def __init__(self, seed=None):
        super().__init__(seed)
        self.calls = 0

    def random(self):
        self.calls += 1
        return super().random()


@pytest.fixture
def rng():
    return CountingRandom(1234)


@pytest.fixture
def small_config():
    return GeneratorConfig(
        star_density=0.0,
        num_planets=3,
        sun_size=4,
        output_width=128,
        output_height=96,
        total_frames=4,
        seed=7,
    )


@pytest.fixture
def make_planet(rng):
    """Build a planet around a sun at (sun_x, sun_y) from explicit orbit fields."""
    def _make(sun=(320, 320), size=2, color=(255, 0, 0), **orbit):
        seed = PlanetSeed(size=size, color=color, orbit=OrbitSeed(**orbit))
        return initialize_planet(seed, sun[0], sun[1], 10, 160, rng)
    return _make
