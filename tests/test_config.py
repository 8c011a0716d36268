"""
Tests for configuration validation.
"""
import pytest

from orrery.config import ConfigError, GeneratorConfig, validate_config


def test_defaults_are_valid():
    assert validate_config(GeneratorConfig()) == []


@pytest.mark.parametrize("field, value", [
    ("star_density", -0.1),
    ("star_density", 1.5),
    ("star_density", float("nan")),
    ("star_density", "0.5"),
    ("num_planets", 0),
    ("num_planets", 2.5),
    ("num_planets", True),
    ("sun_size", 0),
    ("sun_alignment", "middle"),
    ("seed", "abc"),
    ("trail_fraction", -1),
    ("trail_fraction", float("nan")),
    ("trail_fraction", float("inf")),
    ("output_width", 63),
    ("output_height", 10),
    ("output_height", 100.0),
    ("delay_per_frame", 0),
    ("total_frames", 0),
])
def test_invalid_values(field, value):
    cfg = GeneratorConfig(**{field: value})
    errors = validate_config(cfg)
    assert len(errors) == 1


@pytest.mark.parametrize("field, value", [
    ("star_density", 0),
    ("star_density", 1),
    ("trail_fraction", 0),
    ("output_width", 64),
    ("sun_alignment", "bottom"),
    ("seed", 0),
])
def test_boundary_values(field, value):
    assert validate_config(GeneratorConfig(**{field: value})) == []


def test_errors_collected_together():
    cfg = GeneratorConfig(num_planets=-1, sun_size=-1, total_frames=-1, delay_per_frame=-1)
    assert len(validate_config(cfg)) == 4


def test_config_error_keeps_messages():
    err = ConfigError(["a is wrong", "b is wrong"])
    assert err.errors == ["a is wrong", "b is wrong"]
    assert "a is wrong" in str(err)
    assert isinstance(err, ValueError)
