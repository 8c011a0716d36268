"""
End-to-end tests for the solar_gif command line.
"""
import json
import logging
import os

from PIL import Image

import solar_gif


def test_invalid_options_reported_together(tmp_path, caplog):
    out = tmp_path / "out.gif"
    with caplog.at_level(logging.ERROR):
        code = solar_gif.main(["-s", "-1", "-n", "0", "-W", "10", "-o", str(out)])
    assert code == 1
    assert not out.exists()
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 3


def test_renders_requested_frames(tmp_path):
    out = tmp_path / "out.gif"
    frames = tmp_path / "frames"
    code = solar_gif.main([
        "-W", "64", "-H", "64", "-n", "2", "-c", "2", "-s", "0.01",
        "-t", "3", "--seed", "1", "-o", str(out), "--frames-dir", str(frames),
    ])
    assert code == 0
    assert out.exists()
    assert sorted(os.listdir(frames)) == [
        "frame00000000.png", "frame00000001.png", "frame00000002.png",
    ]
    with Image.open(out) as im:
        assert im.size == (64, 64)


def test_perfect_loop_with_planet_file(tmp_path):
    seeds = tmp_path / "planets.json"
    seeds.write_text(json.dumps([
        {"size": 2, "color": "#ff0000",
         "orbit": {"semi_major_axis": 20, "semi_minor_axis": 20, "period": 4}},
        {"size": 2, "color": "#00ff00",
         "orbit": {"semi_major_axis": 12, "semi_minor_axis": 8, "period": 6}},
    ]), encoding="utf-8")
    out = tmp_path / "loop.gif"
    frames = tmp_path / "frames"
    code = solar_gif.main([
        "-W", "64", "-H", "64", "-n", "2", "-c", "2", "-s", "0", "-l",
        "-p", str(seeds), "-o", str(out), "--frames-dir", str(frames),
    ])
    assert code == 0
    assert len(os.listdir(frames)) == 12


def test_bad_planet_file(tmp_path, caplog):
    out = tmp_path / "out.gif"
    with caplog.at_level(logging.ERROR):
        code = solar_gif.main(["-p", str(tmp_path / "missing.json"), "-o", str(out)])
    assert code == 1
    assert not out.exists()


def test_config_from_args_defaults():
    ns = solar_gif.build_parser().parse_args([])
    cfg = solar_gif.config_from_args(ns)
    assert cfg.star_density == 0.03125
    assert cfg.num_planets == 4
    assert cfg.sun_size == 10
    assert cfg.sun_alignment == "center"
    assert cfg.trail_fraction == 8
    assert (cfg.output_width, cfg.output_height) == (640, 640)
    assert cfg.perfect_loop is False
    assert cfg.delay_per_frame == 33
    assert cfg.total_frames == 16
    assert cfg.output_path == "output.gif"


def test_badly_typed_options_reported_with_the_rest(tmp_path, caplog):
    out = tmp_path / "out.gif"
    with caplog.at_level(logging.ERROR):
        code = solar_gif.main(["-n", "2.5", "-s", "-1", "-W", "10", "-o", str(out)])
    assert code == 1
    assert not out.exists()
    errors = [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 3
    assert any("num-planets" in m for m in errors)


def test_nan_trail_fraction_is_a_config_error(tmp_path, caplog):
    out = tmp_path / "out.gif"
    with caplog.at_level(logging.ERROR):
        code = solar_gif.main(["-W", "64", "-H", "64", "-f", "nan", "-o", str(out)])
    assert code == 1
    assert not out.exists()
    errors = [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "trail-fraction" in errors[0]


def test_number_option_type():
    assert solar_gif.number("3") == 3
    assert isinstance(solar_gif.number("3.0"), int)
    assert solar_gif.number("2.5") == 2.5
    assert solar_gif.number("-1") == -1
    assert solar_gif.number("abc") == "abc"
    assert solar_gif.number("nan") == "nan"
