import logging

import pytest

from collapse.config import GameConfig, configure_logging, parse_args
from collapse.constants import DEFAULT_COLORS, DEFAULT_WIDTH, MAX_COLORS


def test_defaults():
    config = parse_args([])
    assert config == GameConfig(width=DEFAULT_WIDTH, colors=DEFAULT_COLORS, seed=None, log_level="WARNING")


def test_all_options():
    config = parse_args(["--width", "6", "--colors", "3", "--seed", "17", "--log-level", "DEBUG"])
    assert config.width == 6
    assert config.colors == 3
    assert config.seed == 17
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("argv", [
    ["--width", "0"],
    ["--width", "-4"],
    ["--width", "ten"],
    ["--colors", "0"],
    ["--colors", str(MAX_COLORS + 1)],
    ["--log-level", "LOUD"],
])
def test_invalid_values_exit_with_usage_error(argv):
    with pytest.raises(SystemExit) as excinfo:
        parse_args(argv)
    assert excinfo.value.code == 2


def test_configure_logging_applies_level(monkeypatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    configure_logging(GameConfig(log_level="INFO"))
    assert captured["level"] == logging.INFO
