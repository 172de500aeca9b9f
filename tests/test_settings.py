import argparse
import logging

from main import parse_args
from settings import Settings


def test_defaults_without_flags_or_environment() -> None:
    settings = Settings.from_args(parse_args([]), environ={})
    assert settings.volume == 0.8
    assert settings.muted is False
    assert settings.clear_screen is True
    assert settings.log_level == "WARNING"
    assert settings.log_level_value == logging.WARNING


def test_environment_supplies_defaults() -> None:
    env = {"ADVENTURE_LOG_LEVEL": "debug", "ADVENTURE_MUTE": "yes"}
    settings = Settings.from_args(parse_args([]), environ=env)
    assert settings.muted is True
    assert settings.log_level == "DEBUG"


def test_flags_override_environment() -> None:
    env = {"ADVENTURE_LOG_LEVEL": "debug", "ADVENTURE_MUTE": "0"}
    args = parse_args(["--log-level", "error", "--no-clear", "--volume", "0.25"])
    settings = Settings.from_args(args, environ=env)
    assert settings.log_level == "ERROR"
    assert settings.muted is False
    assert settings.clear_screen is False
    assert settings.volume == 0.25


def test_values_are_clamped() -> None:
    args = argparse.Namespace(volume=3.5, log_level="chatty", mute=True, no_clear=False)
    settings = Settings.from_args(args, environ={})
    assert settings.volume == 1.0
    assert settings.log_level == "WARNING"
    assert settings.muted is True

    assert Settings(volume=-2).clamp().volume == 0.0
