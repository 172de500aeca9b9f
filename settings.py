#!/usr/bin/env python3
"""Runtime settings for the adventure, from command-line flags and environment."""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from typing import Mapping

from audio import SAMPLE_RATE


ENV_LOG_LEVEL = "ADVENTURE_LOG_LEVEL"
ENV_MUTE = "ADVENTURE_MUTE"

_TRUTHY = {"1", "true", "yes", "on"}


def _clamp(value: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, value))


@dataclass
class Settings:
    """Runtime configuration toggles for one session."""

    volume: float = 0.8
    muted: bool = False
    clear_screen: bool = True
    log_level: str = "WARNING"
    sample_rate: int = SAMPLE_RATE

    def clamp(self) -> "Settings":
        try:
            self.volume = _clamp(float(self.volume), 0.0, 1.0)
        except (TypeError, ValueError):
            self.volume = 0.8
        self.muted = bool(self.muted)
        self.clear_screen = bool(self.clear_screen)

        level = str(self.log_level).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            level = "WARNING"
        self.log_level = level
        return self

    @property
    def log_level_value(self) -> int:
        return int(logging.getLevelName(self.log_level))

    @classmethod
    def from_args(
        cls,
        args: argparse.Namespace,
        environ: Mapping[str, str] | None = None,
    ) -> "Settings":
        """Environment gives defaults; explicit flags win."""
        env = os.environ if environ is None else environ
        settings = cls()

        if env.get(ENV_LOG_LEVEL):
            settings.log_level = env[ENV_LOG_LEVEL]
        if str(env.get(ENV_MUTE, "")).strip().lower() in _TRUTHY:
            settings.muted = True

        if getattr(args, "log_level", None):
            settings.log_level = args.log_level
        if getattr(args, "volume", None) is not None:
            settings.volume = args.volume
        if getattr(args, "mute", False):
            settings.muted = True
        if getattr(args, "no_clear", False):
            settings.clear_screen = False
        return settings.clamp()
