#!/usr/bin/env python3
"""Procedural tone synthesis and best-effort playback through pygame.mixer."""

from __future__ import annotations

import io
import logging
import math
import struct
import threading
import wave

import pygame


logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100
AMPLITUDE = 32767

DEFAULT_FREQUENCY = 440.0
DEFAULT_DURATION = 0.3
TONE_FREQUENCIES = {
    "move": 440.0,     # A4
    "pickup": 660.0,   # E5
    "victory": 880.0,  # A5
}
TONE_DURATIONS = {
    "victory": 1.0,
}


def tone_sample_count(name: str, sample_rate: int = SAMPLE_RATE) -> int:
    duration = TONE_DURATIONS.get(name, DEFAULT_DURATION)
    return int(round(sample_rate * duration))


def generate_tone(name: str, sample_rate: int = SAMPLE_RATE) -> bytes:
    """
    Return mono 16-bit little-endian PCM for a tone identifier.

    Unknown identifiers fall back to the default frequency and duration.
    """
    frequency = TONE_FREQUENCIES.get(name, DEFAULT_FREQUENCY)
    n_samples = tone_sample_count(name, sample_rate)
    step = 2.0 * math.pi * frequency / sample_rate
    samples = [int(round(AMPLITUDE * math.sin(step * i))) for i in range(n_samples)]
    return struct.pack(f"<{n_samples}h", *samples)


def tone_to_wav(pcm: bytes, sample_rate: int = SAMPLE_RATE) -> bytes:
    buf = io.BytesIO()
    with wave.open(buf, "wb") as wav:
        wav.setnchannels(1)
        wav.setsampwidth(2)
        wav.setframerate(sample_rate)
        wav.writeframes(pcm)
    return buf.getvalue()


class SoundPlayer:
    """Caches one mixer clip per tone identifier. Audio failures never crash gameplay."""

    def __init__(self, volume: float = 1.0, enabled: bool = True, sample_rate: int = SAMPLE_RATE) -> None:
        self.enabled = enabled
        self.volume = max(0.0, min(1.0, float(volume)))
        self.sample_rate = sample_rate
        self._clips: dict[str, pygame.mixer.Sound] = {}
        self._lock = threading.Lock()
        self._owns_mixer = False

    def _ensure_mixer(self) -> bool:
        if pygame.mixer.get_init() is not None:
            return True
        try:
            pygame.mixer.init(frequency=self.sample_rate, size=-16, channels=1)
        except pygame.error as exc:
            # No device: stay quiet for the rest of the session.
            logger.warning("Audio disabled, mixer init failed: %s", exc)
            self.enabled = False
            return False
        self._owns_mixer = True
        return True

    def _clip(self, name: str) -> pygame.mixer.Sound | None:
        with self._lock:
            clip = self._clips.get(name)
            if clip is not None:
                return clip
            if not self._ensure_mixer():
                return None
            wav_bytes = tone_to_wav(generate_tone(name, self.sample_rate), self.sample_rate)
            clip = pygame.mixer.Sound(file=io.BytesIO(wav_bytes))
            clip.set_volume(self.volume)
            self._clips[name] = clip
            logger.debug("Prepared tone clip %r", name)
            return clip

    def play(self, name: str) -> None:
        if not self.enabled:
            return
        try:
            clip = self._clip(name)
            if clip is None:
                return
            clip.stop()
            clip.play()
        except Exception as exc:
            logger.warning("Sound playback error for %r: %s", name, exc)

    def cached_names(self) -> list[str]:
        return list(self._clips)

    def cleanup(self) -> None:
        with self._lock:
            try:
                for name, clip in self._clips.items():
                    try:
                        clip.stop()
                    except Exception as exc:
                        logger.warning("Could not stop clip %r: %s", name, exc)
            finally:
                self._clips.clear()
                if self._owns_mixer:
                    self._owns_mixer = False
                    try:
                        if pygame.mixer.get_init() is not None:
                            pygame.mixer.quit()
                    except Exception as exc:
                        logger.warning("Mixer shutdown failed: %s", exc)
