#!/usr/bin/env python3
"""Line-oriented console primitives: screen clearing, output, and prompts."""

from __future__ import annotations

import sys
from typing import TextIO


CLEAR_SCREEN = "\033[H\033[2J"


class ConsoleUI:
    """Thin wrapper over text streams so the game can be driven by scripted input."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        clear_screen: bool = True,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.clear_enabled = clear_screen
        self.closed = False

    def clear(self) -> None:
        if self.clear_enabled:
            self.stdout.write(CLEAR_SCREEN)
            self.stdout.flush()

    def write(self, text: str = "") -> None:
        self.stdout.write(f"{text}\n")

    def prompt(self, text: str) -> str | None:
        """Show `text` and read one line. Returns None once input is exhausted."""
        self.stdout.write(text)
        self.stdout.flush()
        if self.closed:
            return None
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self.stdout.flush()
        # Never close the process-wide streams.
        if self.stdin is not sys.stdin:
            self.stdin.close()
