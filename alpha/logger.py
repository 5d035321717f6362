"""Timestamped, prefixed logging to the terminal or to a file."""

from __future__ import annotations

import sys
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import IO

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
RESET = "\033[0m"
BOLD = "\033[1m"

DEFAULT_LOG_DIR = "../logs"


class Mode(Enum):
    """Where log lines go."""

    TERMINAL = "terminal"
    FILE = "file"


class Logger:
    """Writes prefixed, timestamped lines in terminal or file mode.

    In terminal mode lines are coloured and go to *stream* (standard output
    by default). In file mode a file named after the current time is opened
    for appending inside *log_dir*, which is created if needed.
    """

    def __init__(
        self,
        mode: Mode = Mode.TERMINAL,
        log_dir: str | Path = DEFAULT_LOG_DIR,
        stream: IO[str] | None = None,
    ) -> None:
        self.mode = mode
        self._stream = stream
        self._file: IO[str] | None = None
        self.path: Path | None = None
        if mode is Mode.FILE:
            directory = Path(log_dir)
            directory.mkdir(parents=True, exist_ok=True)
            name = datetime.now().strftime("%Y-%m-%d_%H:%M:%S")
            self.path = directory / f"{name}.txt"
            self._file = open(self.path, "a", encoding="utf-8")

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def format(self, colour: str, prefix: str, text: str) -> str:
        """Return the line for *text*, colouring it only in terminal mode."""
        time = datetime.now().strftime("%H:%M:%S")
        if self.mode is Mode.TERMINAL:
            return f"[{colour}{BOLD}{prefix}{RESET}] ({time}): {colour}{text}{RESET}"
        return f"[{prefix}] ({time}): {text}"

    def _emit(self, colour: str, prefix: str, text: str) -> None:
        line = self.format(colour, prefix, text)
        if self.mode is Mode.FILE:
            if self._file is None:
                raise ValueError("logger is closed")
            self._file.write(line + "\n")
            self._file.flush()
        else:
            print(line, file=self._stream or sys.stdout, flush=True)

    def log(self, message: str) -> None:
        """Write *message* with the LOG prefix."""
        self._emit(RESET, "LOG", message)

    def warning(self, message: str) -> None:
        """Write *message* with the WARNING prefix."""
        self._emit(YELLOW, "WARNING", message)

    def error(self, message: str) -> None:
        """Write *message* with the ERROR prefix."""
        self._emit(RED, "ERROR", message)

    def success(self, message: str) -> None:
        """Write *message* with the SUCCESS prefix."""
        self._emit(GREEN, "SUCCESS", message)

    def close(self) -> None:
        """Close the log file, if one is open."""
        if self._file is not None:
            self._file.close()
            self._file = None


_logger = Logger()
_initialised = False


def init(mode: Mode) -> None:
    """Set up the shared logger; calls after the first have no effect."""
    global _logger, _initialised
    if _initialised:
        return
    _logger = Logger(mode)
    _initialised = True


def log(message: str) -> None:
    """Write *message* with the LOG prefix through the shared logger."""
    _logger.log(message)


def warning(message: str) -> None:
    """Write *message* with the WARNING prefix through the shared logger."""
    _logger.warning(message)


def error(message: str) -> None:
    """Write *message* with the ERROR prefix through the shared logger."""
    _logger.error(message)


def success(message: str) -> None:
    """Write *message* with the SUCCESS prefix through the shared logger."""
    _logger.success(message)