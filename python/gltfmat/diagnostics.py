# python/gltfmat/diagnostics.py
# Structured diagnostics emitted while translating a material.
# Exists so resolution misses and unsupported features reach the caller without raising.
# RELEVANT FILES:python/gltfmat/resolve.py,python/gltfmat/translator.py,tests/test_diagnostics.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol


class LogCode(Enum):
    IMAGE_NOT_FOUND = "image not found"
    TEXTURE_NOT_FOUND = "texture not found"
    DOUBLE_SIDED_UNSUPPORTED = "double-sided unsupported"


class LogLevel(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class LogEntry:
    level: LogLevel
    code: LogCode
    message: str


class DiagnosticsSink(Protocol):
    def error(self, code: LogCode, message: str) -> None: ...

    def warning(self, code: LogCode, message: str) -> None: ...


class LoggingSink:
    """Forward diagnostics to the standard ``logging`` module."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger if logger is not None else logging.getLogger("gltfmat")

    def error(self, code: LogCode, message: str) -> None:
        self.logger.error("[%s] %s", code.value, message)

    def warning(self, code: LogCode, message: str) -> None:
        self.logger.warning("[%s] %s", code.value, message)


class CollectingSink:
    """Keep diagnostics in memory so callers can inspect or replay them."""

    def __init__(self):
        self.entries: List[LogEntry] = []

    def error(self, code: LogCode, message: str) -> None:
        self.entries.append(LogEntry(LogLevel.ERROR, code, message))

    def warning(self, code: LogCode, message: str) -> None:
        self.entries.append(LogEntry(LogLevel.WARNING, code, message))

    def __len__(self) -> int:
        return len(self.entries)

    def count(self, code: LogCode) -> int:
        return sum(1 for entry in self.entries if entry.code is code)

    def codes(self) -> List[LogCode]:
        return [entry.code for entry in self.entries]

    def log_all(self, logger: Optional[logging.Logger] = None) -> None:
        """Replay collected entries into ``logger``."""
        target = LoggingSink(logger)
        for entry in self.entries:
            if entry.level is LogLevel.ERROR:
                target.error(entry.code, entry.message)
            else:
                target.warning(entry.code, entry.message)
