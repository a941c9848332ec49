"""
Retitle — Process log and user messages.

The host keeps a per-process journal and shows flash messages to the
operator. Both are protocols here with in-memory implementations.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Protocol

from retitle.utils.logging import logger


class LogLevel(str, enum.Enum):
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


@dataclass(frozen=True)
class JournalEntry:
    process_id: int
    level: LogLevel
    message: str


class ProcessJournal(Protocol):
    def add(self, process_id: int, level: LogLevel, message: str) -> None: ...


class MessageSink(Protocol):
    def error(self, message: str, exc: Exception | None = None) -> None: ...


@dataclass
class InMemoryJournal:
    entries: list[JournalEntry] = field(default_factory=list)

    def add(self, process_id: int, level: LogLevel, message: str) -> None:
        self.entries.append(JournalEntry(process_id, level, message))

    def for_process(self, process_id: int) -> list[JournalEntry]:
        return [e for e in self.entries if e.process_id == process_id]


@dataclass
class InMemoryMessages:
    errors: list[str] = field(default_factory=list)

    def error(self, message: str, exc: Exception | None = None) -> None:
        text = f"{message}: {exc}" if exc else message
        logger.warning("  Flash error: %s", text)
        self.errors.append(text)
