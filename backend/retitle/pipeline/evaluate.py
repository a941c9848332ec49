"""
Retitle — Template evaluation step.

Resolves each fragment of a title template, strictly left to right, into its
contribution to the new title. Fragments are never mutated; resolved values
are returned in a parallel list.

Random, time and uuid values come from an injectable EntropySources so runs
can be made deterministic. Each non-deterministic fragment draws from its
source exactly once.
"""

from __future__ import annotations

import random
import time
import uuid
from dataclasses import dataclass, field
from typing import Callable, Protocol, Sequence

from retitle.errors import FragmentValueError
from retitle.models.fragment import Fragment, FragmentType
from retitle.utils.logging import logger

RANDOM_MIN = 1
RANDOM_MAX = 999_999_999


class Replacer(Protocol):
    def replace(self, template: str) -> str: ...


def _draw_random() -> int:
    return random.randint(RANDOM_MIN, RANDOM_MAX)


def _clock_ms() -> int:
    return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class EntropySources:
    randint: Callable[[], int] = field(default=_draw_random)
    clock_ms: Callable[[], int] = field(default=_clock_ms)
    new_uuid: Callable[[], uuid.UUID] = field(default=uuid.uuid4)


def fixed_width_digits(number: int, width: int) -> str:
    """Cut ``number`` to its leading ``width`` digits, or left-pad it with zeros."""
    if width <= 0:
        return ""
    digits = str(number)
    if len(digits) > width:
        digits = digits[:width]
    return digits.rjust(width, "0")


def resolve_fragment(fragment: Fragment, replacer: Replacer, sources: EntropySources) -> str:
    kind = fragment.kind

    if kind is FragmentType.VARIABLE:
        return replacer.replace(fragment.value)

    if kind is FragmentType.RANDOM:
        try:
            width = int(fragment.value)
        except ValueError:
            raise FragmentValueError(fragment.type, fragment.value)
        return fixed_width_digits(sources.randint(), width)

    if kind is FragmentType.TIMESTAMP:
        return str(sources.clock_ms())

    if kind is FragmentType.UUID:
        return str(sources.new_uuid())

    return fragment.value


def evaluate_template(
    fragments: Sequence[Fragment],
    replacer: Replacer,
    sources: EntropySources | None = None,
) -> list[str]:
    """
    Resolve every fragment in order.

    Returns the resolved values; the raw title is their plain concatenation.
    Raises FragmentValueError for a random fragment whose width is not an integer.
    """
    sources = sources or EntropySources()
    resolved = [resolve_fragment(f, replacer, sources) for f in fragments]
    logger.info("  Evaluated %d fragments", len(resolved))
    return resolved


def compose_title(resolved: Sequence[str]) -> str:
    return "".join(resolved)
