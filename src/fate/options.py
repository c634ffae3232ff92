"""Construction options for outcomes and their state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class OutcomeOptions:
    """How a new outcome is seeded.

    ``serialized`` seeds every field first; ``error_threshold`` and
    ``payload`` then override whatever it provided. ``None`` means absent.
    """

    error_threshold: int | float | None = None
    payload: Any = None
    serialized: str | None = None
