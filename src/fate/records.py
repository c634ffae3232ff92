from __future__ import annotations

from typing import Any, TypeVar

from fate.outcome import Outcome

T = TypeVar("T")


def make_records(records: list[T] | None = None) -> Outcome[dict[str, Any]]:
    """Create an outcome whose payload wraps ``records`` with their count."""
    initial = records if isinstance(records, list) else []
    return Outcome(payload={"records": initial, "recordCount": len(initial)})
