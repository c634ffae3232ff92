"""Raw data record owned by an outcome."""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from fate.code import OutcomeCode
from fate.errors import ValidationError
from fate.options import OutcomeOptions
from fate.serialization import StateSnapshot, dump_state, load_state, snapshot_to_dict

T = TypeVar("T")

logger = logging.getLogger(__name__)


class OutcomeState(Generic[T]):
    """Error log, message log, status code, error threshold and payload.

    The threshold is fixed at construction. The logs only grow until
    ``reset`` is called.
    """

    def __init__(self, options: OutcomeOptions | None = None):
        options = options or OutcomeOptions()
        snapshot = StateSnapshot()
        if options.serialized is not None:
            snapshot = load_state(options.serialized)

        if options.error_threshold is not None:
            threshold = options.error_threshold
            if not isinstance(threshold, (int, float)) or isinstance(threshold, bool) or not threshold >= 0:
                raise ValidationError(["errorThreshold must be a number 0 or greater"])
            snapshot.error_threshold = threshold
        if options.payload is not None:
            snapshot.payload = options.payload

        self.code: OutcomeCode = snapshot.code
        self.error_log: list[BaseException] = snapshot.error_log
        self.message_log: list[str] = snapshot.message_log
        self.payload: T | None = snapshot.payload
        self._error_threshold = snapshot.error_threshold

    @property
    def error_threshold(self) -> int | float:
        return self._error_threshold

    def has_failed(self) -> bool:
        """True once more errors are logged than the threshold allows."""
        return len(self.error_log) > self._error_threshold

    def reset(self) -> None:
        """Return to a freshly constructed state, keeping the threshold."""
        logger.debug("Resetting outcome state (%d errors dropped)", len(self.error_log))
        self.code = OutcomeCode.NOT_SET
        self.error_log.clear()
        self.message_log.clear()
        self.payload = None

    def snapshot(self, include_logs: bool = True) -> StateSnapshot:
        return StateSnapshot(
            code=self.code,
            error_log=list(self.error_log) if include_logs else [],
            error_threshold=self._error_threshold,
            message_log=list(self.message_log) if include_logs else [],
            payload=self.payload,
        )

    def to_dict(self, include_logs: bool = True) -> dict[str, Any]:
        return snapshot_to_dict(self.snapshot(include_logs))

    def serialize(self, include_logs: bool = True) -> str:
        return dump_state(self.snapshot(include_logs))

    def __repr__(self) -> str:
        return (
            f"OutcomeState(code={self.code.name}, errors={len(self.error_log)}, "
            f"messages={len(self.message_log)}, error_threshold={self._error_threshold!r})"
        )
