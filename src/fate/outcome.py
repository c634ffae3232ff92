"""Chainable outcome handle that accumulates errors and derives its status."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Generic, TypeVar

from fate.code import OutcomeCode
from fate.coerce import flatten, to_error, to_message
from fate.errors import OutcomeError
from fate.options import OutcomeOptions
from fate.state import OutcomeState

T = TypeVar("T")

logger = logging.getLogger(__name__)

PAYLOAD_NULL_MESSAGE = "Payload is null."


class Outcome(Generic[T]):
    """Result of an operation: collected errors, messages and an optional payload.

    Status is derived on every read:

    1. more errors than the threshold allows -> FAILURE
    2. otherwise a payload is present -> SUCCESS
    3. otherwise the current code is kept (possibly NOT_SET)

    Rule 1 always wins, so once the threshold is breached a payload cannot
    turn the outcome back into a success.

    Mutators return ``self`` so calls can be chained::

        outcome = Outcome(error_threshold=2).add_message("loading").add_error(exc)
    """

    def __init__(
        self,
        options: OutcomeOptions | None = None,
        *,
        error_threshold: int | float | None = None,
        payload: T | None = None,
        serialized: str | None = None,
    ):
        overrides = {
            key: value
            for key, value in (
                ("error_threshold", error_threshold),
                ("payload", payload),
                ("serialized", serialized),
            )
            if value is not None
        }
        options = replace(options or OutcomeOptions(), **overrides)
        self._state: OutcomeState[T] = OutcomeState(options)

    @classmethod
    def deserialize(
        cls,
        serialized: str,
        *,
        error_threshold: int | float | None = None,
        payload: T | None = None,
    ) -> Outcome[T]:
        """Rebuild an outcome from ``serialize`` output.

        Raises ``ValidationError`` when the text is malformed.
        """
        return cls(serialized=serialized, error_threshold=error_threshold, payload=payload)

    @property
    def state(self) -> OutcomeState[T]:
        return self._state

    @property
    def code(self) -> OutcomeCode:
        """Last resolved or forced code. Does not run status derivation."""
        return self._state.code

    @property
    def error_threshold(self) -> int | float:
        return self._state.error_threshold

    @property
    def payload(self) -> T | None:
        return self._state.payload

    @payload.setter
    def payload(self, value: T | None) -> None:
        self._state.payload = value

    def add_error(self, error: Any) -> Outcome[T]:
        """Log one error-like value or any nesting of lists/tuples of them.

        Never raises; every input is normalized into an exception.
        """
        for item in flatten(error):
            self._state.error_log.append(to_error(item))

        if self._state.has_failed() and self._state.code is not OutcomeCode.FAILURE:
            logger.debug(
                "Error threshold %r exceeded with %d errors",
                self._state.error_threshold,
                len(self._state.error_log),
            )
            self._state.code = OutcomeCode.FAILURE

        return self

    def add_message(self, message: Any) -> Outcome[T]:
        for item in flatten(message):
            self._state.message_log.append(to_message(item))
        return self

    def force_failure(self) -> OutcomeCode:
        logger.debug("Forcing outcome to FAILURE from %s", self._state.code.name)
        self._state.code = OutcomeCode.FAILURE
        return self._state.code

    def force_success(self) -> OutcomeCode:
        logger.debug("Forcing outcome to SUCCESS from %s", self._state.code.name)
        self._state.code = OutcomeCode.SUCCESS
        return self._state.code

    def has_failed(self) -> bool:
        return self._state.has_failed()

    def is_failure(self) -> bool:
        return self._resolve_code() is OutcomeCode.FAILURE

    def is_success(self) -> bool:
        return self._resolve_code() is OutcomeCode.SUCCESS

    def get_data(self) -> T | list[BaseException]:
        """Return the payload, or the errors explaining why there is none."""
        if self._resolve_code() is OutcomeCode.FAILURE:
            return list(self._state.error_log)
        if self._state.payload is None:
            return [OutcomeError(PAYLOAD_NULL_MESSAGE)]
        return self._state.payload

    def get_errors(self, full_trace: bool = False) -> list[str] | list[BaseException]:
        if full_trace:
            return list(self._state.error_log)
        return [_error_message(error) for error in self._state.error_log]

    def get_messages(self) -> list[str]:
        return list(self._state.message_log)

    def reset(self) -> Outcome[T]:
        self._state.reset()
        return self

    def serialize(self, include_logs: bool = True) -> str:
        return self._state.serialize(include_logs)

    def _resolve_code(self) -> OutcomeCode:
        if self._state.has_failed():
            self._state.code = OutcomeCode.FAILURE
        elif self._state.payload is not None:
            self._state.code = OutcomeCode.SUCCESS
        return self._state.code

    def __repr__(self) -> str:
        return (
            f"Outcome(code={self._state.code.name}, errors={len(self._state.error_log)}, "
            f"payload={self._state.payload!r})"
        )


def _error_message(error: BaseException) -> str:
    if isinstance(error, OutcomeError):
        return error.message
    return str(error)
