"""Exceptions raised by fate and the error record stored in outcome logs."""

from __future__ import annotations

import traceback
from typing import Any


class FateError(Exception):
    """Base error for all fate errors."""

    def __init__(self, message: str, *, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class ValidationError(FateError):
    """Serialized outcome text is not valid JSON or breaks a field rule.

    ``errors`` holds every violated rule, not just the first one found.
    """

    def __init__(self, errors: list[str], *, cause: Exception | None = None):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "invalid serialized outcome", cause=cause)


class OutcomeError(FateError):
    """An error record held in an outcome's error log.

    Non-exception values passed to ``Outcome.add_error`` are wrapped in one,
    and every error read back from serialized text is rehydrated as one.
    """

    def __init__(
        self,
        message: str = "",
        *,
        stack: str | None = None,
        name: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.name = name or type(self).__name__
        self.details = dict(details or {})
        if stack is None:
            # Drop this frame so the stack ends at the caller.
            stack = "".join(traceback.format_stack()[:-1])
        self.stack = stack

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"
