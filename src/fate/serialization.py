"""Wire codec for outcome state.

The wire form is a JSON object with exactly five keys::

    {"code": -1 | 0 | 1, "errorLog": [...], "errorThreshold": n,
     "messageLog": [...], "payload": ...}

Errors are flattened to plain mappings on the way out and rehydrated as
``OutcomeError`` records on the way in.
"""

from __future__ import annotations

import json
import logging
import traceback
from dataclasses import dataclass, field
from typing import Any

from fate.code import OutcomeCode
from fate.coerce import to_error, to_message
from fate.errors import OutcomeError, ValidationError

logger = logging.getLogger(__name__)

_RECORD_KEYS = ("name", "message", "stack")


@dataclass(slots=True)
class StateSnapshot:
    """Plain copy of every field an outcome state carries."""

    code: OutcomeCode = OutcomeCode.NOT_SET
    error_log: list[BaseException] = field(default_factory=list)
    error_threshold: int | float = 0
    message_log: list[str] = field(default_factory=list)
    payload: Any = None


def error_to_dict(error: BaseException) -> dict[str, Any]:
    """Flatten an exception into a JSON-ready mapping."""
    if isinstance(error, OutcomeError):
        record = dict(error.details)
        record.update(name=error.name, message=error.message, stack=error.stack)
        return record

    record = {
        key: value
        for key, value in getattr(error, "__dict__", {}).items()
        if not key.startswith("_")
    }
    stack = ""
    if error.__traceback__ is not None:
        stack = "".join(traceback.format_exception(type(error), error, error.__traceback__))
    record.update(name=type(error).__name__, message=str(error), stack=stack)
    return record


def error_from_dict(data: Any) -> BaseException:
    """Rehydrate one ``errorLog`` entry."""
    if not isinstance(data, dict):
        return to_error(data)

    details = {key: value for key, value in data.items() if key not in _RECORD_KEYS}
    message = data.get("message")
    stack = data.get("stack")
    return OutcomeError(
        "" if message is None else str(message),
        stack="" if stack is None else str(stack),
        name=data.get("name") or None,
        details=details,
    )


def snapshot_to_dict(snapshot: StateSnapshot) -> dict[str, Any]:
    return {
        "code": int(snapshot.code),
        "errorLog": [error_to_dict(error) for error in snapshot.error_log],
        "errorThreshold": snapshot.error_threshold,
        "messageLog": list(snapshot.message_log),
        "payload": snapshot.payload,
    }


def dump_state(snapshot: StateSnapshot) -> str:
    # repr keeps serialization total for values json cannot encode.
    return json.dumps(snapshot_to_dict(snapshot), default=repr)


def validate_state(data: dict[str, Any]) -> list[str]:
    """Return every field rule the decoded wire mapping violates."""
    errors: list[str] = []

    code = data.get("code")
    if not _is_number(code) or code not in (-1, 0, 1):
        errors.append("code must be -1, 0, or 1")

    threshold = data.get("errorThreshold")
    if not _is_number(threshold) or not threshold >= 0:
        errors.append("errorThreshold must be a number 0 or greater")

    if not isinstance(data.get("errorLog"), list):
        errors.append("errorLog must be an array")

    if not isinstance(data.get("messageLog"), list):
        errors.append("messageLog must be an array")

    return errors


def load_state(text: str) -> StateSnapshot:
    """Parse and validate serialized outcome text.

    Raises ``ValidationError`` for malformed JSON, a non-object document, or
    any broken field rule. All field violations are reported together.
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as exc:
        logger.warning("Rejected serialized outcome: %s", exc)
        raise ValidationError([f"serialized outcome is not valid JSON: {exc}"], cause=exc) from exc

    if not isinstance(data, dict):
        logger.warning("Rejected serialized outcome: top level is %s", type(data).__name__)
        raise ValidationError(["serialized outcome must be a JSON object"])

    errors = validate_state(data)
    if errors:
        logger.warning("Rejected serialized outcome: %s", "; ".join(errors))
        raise ValidationError(errors)

    return StateSnapshot(
        code=OutcomeCode(int(data["code"])),
        error_log=[error_from_dict(entry) for entry in data["errorLog"]],
        error_threshold=data["errorThreshold"],
        message_log=[to_message(entry) for entry in data["messageLog"]],
        payload=data.get("payload"),
    )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
