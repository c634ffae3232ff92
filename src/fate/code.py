"""Tri-state outcome status code."""

from __future__ import annotations

from enum import Enum


class OutcomeCode(int, Enum):
    """Resolved status of an outcome. Values are the wire encoding."""

    FAILURE = -1
    NOT_SET = 0
    SUCCESS = 1
