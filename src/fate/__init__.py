"""Outcome objects that collect errors and messages and derive a final status."""

from fate.code import OutcomeCode
from fate.errors import FateError, OutcomeError, ValidationError
from fate.options import OutcomeOptions
from fate.outcome import Outcome
from fate.records import make_records
from fate.state import OutcomeState

__all__ = [
    "FateError",
    "Outcome",
    "OutcomeCode",
    "OutcomeError",
    "OutcomeOptions",
    "OutcomeState",
    "ValidationError",
    "make_records",
]
