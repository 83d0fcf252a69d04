from __future__ import annotations

from enum import Enum


class WorkStatus(str, Enum):
    """Today's work state, derived from the stamp (never stored)."""

    NOT_WORKING = "not_working"
    WORKING = "working"
    ON_BREAK = "on_break"
    CLOCKED_OUT = "clocked_out"


class StampAction(str, Enum):
    CLOCK_IN = "clock_in"
    CLOCK_OUT = "clock_out"
    BREAK_START = "break_start"
    BREAK_END = "break_end"


class ErrorKind(str, Enum):
    """Tags for every rejection a service can hand back."""

    ALREADY_CLOCKED_IN = "ALREADY_CLOCKED_IN"
    ALREADY_CLOCKED_OUT = "ALREADY_CLOCKED_OUT"
    ALREADY_ON_BREAK = "ALREADY_ON_BREAK"
    NOT_CLOCKED_IN = "NOT_CLOCKED_IN"
    NOT_ON_BREAK = "NOT_ON_BREAK"
    STILL_ON_BREAK = "STILL_ON_BREAK"
    STAMP_NOT_FOUND = "STAMP_NOT_FOUND"
    ATTENDANCE_NOT_FOUND = "ATTENDANCE_NOT_FOUND"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
