"""Rejection values returned by services.

Each one is a frozen dataclass tagged with an ``ErrorKind``; callers match on the
class (or on ``kind``) and decide how to present it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from .enums import ErrorKind


@dataclass(frozen=True)
class AlreadyClockedIn:
    date: str
    kind: ClassVar[ErrorKind] = ErrorKind.ALREADY_CLOCKED_IN

    @property
    def message(self) -> str:
        return f"Already clocked in for {self.date}"


@dataclass(frozen=True)
class AlreadyClockedOut:
    date: str
    kind: ClassVar[ErrorKind] = ErrorKind.ALREADY_CLOCKED_OUT

    @property
    def message(self) -> str:
        return f"Already clocked out for {self.date}"


@dataclass(frozen=True)
class AlreadyOnBreak:
    date: str
    kind: ClassVar[ErrorKind] = ErrorKind.ALREADY_ON_BREAK

    @property
    def message(self) -> str:
        return f"Already on break for {self.date}"


@dataclass(frozen=True)
class NotClockedIn:
    date: str
    kind: ClassVar[ErrorKind] = ErrorKind.NOT_CLOCKED_IN

    @property
    def message(self) -> str:
        return f"Not clocked in for {self.date}"


@dataclass(frozen=True)
class NotOnBreak:
    date: str
    kind: ClassVar[ErrorKind] = ErrorKind.NOT_ON_BREAK

    @property
    def message(self) -> str:
        return f"Not on break for {self.date}"


@dataclass(frozen=True)
class StillOnBreak:
    date: str
    kind: ClassVar[ErrorKind] = ErrorKind.STILL_ON_BREAK

    @property
    def message(self) -> str:
        return f"Still on break for {self.date}. End break first."


# The state machine reports a missing stamp as NotClockedIn; kept for callers mapping kinds.
@dataclass(frozen=True)
class StampNotFound:
    date: str
    kind: ClassVar[ErrorKind] = ErrorKind.STAMP_NOT_FOUND

    @property
    def message(self) -> str:
        return f"No stamp record for {self.date}"


@dataclass(frozen=True)
class AttendanceNotFound:
    date: str
    kind: ClassVar[ErrorKind] = ErrorKind.ATTENDANCE_NOT_FOUND

    @property
    def message(self) -> str:
        return f"No attendance record for {self.date}"


@dataclass(frozen=True)
class InvalidDateRange:
    detail: str
    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_DATE_RANGE

    @property
    def message(self) -> str:
        return self.detail


@dataclass(frozen=True)
class Validation:
    detail: str
    kind: ClassVar[ErrorKind] = ErrorKind.VALIDATION_ERROR

    @property
    def message(self) -> str:
        return self.detail


@dataclass(frozen=True)
class StorageFailure:
    cause: object
    kind: ClassVar[ErrorKind] = ErrorKind.DATABASE_ERROR

    @property
    def message(self) -> str:
        return "Database access error"


StampError = Union[
    AlreadyClockedIn,
    AlreadyClockedOut,
    AlreadyOnBreak,
    NotClockedIn,
    NotOnBreak,
    StillOnBreak,
    StampNotFound,
    Validation,
    StorageFailure,
]

AttendanceError = Union[
    AttendanceNotFound,
    InvalidDateRange,
    Validation,
    StorageFailure,
]
