from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Read-model: one stamp plus its derived minute figures."""

    id: str
    date: str
    clock_in_at: datetime
    clock_out_at: Optional[datetime]
    break_start_at: Optional[datetime]
    break_end_at: Optional[datetime]
    break_minutes: int
    work_minutes: int
    overtime_minutes: int
    late_night_minutes: int
    statutory_overtime_minutes: int
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class AttendanceSummary:
    total_work_minutes: int = 0
    total_break_minutes: int = 0
    total_overtime_minutes: int = 0
    total_late_night_minutes: int = 0
    total_statutory_overtime_minutes: int = 0
    work_days: int = 0


@dataclass(frozen=True)
class AttendanceReport:
    records: list[AttendanceRecord]
    summary: AttendanceSummary
