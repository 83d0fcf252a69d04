"""Pure minute arithmetic over stamps.

None of these functions fail. Missing or inverted timestamps clamp to 0.
Timestamps are instants: every input is moved to UTC before any arithmetic,
naive values being taken as UTC already.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord, AttendanceSummary
from ..common.datetime_utils import to_utc
from ..core.constants import (
    LATE_NIGHT_END_HOUR,
    LATE_NIGHT_START_HOUR,
    STANDARD_WORK_MINUTES,
    WEEKLY_STATUTORY_LIMIT_MINUTES,
)
from ..stamps.model import Stamp

_ONE_MINUTE = timedelta(minutes=1)


def _elapsed_minutes(start: datetime, end: datetime) -> int:
    return int((to_utc(end) - to_utc(start)).total_seconds() // 60)


def calculate_break_minutes(break_start_at: Optional[datetime], break_end_at: Optional[datetime]) -> int:
    if break_start_at is None or break_end_at is None:
        return 0
    return max(0, _elapsed_minutes(break_start_at, break_end_at))


def calculate_work_minutes(clock_in_at: datetime, clock_out_at: Optional[datetime], break_minutes: int) -> int:
    # An unfinished day counts as 0, elapsed time is not estimated.
    if clock_out_at is None:
        return 0
    return max(0, _elapsed_minutes(clock_in_at, clock_out_at) - int(break_minutes))


def calculate_overtime_minutes(work_minutes: int) -> int:
    """Minutes past the standard 8-hour day."""
    return max(0, int(work_minutes) - STANDARD_WORK_MINUTES)


def is_late_night_hour(hour: int) -> bool:
    return hour >= LATE_NIGHT_START_HOUR or hour < LATE_NIGHT_END_HOUR


def calculate_late_night_minutes(
    clock_in_at: datetime,
    clock_out_at: Optional[datetime],
    break_start_at: Optional[datetime],
    break_end_at: Optional[datetime],
    *,
    tz: Optional[tzinfo] = None,
) -> int:
    """Worked minutes whose local hour is in [22:00, 05:00), breaks excluded.

    Steps through [clock_in_at, clock_out_at) one real minute at a time in UTC
    and converts each instant to local time only to read its hour, so a shift
    over midnight or a DST change is counted by elapsed time. The hour is read
    in `tz`; without it, in clock_in_at's own zone (naive values: as given).
    """
    if clock_out_at is None:
        return 0

    local_tz = tz or clock_in_at.tzinfo or timezone.utc
    end = to_utc(clock_out_at)
    has_break = break_start_at is not None and break_end_at is not None
    if has_break:
        break_start, break_end = to_utc(break_start_at), to_utc(break_end_at)

    minutes = 0
    t = to_utc(clock_in_at)
    while t < end:
        if is_late_night_hour(t.astimezone(local_tz).hour):
            on_break = has_break and break_start <= t < break_end
            if not on_break:
                minutes += 1
        t += _ONE_MINUTE
    return minutes


def calculate_attendance_from_stamp(stamp: Stamp, *, tz: Optional[tzinfo] = None) -> AttendanceRecord:
    break_minutes = calculate_break_minutes(stamp.break_start_at, stamp.break_end_at)
    work_minutes = calculate_work_minutes(stamp.clock_in_at, stamp.clock_out_at, break_minutes)
    overtime_minutes = calculate_overtime_minutes(work_minutes)
    late_night_minutes = calculate_late_night_minutes(
        stamp.clock_in_at,
        stamp.clock_out_at,
        stamp.break_start_at,
        stamp.break_end_at,
        tz=tz,
    )

    return AttendanceRecord(
        id=stamp.id,
        date=stamp.date,
        clock_in_at=stamp.clock_in_at,
        clock_out_at=stamp.clock_out_at,
        break_start_at=stamp.break_start_at,
        break_end_at=stamp.break_end_at,
        break_minutes=break_minutes,
        work_minutes=work_minutes,
        overtime_minutes=overtime_minutes,
        late_night_minutes=late_night_minutes,
        # Same-day placeholder; the range figure is recomputed in the summary.
        statutory_overtime_minutes=overtime_minutes,
        created_at=stamp.created_at,
        updated_at=stamp.updated_at,
    )


def calculate_attendance_summary(records: Sequence[AttendanceRecord]) -> AttendanceSummary:
    """Totals over the queried range.

    Statutory overtime is the range's total work minus 40 hours; per-record
    statutory values are ignored. It is only a weekly figure when the range is
    exactly one week.
    """
    total_work = sum(r.work_minutes for r in records)
    return AttendanceSummary(
        total_work_minutes=total_work,
        total_break_minutes=sum(r.break_minutes for r in records),
        total_overtime_minutes=sum(r.overtime_minutes for r in records),
        total_late_night_minutes=sum(r.late_night_minutes for r in records),
        total_statutory_overtime_minutes=max(0, total_work - WEEKLY_STATUTORY_LIMIT_MINUTES),
        work_days=len(records),
    )
