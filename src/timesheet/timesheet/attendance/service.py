from __future__ import annotations

import logging

from ..common.validators import require_iso_date
from ..core.errors import AttendanceError, AttendanceNotFound, InvalidDateRange, StorageFailure
from ..core.exceptions import StorageError
from ..core.result import Err, Ok, Result
from ..payroll.calculator.base import AttendanceCalculator
from ..payroll.calculator.standard_calculator import StandardAttendanceCalculator
from ..stamps.repository import StampRepository
from .model import AttendanceRecord, AttendanceReport

logger = logging.getLogger("timesheet.attendance")


class AttendanceService:
    """Read path: turns stored stamps into attendance records and totals."""

    def __init__(self, stamps: StampRepository, *, calculator: AttendanceCalculator | None = None):
        self._stamps = stamps
        self._calculator = calculator or StandardAttendanceCalculator()

    def get_by_date(self, date: str) -> Result[AttendanceRecord, AttendanceError]:
        parsed = require_iso_date(date)
        if isinstance(parsed, Err):
            return parsed
        day = parsed.value

        try:
            stamp = self._stamps.find_by_date(day)
        except StorageError as e:
            logger.error("find_by_date failed date=%s: %s", day, e)
            return Err(StorageFailure(e))

        if stamp is None:
            return Err(AttendanceNotFound(day))
        return Ok(self._calculator.from_stamp(stamp))

    def get_by_date_range(self, start: str, end: str) -> Result[AttendanceReport, AttendanceError]:
        parsed_start = require_iso_date(start, "From date")
        if isinstance(parsed_start, Err):
            return parsed_start
        parsed_end = require_iso_date(end, "To date")
        if isinstance(parsed_end, Err):
            return parsed_end

        first, last = parsed_start.value, parsed_end.value
        # ISO dates compare correctly as strings.
        if first > last:
            return Err(InvalidDateRange(f"From date ({first}) must be before or equal to to date ({last})"))

        try:
            stamps = self._stamps.find_in_range(first, last)
        except StorageError as e:
            logger.error("find_in_range failed %s..%s: %s", first, last, e)
            return Err(StorageFailure(e))

        records = [self._calculator.from_stamp(s) for s in stamps]
        return Ok(AttendanceReport(records=records, summary=self._calculator.summarize(records)))
