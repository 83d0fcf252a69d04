from datetime import datetime, timedelta, timezone

from src.timesheet.timesheet.attendance.model import AttendanceSummary
from src.timesheet.timesheet.payroll.calculations import calculate_attendance_from_stamp, calculate_attendance_summary
from src.timesheet.timesheet.payroll.calculator.standard_calculator import StandardAttendanceCalculator

UTC = timezone.utc


def day_records(make_stamp, days: int, work_minutes: int):
    records = []
    for i in range(days):
        start = datetime(2026, 3, 2 + i, 8, 0, tzinfo=UTC)
        stamp = make_stamp(f"2026-03-{2 + i:02d}", start, start + timedelta(minutes=work_minutes), stamp_id=str(i))
        records.append(calculate_attendance_from_stamp(stamp, tz=UTC))
    return records


def test_empty_summary_is_all_zero():
    assert calculate_attendance_summary([]) == AttendanceSummary()


def test_summary_sums_each_field(make_stamp):
    start = datetime(2026, 3, 9, 20, 0, tzinfo=UTC)
    night = make_stamp(
        "2026-03-09",
        start,
        start + timedelta(hours=10),
        start + timedelta(hours=3),
        start + timedelta(hours=4),
        stamp_id="n",
    )
    records = day_records(make_stamp, 2, 300) + [calculate_attendance_from_stamp(night, tz=UTC)]

    summary = calculate_attendance_summary(records)

    assert summary.total_work_minutes == sum(r.work_minutes for r in records) == 1140
    assert summary.total_break_minutes == sum(r.break_minutes for r in records) == 60
    assert summary.total_overtime_minutes == sum(r.overtime_minutes for r in records) == 60
    # 22:00-05:00 minus the 23:00-00:00 break
    assert summary.total_late_night_minutes == sum(r.late_night_minutes for r in records) == 360
    assert summary.work_days == 3


def test_statutory_overtime_over_forty_hours(make_stamp):
    summary = calculate_attendance_summary(day_records(make_stamp, 5, 600))

    assert summary.total_work_minutes == 3000
    assert summary.total_statutory_overtime_minutes == 600


def test_statutory_overtime_ignores_per_record_values(make_stamp):
    records = day_records(make_stamp, 2, 600)

    summary = calculate_attendance_summary(records)

    assert sum(r.statutory_overtime_minutes for r in records) == 240
    assert summary.total_overtime_minutes == 240
    assert summary.total_statutory_overtime_minutes == 0


def test_standard_calculator_delegates(make_stamp):
    calc = StandardAttendanceCalculator(UTC)
    start = datetime(2026, 3, 2, 22, 0, tzinfo=UTC)
    record = calc.from_stamp(make_stamp("2026-03-02", start, start + timedelta(hours=1)))

    assert record.late_night_minutes == 60
    assert calc.summarize([record]).work_days == 1
