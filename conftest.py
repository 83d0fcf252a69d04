from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

import pytest

from src.timesheet.timesheet.core.exceptions import StorageError
from src.timesheet.timesheet.stamps.model import Stamp


class InMemoryStamps:
    """StampRepository fake keyed by date, with the same unique-date rule as the DB."""

    def __init__(self):
        self._by_date: dict[str, Stamp] = {}
        self._id = 0
        self.calls: list[str] = []

    def add(self, stamp: Stamp) -> Stamp:
        self._by_date[stamp.date] = stamp
        return stamp

    def find_by_date(self, date: str) -> Optional[Stamp]:
        self.calls.append("find_by_date")
        return self._by_date.get(date)

    def find_in_range(self, start: str, end: str):
        self.calls.append("find_in_range")
        return [self._by_date[d] for d in sorted(self._by_date) if start <= d <= end]

    def create(self, *, date: str, clock_in_at: datetime) -> Stamp:
        self.calls.append("create")
        if date in self._by_date:
            raise StorageError(f"duplicate stamp for {date}")
        self._id += 1
        stamp = Stamp(
            id=str(self._id),
            date=date,
            clock_in_at=clock_in_at,
            clock_out_at=None,
            break_start_at=None,
            break_end_at=None,
            created_at=clock_in_at,
            updated_at=clock_in_at,
        )
        self._by_date[date] = stamp
        return stamp

    def set_clock_out(self, stamp_id: str, clock_out_at: datetime) -> Stamp:
        return self._update(stamp_id, updated_at=clock_out_at, clock_out_at=clock_out_at)

    def set_break_start(self, stamp_id: str, break_start_at: datetime) -> Stamp:
        return self._update(stamp_id, updated_at=break_start_at, break_start_at=break_start_at, break_end_at=None)

    def set_break_end(self, stamp_id: str, break_end_at: datetime) -> Stamp:
        return self._update(stamp_id, updated_at=break_end_at, break_end_at=break_end_at)

    def _update(self, stamp_id: str, **changes) -> Stamp:
        self.calls.append("update")
        for date, stamp in self._by_date.items():
            if stamp.id == stamp_id:
                updated = stamp.with_changes(**changes)
                self._by_date[date] = updated
                return updated
        raise StorageError(f"stamp {stamp_id} not found")


class BrokenStamps(InMemoryStamps):
    def find_by_date(self, date: str):
        raise StorageError("connection refused")

    def find_in_range(self, start: str, end: str):
        raise StorageError("connection refused")


@pytest.fixture
def stamps_repo() -> InMemoryStamps:
    return InMemoryStamps()


@pytest.fixture
def broken_repo() -> BrokenStamps:
    return BrokenStamps()


@pytest.fixture
def fixed_now() -> datetime:
    # 09:00 in Tokyo
    return datetime(2026, 2, 2, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_stamp():
    def _make(
        date: str,
        clock_in_at: datetime,
        clock_out_at: Optional[datetime] = None,
        break_start_at: Optional[datetime] = None,
        break_end_at: Optional[datetime] = None,
        stamp_id: str = "s1",
    ) -> Stamp:
        return Stamp(
            id=stamp_id,
            date=date,
            clock_in_at=clock_in_at,
            clock_out_at=clock_out_at,
            break_start_at=break_start_at,
            break_end_at=break_end_at,
            created_at=clock_in_at,
            updated_at=clock_out_at or clock_in_at,
        )

    return _make
