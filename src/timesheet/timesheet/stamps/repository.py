from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Stamp


class StampRepository(Protocol):
    """Storage port for stamps.

    Implementations raise `StorageError` on any failure, including a second
    `create` for a date that already has a stamp.
    """

    def find_by_date(self, date: str) -> Optional[Stamp]:
        raise NotImplementedError

    def find_in_range(self, start: str, end: str) -> Sequence[Stamp]:
        """Stamps with start <= date <= end, ascending by date."""

        raise NotImplementedError

    def create(self, *, date: str, clock_in_at: datetime) -> Stamp:
        raise NotImplementedError

    def set_clock_out(self, stamp_id: str, clock_out_at: datetime) -> Stamp:
        raise NotImplementedError

    def set_break_start(self, stamp_id: str, break_start_at: datetime) -> Stamp:
        raise NotImplementedError

    def set_break_end(self, stamp_id: str, break_end_at: datetime) -> Stamp:
        raise NotImplementedError
