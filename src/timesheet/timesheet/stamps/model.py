from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from ..core.enums import WorkStatus


@dataclass(frozen=True)
class Stamp:
    """Domain entity: one day's clock-in/out and break times.

    `date` is the natural key (YYYY-MM-DD). Values are never changed in place;
    `with_changes` returns a new stamp.
    """

    id: str
    date: str
    clock_in_at: datetime
    clock_out_at: Optional[datetime]
    break_start_at: Optional[datetime]
    break_end_at: Optional[datetime]
    created_at: datetime
    updated_at: datetime

    @property
    def is_clocked_out(self) -> bool:
        return self.clock_out_at is not None

    @property
    def is_on_break(self) -> bool:
        """An open break: started, not yet ended."""
        return self.break_start_at is not None and self.break_end_at is None

    def with_changes(self, **changes) -> "Stamp":
        return replace(self, **changes)


@dataclass(frozen=True)
class StatusSnapshot:
    status: WorkStatus
    stamp: Optional[Stamp]


def get_work_status(stamp: Optional[Stamp]) -> WorkStatus:
    if stamp is None:
        return WorkStatus.NOT_WORKING
    if stamp.is_clocked_out:
        return WorkStatus.CLOCKED_OUT
    if stamp.is_on_break:
        return WorkStatus.ON_BREAK
    return WorkStatus.WORKING
