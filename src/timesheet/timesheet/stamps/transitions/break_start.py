from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...core.errors import AlreadyClockedOut, AlreadyOnBreak, NotClockedIn, StampError
from ..model import Stamp
from ..repository import StampRepository
from .base import StampTransition


class BreakStartTransition(StampTransition):
    """Opens a break. Any number of breaks per day, one open at a time."""

    def reject(self, stamp: Optional[Stamp], today: str) -> Optional[StampError]:
        if stamp is None:
            return NotClockedIn(today)
        if stamp.is_clocked_out:
            return AlreadyClockedOut(today)
        if stamp.is_on_break:
            return AlreadyOnBreak(today)
        return None

    def apply(self, stamps: StampRepository, stamp: Optional[Stamp], *, today: str, now: datetime) -> Stamp:
        return stamps.set_break_start(stamp.id, now)
