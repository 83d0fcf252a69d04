from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...core.errors import AlreadyClockedOut, NotClockedIn, StampError, StillOnBreak
from ..model import Stamp
from ..repository import StampRepository
from .base import StampTransition


class ClockOutTransition(StampTransition):
    """Closes the day. An open break has to be ended first."""

    def reject(self, stamp: Optional[Stamp], today: str) -> Optional[StampError]:
        if stamp is None:
            return NotClockedIn(today)
        if stamp.is_clocked_out:
            return AlreadyClockedOut(today)
        if stamp.is_on_break:
            return StillOnBreak(today)
        return None

    def apply(self, stamps: StampRepository, stamp: Optional[Stamp], *, today: str, now: datetime) -> Stamp:
        return stamps.set_clock_out(stamp.id, now)
