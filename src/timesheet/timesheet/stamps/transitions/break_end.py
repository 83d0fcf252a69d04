from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...core.errors import NotClockedIn, NotOnBreak, StampError
from ..model import Stamp
from ..repository import StampRepository
from .base import StampTransition


class BreakEndTransition(StampTransition):
    """Closes the open break (never started and already ended both reject)."""

    def reject(self, stamp: Optional[Stamp], today: str) -> Optional[StampError]:
        if stamp is None:
            return NotClockedIn(today)
        if not stamp.is_on_break:
            return NotOnBreak(today)
        return None

    def apply(self, stamps: StampRepository, stamp: Optional[Stamp], *, today: str, now: datetime) -> Stamp:
        return stamps.set_break_end(stamp.id, now)
