from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...core.errors import AlreadyClockedIn, StampError
from ..model import Stamp
from ..repository import StampRepository
from .base import StampTransition


class ClockInTransition(StampTransition):
    """Opens the day. Only legal while no stamp exists for today."""

    def reject(self, stamp: Optional[Stamp], today: str) -> Optional[StampError]:
        if stamp is not None:
            return AlreadyClockedIn(today)
        return None

    def apply(self, stamps: StampRepository, stamp: Optional[Stamp], *, today: str, now: datetime) -> Stamp:
        return stamps.create(date=today, clock_in_at=now)
