from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from ...core.errors import StampError
from ..model import Stamp
from ..repository import StampRepository


class StampTransition(ABC):
    """Strategy Pattern: one legal move of the daily stamp state machine."""

    @abstractmethod
    def reject(self, stamp: Optional[Stamp], today: str) -> Optional[StampError]:
        """The rejection for this move given today's stamp, or None if legal."""

        raise NotImplementedError

    @abstractmethod
    def apply(self, stamps: StampRepository, stamp: Optional[Stamp], *, today: str, now: datetime) -> Stamp:
        raise NotImplementedError
