from __future__ import annotations

import logging
from datetime import datetime, tzinfo

from ..common.datetime_utils import business_date, get_timezone, now_utc, to_utc
from ..core.enums import StampAction
from ..core.errors import StampError, StorageFailure, Validation
from ..core.exceptions import StorageError
from ..core.result import Err, Ok, Result
from .factory import StampTransitionFactory
from .model import Stamp, StatusSnapshot, get_work_status
from .repository import StampRepository

logger = logging.getLogger("timesheet.stamps")


class StampService:
    """Daily stamp state machine.

    Every operation reads today's stamp once, decides, and writes at most once.
    Rejections come back as `Err(...)` values; nothing is raised to the caller.
    """

    def __init__(
        self,
        stamps: StampRepository,
        *,
        timezone: tzinfo | str | None = None,
        transitions: StampTransitionFactory | None = None,
    ):
        self._stamps = stamps
        self._tz = timezone if isinstance(timezone, tzinfo) else get_timezone(timezone)
        self._transitions = transitions or StampTransitionFactory()

    def today(self, now: datetime | None = None) -> str:
        return business_date(now or now_utc(), self._tz)

    def get_status(self, *, now: datetime | None = None) -> Result[StatusSnapshot, StampError]:
        today = self.today(now)
        try:
            stamp = self._stamps.find_by_date(today)
        except StorageError as e:
            logger.error("find_by_date failed date=%s: %s", today, e)
            return Err(StorageFailure(e))
        return Ok(StatusSnapshot(status=get_work_status(stamp), stamp=stamp))

    def clock_in(self, *, now: datetime | None = None) -> Result[Stamp, StampError]:
        return self._perform(StampAction.CLOCK_IN, now)

    def clock_out(self, *, now: datetime | None = None) -> Result[Stamp, StampError]:
        return self._perform(StampAction.CLOCK_OUT, now)

    def break_start(self, *, now: datetime | None = None) -> Result[Stamp, StampError]:
        return self._perform(StampAction.BREAK_START, now)

    def break_end(self, *, now: datetime | None = None) -> Result[Stamp, StampError]:
        return self._perform(StampAction.BREAK_END, now)

    def record(self, action: StampAction | str, *, now: datetime | None = None) -> Result[Stamp, StampError]:
        """Single entry point keyed by action name (clock_in, clock_out, ...)."""
        try:
            parsed = StampAction(action)
        except ValueError:
            allowed = ", ".join(a.value for a in StampAction)
            return Err(Validation(f"Action must be one of: {allowed}"))
        return self._perform(parsed, now)

    def _perform(self, action: StampAction, now: datetime | None) -> Result[Stamp, StampError]:
        now = to_utc(now or now_utc())
        today = business_date(now, self._tz)
        transition = self._transitions.for_action(action)

        try:
            stamp = self._stamps.find_by_date(today)
        except StorageError as e:
            logger.error("find_by_date failed date=%s: %s", today, e)
            return Err(StorageFailure(e))

        rejection = transition.reject(stamp, today)
        if rejection is not None:
            logger.info("%s rejected: %s", action.value, rejection.kind.value)
            return Err(rejection)

        try:
            updated = transition.apply(self._stamps, stamp, today=today, now=now)
        except StorageError as e:
            logger.error("%s failed date=%s: %s", action.value, today, e)
            return Err(StorageFailure(e))

        logger.info("%s recorded date=%s at=%s", action.value, today, now.isoformat())
        return Ok(updated)
