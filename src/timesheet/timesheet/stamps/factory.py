from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import StampAction
from .transitions.base import StampTransition
from .transitions.break_end import BreakEndTransition
from .transitions.break_start import BreakStartTransition
from .transitions.clock_in import ClockInTransition
from .transitions.clock_out import ClockOutTransition


@dataclass
class StampTransitionFactory:
    """Factory Pattern: choose the transition strategy for an action."""

    def for_action(self, action: StampAction) -> StampTransition:
        if action == StampAction.CLOCK_IN:
            return ClockInTransition()
        if action == StampAction.CLOCK_OUT:
            return ClockOutTransition()
        if action == StampAction.BREAK_START:
            return BreakStartTransition()
        if action == StampAction.BREAK_END:
            return BreakEndTransition()
        raise ValueError(f"Unsupported stamp action: {action!r}")
