# src/fxsnake/scheduler.py
from dataclasses import dataclass, field
from typing import Callable, List, Optional


@dataclass
class ScheduledCall:
    due_ms: int
    callback: Callable[[], None]
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class Scheduler:
    """
    Delayed calls driven by a millisecond clock (pygame.time.get_ticks in the
    game, a plain counter in tests). Nothing runs until run_pending() is
    pumped; calls scheduled from inside a callback wait for the next pump.
    """
    clock: Callable[[], int]
    _pending: List[ScheduledCall] = field(default_factory=list)

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(self.clock() + max(int(delay_ms), 0), callback)
        self._pending.append(call)
        return call

    def run_pending(self, now_ms: Optional[int] = None) -> int:
        """Fire every call that is due and not cancelled. Returns how many ran."""
        now = self.clock() if now_ms is None else now_ms

        self._pending = [c for c in self._pending if not c.cancelled]
        due = sorted((c for c in self._pending if c.due_ms <= now), key=lambda c: c.due_ms)
        self._pending = [c for c in self._pending if c.due_ms > now]

        fired = 0
        for call in due:
            # An earlier callback in this batch may have cancelled it
            if call.cancelled:
                continue
            call.callback()
            fired += 1
        return fired

    @property
    def pending_count(self) -> int:
        return sum(1 for c in self._pending if not c.cancelled)
