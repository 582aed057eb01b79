"""
Tick Scheduler

Delayed callbacks driven by the game clock instead of wall-clock threads.
Calls fire from advance(), inside the tick that crosses their deadline.
"""

from typing import Callable, List, Optional


class ScheduledCall:
    """Handle for a pending delayed call."""

    def __init__(self, delay: float, callback: Callable[[], None], name: str = ''):
        self.remaining = max(0.0, delay)
        self.callback = callback
        self.name = name
        self.cancelled = False
        self.fired = False

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> None:
        self.cancelled = True


class TickScheduler:
    """Owns the delayed calls of one match."""

    def __init__(self):
        self._calls: List[ScheduledCall] = []

    def call_later(self, delay: float, callback: Callable[[], None], name: str = '') -> ScheduledCall:
        """Run callback once at least `delay` seconds of ticks have elapsed.

        A zero delay fires on the next advance().
        """
        call = ScheduledCall(delay, callback, name)
        self._calls.append(call)
        return call

    def cancel(self, call: Optional[ScheduledCall]) -> None:
        if call is not None:
            call.cancel()
        self._calls = [c for c in self._calls if c.pending]

    def cancel_all(self) -> None:
        for call in self._calls:
            call.cancel()
        self._calls = []

    def pending_count(self) -> int:
        return sum(1 for call in self._calls if call.pending)

    def advance(self, elapsed: float) -> int:
        """Count down every pending call and fire the due ones in scheduling order.

        Returns the number of callbacks fired. Calls scheduled by a callback
        start counting down on the next advance().
        """
        due = []
        for call in list(self._calls):
            if not call.pending:
                continue
            call.remaining -= elapsed
            if call.remaining <= 0:
                due.append(call)

        fired = 0
        for call in due:
            # an earlier callback in this batch may have cancelled it
            if not call.pending:
                continue
            call.fired = True
            call.callback()
            fired += 1

        self._calls = [call for call in self._calls if call.pending]
        return fired
