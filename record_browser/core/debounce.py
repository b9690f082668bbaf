"""
Schedule-with-cancel-previous debouncing over an injectable clock.

The debouncer never sleeps or spawns threads: the host event loop calls
fire_due() when it gets control, and ManualClock lets tests move time by hand.
"""
from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Tuple

logger = logging.getLogger(__name__)


class Clock(ABC):
    @abstractmethod
    def now(self) -> float:
        """Seconds on a monotonic scale."""
        pass


class MonotonicClock(Clock):
    def now(self) -> float:
        return time.monotonic()


class ManualClock(Clock):
    def __init__(self, start: float = 0.0) -> None:
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> None:
        self._now += seconds


@dataclass
class PendingCall:
    """Cancellation token for one scheduled invocation."""
    func: Callable[..., Any]
    args: Tuple[Any, ...]
    due_at: float
    cancelled: bool = field(default=False)

    def cancel(self) -> None:
        self.cancelled = True


class Debouncer:
    """
    Coalesces a burst of calls into the last one, fired after `delay`
    seconds without a new call.
    """

    def __init__(self, delay: float, clock: Optional[Clock] = None) -> None:
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        self.delay = delay
        self.clock = clock or MonotonicClock()
        self._pending: Optional[PendingCall] = None

    @property
    def pending(self) -> Optional[PendingCall]:
        return self._pending

    def schedule(self, func: Callable[..., Any], *args: Any) -> PendingCall:
        if self._pending is not None:
            self._pending.cancel()
        self._pending = PendingCall(func=func, args=args, due_at=self.clock.now() + self.delay)
        return self._pending

    def cancel(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def fire_due(self) -> bool:
        """Run the pending call if its quiet period has elapsed. Returns True if it ran."""
        call = self._pending
        if call is None or call.cancelled or self.clock.now() < call.due_at:
            return False
        return self._run(call)

    def flush(self) -> bool:
        """Run the pending call now, regardless of the quiet period."""
        call = self._pending
        if call is None or call.cancelled:
            return False
        return self._run(call)

    def _run(self, call: PendingCall) -> bool:
        self._pending = None
        logger.debug("Debounced call fired", extra={"due_at": call.due_at})
        call.func(*call.args)
        return True
