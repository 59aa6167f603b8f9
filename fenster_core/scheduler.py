from __future__ import annotations

import threading
from typing import Callable, List, Optional


class PenaltyHandle:
    """
    A single-shot deferred action.

    `fire()` runs the action at most once; `cancel()` prevents a pending
    action from ever running. Both are safe to call from any thread and more
    than once. `wait()` blocks until the action has run or been cancelled.
    """

    def __init__(self, action: Callable[[], None], delay: float) -> None:
        self.delay = delay
        self._action = action
        self._lock = threading.Lock()
        self._done = threading.Event()
        self._fired = False
        self._cancelled = False
        self._on_cancel: Optional[Callable[[], None]] = None

    @property
    def pending(self) -> bool:
        with self._lock:
            return not (self._fired or self._cancelled)

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def fire(self) -> bool:
        with self._lock:
            if self._fired or self._cancelled:
                return False
            self._fired = True
        try:
            self._action()
        finally:
            self._done.set()
        return True

    def cancel(self) -> bool:
        with self._lock:
            if self._fired or self._cancelled:
                return False
            self._cancelled = True
        if self._on_cancel is not None:
            self._on_cancel()
        self._done.set()
        return True

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self._done.wait(timeout)


class ThreadingScheduler:
    """Runs each action on a daemon `threading.Timer` after its delay."""

    def schedule(self, delay: float, action: Callable[[], None]) -> PenaltyHandle:
        handle = PenaltyHandle(action, delay)
        timer = threading.Timer(delay, handle.fire)
        timer.daemon = True
        handle._on_cancel = timer.cancel
        timer.start()
        return handle


class ManualScheduler:
    """Holds actions until `run_pending()` is called. Lets a caller drive the penalty delay itself."""

    def __init__(self) -> None:
        self.handles: List[PenaltyHandle] = []

    def schedule(self, delay: float, action: Callable[[], None]) -> PenaltyHandle:
        handle = PenaltyHandle(action, delay)
        self.handles.append(handle)
        return handle

    def pending(self) -> List[PenaltyHandle]:
        return [h for h in self.handles if h.pending]

    def run_pending(self) -> int:
        """Fires every pending action in scheduling order; returns how many ran."""
        ran = 0
        for handle in list(self.handles):
            if handle.fire():
                ran += 1
        self.handles = [h for h in self.handles if h.pending]
        return ran
