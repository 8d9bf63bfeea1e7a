"""
Tick sources that drive the garden director.

A ticker calls a single callback at a fixed interval until cancelled.
Calls never overlap: each callback runs to completion before the next.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional


class Ticker(ABC):
    def __init__(self):
        self.interval_ms: Optional[int] = None
        self._callback: Optional[Callable[[], object]] = None

    @property
    def running(self) -> bool:
        return self._callback is not None

    def start(self, interval_ms: int, callback: Callable[[], object]):
        """Begin calling `callback` every `interval_ms` milliseconds."""
        if self.running:
            self.cancel()
        self.interval_ms = interval_ms
        self._callback = callback
        self._schedule()

    def cancel(self):
        if self.running:
            self._unschedule()
        self._callback = None

    @abstractmethod
    def _schedule(self):
        pass

    @abstractmethod
    def _unschedule(self):
        pass


class ManualTicker(Ticker):
    """Ticks only when asked. Used for tests and offline rendering."""

    def __init__(self):
        super().__init__()
        self.ticks = 0

    def _schedule(self):
        pass

    def _unschedule(self):
        pass

    def tick(self, count: int = 1) -> int:
        """Fire the callback up to `count` times; returns how many fired."""
        fired = 0
        for _ in range(count):
            if not self.running:
                break
            self._callback()
            self.ticks += 1
            fired += 1
        return fired

    def run_until(self, predicate: Callable[[], bool], max_ticks: int = 100_000) -> int:
        """Tick until `predicate()` holds or the ticker is cancelled."""
        fired = 0
        while self.running and not predicate() and fired < max_ticks:
            fired += self.tick()
        return fired


class TkTicker(Ticker):
    """Drives the callback from the Tk event loop via `widget.after`."""

    def __init__(self, widget):
        super().__init__()
        self.widget = widget
        self._after_id = None

    def _schedule(self):
        self._after_id = self.widget.after(self.interval_ms, self._fire)

    def _unschedule(self):
        if self._after_id is not None:
            self.widget.after_cancel(self._after_id)
            self._after_id = None

    def _fire(self):
        self._after_id = None
        if not self.running:
            return
        self._callback()
        # The callback may have cancelled us.
        if self.running:
            self._schedule()
