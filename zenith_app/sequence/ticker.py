"""
Periodic tick sources for the sequence runner.

A tick source hands out ``TickHandle`` objects; each handle represents one
scheduled periodic callback and can be cancelled exactly once. The runner
owns at most one live handle at a time.
"""

import threading
from abc import ABC, abstractmethod
from typing import Callable, Optional

import structlog

logger = structlog.get_logger(__name__)

TickCallback = Callable[[], None]


class TickHandle:
    """Cancellable registration of a periodic callback."""

    def __init__(self, generation: int, on_cancel: Optional[Callable[["TickHandle"], None]] = None):
        self.generation = generation
        self._on_cancel = on_cancel
        self._cancelled = threading.Event()
        self.thread: Optional[threading.Thread] = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        """Stop future callbacks. Safe to call more than once."""
        if self._cancelled.is_set():
            return
        self._cancelled.set()
        if self._on_cancel:
            self._on_cancel(self)

    def __enter__(self) -> "TickHandle":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cancel()


class TickSource(ABC):
    """Schedules periodic callbacks."""

    def __init__(self) -> None:
        self._generation = 0
        self._lock = threading.Lock()

    def _next_generation(self) -> int:
        with self._lock:
            self._generation += 1
            return self._generation

    @abstractmethod
    def schedule(self, interval_seconds: float, callback: TickCallback) -> TickHandle:
        """Invoke ``callback`` every ``interval_seconds`` until the handle is cancelled."""


class ThreadingTickSource(TickSource):
    """Wall-clock ticks delivered from a daemon thread per handle."""

    def schedule(self, interval_seconds: float, callback: TickCallback) -> TickHandle:
        handle = TickHandle(self._next_generation(), on_cancel=self._stop)
        thread = threading.Thread(
            target=self._run,
            args=(handle, interval_seconds, callback),
            name=f"sequence-tick-{handle.generation}",
            daemon=True,
        )
        handle.thread = thread
        thread.start()

        logger.debug("Tick source scheduled", generation=handle.generation,
                     interval_seconds=interval_seconds)
        return handle

    @staticmethod
    def _run(handle: TickHandle, interval_seconds: float, callback: TickCallback) -> None:
        while not handle._cancelled.wait(interval_seconds):
            try:
                callback()
            except Exception as e:
                logger.error("Tick callback failed", generation=handle.generation,
                             error=str(e), exc_info=True)
                handle.cancel()

    @staticmethod
    def _stop(handle: TickHandle) -> None:
        # Not joined: the caller may hold a lock the ticker thread is waiting on.
        # A tick already in flight is discarded by the runner's generation check.
        logger.debug("Tick source cancelled", generation=handle.generation)


class ManualTickSource(TickSource):
    """Deterministic tick source driven explicitly by ``advance``."""

    def __init__(self) -> None:
        super().__init__()
        self._handles: list[tuple[TickHandle, TickCallback]] = []
        self.scheduled_count = 0

    def schedule(self, interval_seconds: float, callback: TickCallback) -> TickHandle:
        handle = TickHandle(self._next_generation(), on_cancel=self._forget)
        self._handles.append((handle, callback))
        self.scheduled_count += 1
        return handle

    def _forget(self, handle: TickHandle) -> None:
        self._handles = [(h, cb) for h, cb in self._handles if h is not handle]

    @property
    def active_count(self) -> int:
        """Number of live, uncancelled handles."""
        return sum(1 for handle, _ in self._handles if not handle.cancelled)

    def advance(self, ticks: int = 1) -> None:
        """Deliver ``ticks`` ticks to every live handle."""
        for _ in range(ticks):
            for handle, callback in list(self._handles):
                if not handle.cancelled:
                    callback()
