"""Progress ticker printing elapsed time while the request is in flight."""

import time
from threading import Event, Lock, Thread
from types import TracebackType
from typing import Callable, Optional

import constants
from log import get_logger
from utils.rendering import print_diagnostic

logger = get_logger(__name__)


class ProgressTicker:
    """Background thread printing 'still working' notices.

    The first notice is printed one full interval after start. After
    stop() returns no further notice is printed.
    """

    def __init__(
        self,
        interval: float = constants.PROGRESS_INTERVAL,
        start: Optional[float] = None,
        emit: Callable[[str], None] = print_diagnostic,
    ) -> None:
        """Initialize the ticker; start is a time.monotonic() timestamp."""
        self.interval = interval
        self.start_time = start
        self._emit = emit
        self._stopped = Event()
        self._lock = Lock()
        self._thread: Optional[Thread] = None
        self.ticks = 0

    def start(self) -> "ProgressTicker":
        """Start the ticker thread."""
        if self._thread is not None:
            raise RuntimeError("Progress ticker has already been started")
        if self.start_time is None:
            self.start_time = time.monotonic()
        self._thread = Thread(target=self._run, name="progress-ticker", daemon=True)
        self._thread.start()
        logger.debug("Progress ticker started with interval %s s", self.interval)
        return self

    def stop(self) -> None:
        """Stop the ticker and wait until its thread finishes."""
        with self._lock:
            self._stopped.set()
        if self._thread is not None:
            self._thread.join()
        logger.debug("Progress ticker stopped after %d ticks", self.ticks)

    @property
    def running(self) -> bool:
        """Check if the ticker thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    def _run(self) -> None:
        """Ticker loop."""
        assert self.start_time is not None
        while not self._stopped.wait(self.interval):
            with self._lock:
                # stop() may have been called while waiting for the lock
                if self._stopped.is_set():
                    break
                elapsed = int(time.monotonic() - self.start_time)
                self.ticks += 1
                self._emit(f"⏳ Still working... {elapsed}s elapsed")

    def __enter__(self) -> "ProgressTicker":
        """Start the ticker when entering the context."""
        return self.start()

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        """Stop the ticker on any exit path."""
        self.stop()
