from __future__ import annotations

import logging
import threading
from typing import Optional

from .service import AttendanceService

logger = logging.getLogger(__name__)


class BufferFlusher:
    """Background worker that periodically drains the attendance buffer into the store."""

    def __init__(self, service: AttendanceService, interval_seconds: float):
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self.service = service
        self.interval_seconds = float(interval_seconds)

        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return

        self._stop_event.clear()
        self._thread = threading.Thread(target=self._worker, name="attendance-flusher", daemon=True)
        self._thread.start()

    def stop(self, *, timeout: Optional[float] = None) -> None:
        """Stop the worker and flush whatever is still buffered."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        self.flush_once()

    def flush_once(self) -> int:
        try:
            flushed = self.service.flush()
        except Exception:
            logger.exception("Flushing attendance buffer failed; batch kept for retry")
            return 0
        if flushed:
            logger.info("Flushed %d attendance record(s)", flushed)
        return flushed

    def _worker(self) -> None:
        while not self._stop_event.wait(self.interval_seconds):
            self.flush_once()
