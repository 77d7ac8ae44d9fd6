"""
Search Context Module - Cancellation, timeout and progress for a route search.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional


@dataclass
class SearchContext:
    """
    Optional companion to a search carrying cancellation and progress hooks.

    The cancel flag may be set from another thread; the search polls
    is_cancelled() between expansions.

    Attributes:
        cancel_flag: Threading event for cancellation
        timeout_sec: Maximum computation time in seconds (None = no limit)
        start_time: When computation started
        progress_callback: Optional callback receiving (fraction, message)
    """
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: Optional[float] = None
    start_time: float = field(default_factory=time.time)
    progress_callback: Optional[Callable[[float, str], None]] = None

    def cancel(self) -> None:
        """Request the search to stop."""
        self.cancel_flag.set()

    def is_cancelled(self) -> bool:
        """
        Check if cancellation requested or timeout exceeded.

        Returns:
            True if the search should stop
        """
        if self.cancel_flag.is_set():
            return True
        if self.timeout_sec is not None and self.elapsed_time() > self.timeout_sec:
            return True
        return False

    def report_progress(self, fraction: float, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            fraction: Progress from 0.0 to 1.0
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(fraction, message)

    def elapsed_time(self) -> float:
        """Seconds elapsed since computation started."""
        return time.time() - self.start_time
