"""
Wall-clock budget for the upload job
"""
import signal
import threading
import time
from contextlib import contextmanager
from typing import Iterator, Optional

from ...core.exceptions import JobTimeout


class Deadline:
    """Fixed point in time after which the job must stop"""

    def __init__(self, seconds: float):
        self.seconds = seconds
        self._expires_at = time.monotonic() + seconds

    def remaining(self) -> float:
        return max(0.0, self._expires_at - time.monotonic())

    def expired(self) -> bool:
        return time.monotonic() >= self._expires_at

    def check(self, stage: Optional[str] = None) -> None:
        """Raise JobTimeout if the budget is used up"""
        if self.expired():
            where = f" before {stage}" if stage else ""
            raise JobTimeout(f"Upload job exceeded {self.seconds:g}s{where}")


def _can_use_alarm() -> bool:
    return (
        hasattr(signal, "SIGALRM")
        and threading.current_thread() is threading.main_thread()
    )


@contextmanager
def job_deadline(seconds: float) -> Iterator[Deadline]:
    """
    Bound the wrapped block by `seconds` of wall-clock time.

    On POSIX main threads a SIGALRM interval timer interrupts blocking calls
    with JobTimeout. Elsewhere only the explicit `Deadline.check` calls
    between stages enforce the budget.
    """
    deadline = Deadline(seconds)
    use_alarm = _can_use_alarm()
    previous = None

    if use_alarm:
        def _on_alarm(signum, frame):
            raise JobTimeout(f"Upload job exceeded {seconds:g}s")

        previous = signal.signal(signal.SIGALRM, _on_alarm)
        signal.setitimer(signal.ITIMER_REAL, seconds)

    try:
        yield deadline
    finally:
        if use_alarm:
            signal.setitimer(signal.ITIMER_REAL, 0)
            signal.signal(
                signal.SIGALRM, previous if previous is not None else signal.SIG_DFL
            )
