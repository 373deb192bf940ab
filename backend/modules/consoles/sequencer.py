"""
Monotonic request tags per view.

A console tags each load with the next number for its view and checks,
once all its fetches resolved, that no newer load was issued meanwhile.
Older responses are dropped instead of overwriting fresher ones.
"""

import threading
from collections import defaultdict


class RequestSequencer:
    """Issues increasing sequence numbers per view key."""

    def __init__(self) -> None:
        self._latest: defaultdict[str, int] = defaultdict(int)
        self._lock = threading.Lock()

    def issue(self, view: str) -> int:
        """Tag a new request for ``view``; later calls get larger numbers."""
        with self._lock:
            self._latest[view] += 1
            return self._latest[view]

    def latest(self, view: str) -> int:
        """Most recent number issued for ``view`` (0 if none)."""
        with self._lock:
            return self._latest.get(view, 0)

    def is_current(self, view: str, sequence: int) -> bool:
        """Whether ``sequence`` is still the newest request for ``view``."""
        return sequence >= self.latest(view)
