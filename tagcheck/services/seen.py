"""Per-check record of logical ids that have already been evaluated.

The host may evaluate features on several threads at once, and segments of
the same way can land on different threads. add_if_absent checks and inserts
under one lock so exactly one of them wins.
"""

from threading import Lock


class SeenSet:
    """Thread-safe, insert-only set of logical ids."""

    def __init__(self) -> None:
        self._ids: set[int] = set()
        self._lock = Lock()

    def __contains__(self, logical_id: int) -> bool:
        with self._lock:
            return logical_id in self._ids

    def __len__(self) -> int:
        with self._lock:
            return len(self._ids)

    def add_if_absent(self, logical_id: int) -> bool:
        """Record logical_id.

        Returns:
            True if the id was not seen before this call, False otherwise.
        """
        with self._lock:
            if logical_id in self._ids:
                return False
            self._ids.add(logical_id)
            return True
