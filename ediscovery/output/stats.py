import threading


class ItemCounter:
    """Monotonic count of emitted records, shared by the workers of one process."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._count = 0

    def increment_item_count(self) -> None:
        with self._lock:
            self._count += 1

    @property
    def item_count(self) -> int:
        with self._lock:
            return self._count
