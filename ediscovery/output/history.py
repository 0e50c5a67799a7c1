import threading
from datetime import datetime
from pathlib import Path

from ediscovery.logging.logger import Log


class History:
    """Append-only text log of processing events for one run."""

    def __init__(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        self.path = path
        self._lock = threading.Lock()

    def append(self, message: str) -> None:
        stamp = datetime.now().isoformat(timespec="seconds")
        with self._lock, self.path.open("a", encoding="utf-8") as handle:
            handle.write(f"{stamp} {message}\n")
        Log.info(message)
