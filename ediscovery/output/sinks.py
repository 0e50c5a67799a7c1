import base64
import json
import threading
from pathlib import Path

from ediscovery.processor.models import OutputRecord


class MemoryOutputSink:
    """Collects emitted records in memory; safe to share between worker threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: list[tuple[str, OutputRecord]] = []

    def write(self, key: str, record: OutputRecord) -> None:
        with self._lock:
            self._records.append((key, record))

    @property
    def records(self) -> list[tuple[str, OutputRecord]]:
        with self._lock:
            return list(self._records)

    def keys(self) -> set[str]:
        """Distinct keys, i.e. what a downstream keyed store would retain."""
        with self._lock:
            return {key for key, _ in self._records}


class JsonLinesOutputSink:
    """Appends one JSON object per record: the key and the record's wire map.

    Binary values (the native blob) are base64 encoded.
    """

    def __init__(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        self.path = path
        self._lock = threading.Lock()

    def write(self, key: str, record: OutputRecord) -> None:
        fields = {
            name: base64.b64encode(value).decode("ascii") if isinstance(value, bytes) else value
            for name, value in record.as_map().items()
        }
        line = json.dumps({"key": key, "fields": fields}, ensure_ascii=False)
        with self._lock, self.path.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")
