from typing import Protocol

from ediscovery.processor.models import OutputRecord


class OutputSink(Protocol):
    """Append-only channel for digest-keyed records."""

    def write(self, key: str, record: OutputRecord) -> None: ...


class StatsSink(Protocol):
    def increment_item_count(self) -> None: ...


class HistorySink(Protocol):
    """Fire-and-forget log of processing events."""

    def append(self, message: str) -> None: ...
