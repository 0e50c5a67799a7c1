from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DocumentEntry:
    """An extracted file on disk and its logical name in the collection."""

    path: Path
    original_name: str


@dataclass(frozen=True)
class WorkUnit:
    """A batch of documents handled by one task; the unit of retry."""

    id: int
    entries: tuple[DocumentEntry, ...]


@dataclass
class UnitResult:
    unit_id: int
    attempts: int
    succeeded: bool
    error_message: str | None = None
