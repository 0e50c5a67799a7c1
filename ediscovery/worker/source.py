from collections.abc import Iterable, Iterator
from pathlib import Path

from ediscovery.worker.models import DocumentEntry, WorkUnit


class DirectorySource:
    """Yields every regular file under a root directory, in sorted order."""

    def __init__(self, root: Path) -> None:
        self._root = root

    def entries(self) -> Iterator[DocumentEntry]:
        if not self._root.is_dir():
            raise FileNotFoundError(f"Input directory not found: {self._root}")
        for path in sorted(self._root.rglob("*")):
            if path.is_file():
                yield DocumentEntry(
                    path=path,
                    original_name=path.relative_to(self._root).as_posix(),
                )


def partition(entries: Iterable[DocumentEntry], files_per_unit: int) -> list[WorkUnit]:
    """Group entries into work units of at most files_per_unit documents."""
    if files_per_unit < 1:
        raise ValueError(f"files_per_unit must be positive, got {files_per_unit}")
    units: list[WorkUnit] = []
    batch: list[DocumentEntry] = []
    for entry in entries:
        batch.append(entry)
        if len(batch) == files_per_unit:
            units.append(WorkUnit(id=len(units), entries=tuple(batch)))
            batch = []
    if batch:
        units.append(WorkUnit(id=len(units), entries=tuple(batch)))
    return units
