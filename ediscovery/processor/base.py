from pathlib import Path
from typing import Protocol

from ediscovery.processor.models import ProcessingState


class DocumentProcessor(Protocol):
    """Anything that can process one extracted document and emit its record."""

    def process(self, temp_file: Path, original_name: str) -> ProcessingState: ...
