from pathlib import Path

from ediscovery.extraction.base import BaseMetadataExtractor
from ediscovery.extraction.exceptions import ExtractionError
from ediscovery.extraction.types import ExtractionResult


class PlainTextAdapter(BaseMetadataExtractor):
    """Reads text-like files as UTF-8, ignoring undecodable bytes."""

    def extract(self, file_path: Path) -> ExtractionResult:
        try:
            content = file_path.read_text(encoding="utf-8", errors="ignore")
        except OSError as exc:
            raise ExtractionError(f"text extraction failed: {exc}") from exc
        return ExtractionResult(text=content, metadata={"character-count": str(len(content))})
