from pathlib import Path

from docx import Document

from ediscovery.extraction.base import BaseMetadataExtractor, normalize_properties
from ediscovery.extraction.exceptions import ExtractionError
from ediscovery.extraction.types import ExtractionResult

CORE_PROPERTIES = (
    "author",
    "title",
    "subject",
    "keywords",
    "category",
    "comments",
    "last_modified_by",
    "created",
    "modified",
)


class DocxAdapter(BaseMetadataExtractor):
    """Extracts paragraph text and core properties from Word documents."""

    def extract(self, file_path: Path) -> ExtractionResult:
        try:
            document = Document(str(file_path))
            props = document.core_properties
            metadata = normalize_properties(
                (name, getattr(props, name, None)) for name in CORE_PROPERTIES
            )
            paragraphs = [p.text for p in document.paragraphs if p.text]
            return ExtractionResult(text="\n\n".join(paragraphs).strip(), metadata=metadata)
        except Exception as exc:
            raise ExtractionError(f"docx extraction failed: {exc}") from exc
