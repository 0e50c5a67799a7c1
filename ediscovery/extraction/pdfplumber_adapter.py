from pathlib import Path

import pdfplumber

from ediscovery.extraction.base import BaseMetadataExtractor, normalize_properties
from ediscovery.extraction.exceptions import ExtractionError
from ediscovery.extraction.types import ExtractionResult


class PdfPlumberAdapter(BaseMetadataExtractor):
    """Extracts text and the info dictionary from PDF using pdfplumber."""

    def extract(self, file_path: Path) -> ExtractionResult:
        try:
            with pdfplumber.open(file_path) as pdf:
                metadata = normalize_properties((pdf.metadata or {}).items())
                metadata["page-count"] = str(len(pdf.pages))
                pages = [page.extract_text() or "" for page in pdf.pages]
            return ExtractionResult(text="\n".join(pages).strip(), metadata=metadata)
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(f"pdfplumber extraction failed: {exc}") from exc
