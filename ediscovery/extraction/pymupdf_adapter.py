from pathlib import Path

import pymupdf

from ediscovery.extraction.base import BaseMetadataExtractor, normalize_properties
from ediscovery.extraction.exceptions import EncryptedDocumentError, ExtractionError
from ediscovery.extraction.types import ExtractionResult


class PyMuPdfAdapter(BaseMetadataExtractor):
    """Extracts text and the info dictionary from PDF using PyMuPDF."""

    def extract(self, file_path: Path) -> ExtractionResult:
        try:
            with pymupdf.open(file_path) as doc:  # type: ignore[no-untyped-call]
                if doc.needs_pass:
                    raise EncryptedDocumentError(f"{file_path.name} is encrypted")
                metadata = normalize_properties((doc.metadata or {}).items())
                metadata["page-count"] = str(doc.page_count)
                pages = [page.get_text() for page in doc]
            return ExtractionResult(text="\n".join(pages).strip(), metadata=metadata)
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(f"pymupdf extraction failed: {exc}") from exc
