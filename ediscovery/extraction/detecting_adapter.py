import mimetypes
from pathlib import Path

import filetype

from ediscovery.extraction.base import BaseMetadataExtractor
from ediscovery.extraction.docx_adapter import DocxAdapter
from ediscovery.extraction.exceptions import UnsupportedFormatError
from ediscovery.extraction.text_adapter import PlainTextAdapter
from ediscovery.extraction.types import ExtractionResult
from ediscovery.logging.logger import Log

PDF_TYPES = {"application/pdf", "application/x-pdf"}
DOCX_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
ZIP_TYPE = "application/zip"
TEXT_TYPES = {"application/json", "application/xml", "message/rfc822"}
SNIFF_BYTES = 8192


class AutoDetectExtractor(BaseMetadataExtractor):
    """Picks an extraction engine from the detected content type."""

    def __init__(
        self,
        pdf_extractor: BaseMetadataExtractor,
        docx_extractor: BaseMetadataExtractor | None = None,
        text_extractor: BaseMetadataExtractor | None = None,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._docx_extractor = docx_extractor or DocxAdapter()
        self._text_extractor = text_extractor or PlainTextAdapter()

    def extract(self, file_path: Path) -> ExtractionResult:
        content_type = detect_content_type(file_path)
        Log.debug(f"Detected {content_type} for {file_path.name}")
        result = self._engine_for(content_type, file_path).extract(file_path)
        result.metadata.setdefault("content-type", content_type)
        return result

    def _engine_for(self, content_type: str, file_path: Path) -> BaseMetadataExtractor:
        if content_type in PDF_TYPES:
            return self._pdf_extractor
        if content_type == DOCX_TYPE:
            return self._docx_extractor
        if content_type.startswith("text/") or content_type in TEXT_TYPES:
            return self._text_extractor
        raise UnsupportedFormatError(
            f"unsupported content type '{content_type}' for {file_path.name}"
        )


def detect_content_type(file_path: Path) -> str:
    """Detect a MIME type from magic bytes, then the suffix, then a binary sniff.

    Office formats are zip containers, so a bare zip match defers to the suffix.
    """
    kind = filetype.guess(str(file_path))
    if kind is not None and kind.mime != ZIP_TYPE:
        return kind.mime
    guessed, _ = mimetypes.guess_type(file_path.name)
    if guessed is not None:
        return guessed
    if kind is not None:
        return kind.mime
    with file_path.open("rb") as handle:
        head = handle.read(SNIFF_BYTES)
    if b"\x00" in head:
        return "application/octet-stream"
    return "text/plain"
