from ediscovery.config.settings import Settings
from ediscovery.extraction.base import BaseMetadataExtractor
from ediscovery.extraction.detecting_adapter import AutoDetectExtractor
from ediscovery.extraction.docx_adapter import DocxAdapter
from ediscovery.extraction.pdfplumber_adapter import PdfPlumberAdapter
from ediscovery.extraction.pymupdf_adapter import PyMuPdfAdapter
from ediscovery.extraction.text_adapter import PlainTextAdapter


class ExtractorFactory:
    """Creates the configured extraction engine."""

    PDF_ADAPTERS: dict[str, type[BaseMetadataExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }
    ADAPTERS: dict[str, type[BaseMetadataExtractor]] = {
        **PDF_ADAPTERS,
        "docx": DocxAdapter,
        "text": PlainTextAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseMetadataExtractor:
        engine = settings.extraction_engine.lower()
        if engine == "auto":
            return AutoDetectExtractor(pdf_extractor=cls._create_pdf(settings))
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown extraction engine '{engine}'. Choose from: {['auto', *cls.ADAPTERS]}"
            )
        return adapter_cls()

    @classmethod
    def _create_pdf(cls, settings: Settings) -> BaseMetadataExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.PDF_ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ADAPTERS)}"
            )
        return adapter_cls()
