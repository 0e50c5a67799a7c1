from ediscovery.extraction.base import BaseMetadataExtractor
from ediscovery.extraction.exceptions import ExtractionError
from ediscovery.extraction.factory import ExtractorFactory
from ediscovery.extraction.types import ExtractionResult

__all__ = ["BaseMetadataExtractor", "ExtractionError", "ExtractionResult", "ExtractorFactory"]
