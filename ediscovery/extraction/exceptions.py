class ExtractionError(Exception):
    """Raised when a document's text or metadata cannot be extracted."""


class EncryptedDocumentError(ExtractionError):
    """Raised when a document is password protected."""


class UnsupportedFormatError(ExtractionError):
    """Raised when no extraction engine handles the document's content type."""
