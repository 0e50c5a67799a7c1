import re
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path

from ediscovery.extraction.types import ExtractionResult

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def normalize_key(name: str) -> str:
    """Turn an engine property name into a lower-kebab-case field name.

    ``creationDate`` -> ``creation-date``, ``/Title`` -> ``title``.
    """
    spaced = _CAMEL_BOUNDARY.sub("-", name.strip())
    return _NON_ALNUM.sub("-", spaced.lower()).strip("-")


def normalize_properties(items: Iterable[tuple[object, object]]) -> dict[str, str]:
    """Normalize property names and stringify values, dropping empty ones."""
    properties: dict[str, str] = {}
    for raw_key, raw_value in items:
        if raw_value is None:
            continue
        key_text = raw_key.decode("utf-8", "ignore") if isinstance(raw_key, bytes) else str(raw_key)
        if isinstance(raw_value, bytes):
            value = raw_value.decode("utf-8", "ignore")
        elif hasattr(raw_value, "isoformat"):
            value = raw_value.isoformat()
        else:
            value = str(raw_value)
        key = normalize_key(key_text)
        if key and value.strip():
            properties[key] = value.strip()
    return properties


class BaseMetadataExtractor(ABC):
    """Contract for all metadata extraction adapters."""

    @abstractmethod
    def extract(self, file_path: Path) -> ExtractionResult:
        """Extract full text and document properties from a file on disk.

        Args:
            file_path: Temporary, already-decompressed copy of the document.

        Returns:
            ExtractionResult with the text (None when the engine finds none)
            and normalized property fields.

        Raises:
            ExtractionError: if the engine cannot read the document.
        """
