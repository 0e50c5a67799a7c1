import hashlib
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType

from ediscovery.processor.metadata import NATIVE, MetadataRecord


class ProcessingState(str, Enum):
    STARTED = "started"
    EXTRACTED = "extracted"
    EXTRACTION_FAILED = "extraction_failed"
    EVALUATED = "evaluated"
    EVALUATION_SKIPPED = "evaluation_skipped"
    EMITTED = "emitted"
    DROPPED = "dropped"


def content_digest(data: bytes) -> str:
    """128-bit MD5 of the raw bytes, as 32 hex characters."""
    return hashlib.md5(data).hexdigest()


@dataclass(frozen=True)
class OutputRecord:
    """Digest-keyed record handed to the output channel."""

    key: str
    fields: Mapping[str, str]
    native: bytes

    @classmethod
    def build(cls, file_path: Path, metadata: MetadataRecord) -> "OutputRecord":
        """Read the raw file once; the key depends only on its bytes."""
        raw = file_path.read_bytes()
        return cls(
            key=content_digest(raw),
            fields=MappingProxyType(dict(metadata)),
            native=raw,
        )

    def as_map(self) -> dict[str, str | bytes]:
        """Wire shape: string fields plus the raw bytes under the native field."""
        payload: dict[str, str | bytes] = dict(self.fields)
        payload[NATIVE] = self.native
        return payload


@dataclass(slots=True)
class DocumentContext:
    """Working state owned by a single process() invocation."""

    temp_file: Path
    original_name: str
    metadata: MetadataRecord = field(default_factory=dict)
    state: ProcessingState = ProcessingState.STARTED
    responsive: bool = False
    exception_message: str | None = None
