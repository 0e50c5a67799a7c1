"""Reserved field names of the metadata record and the output record."""

MetadataRecord = dict[str, str]

ORIGINAL_PATH = "original-path"
DOCUMENT_TEXT = "document-text"
PROCESSING_EXCEPTION = "processing-exception"
TITLE = "title"
NATIVE = "native"


def new_metadata_record(original_name: str) -> MetadataRecord:
    return {ORIGINAL_PATH: original_name}

# Names an extraction engine may not write into a record.
RESERVED_FIELDS = frozenset({ORIGINAL_PATH, DOCUMENT_TEXT, PROCESSING_EXCEPTION, NATIVE})
