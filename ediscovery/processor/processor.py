from pathlib import Path

from ediscovery.config.settings import Settings
from ediscovery.culling.evaluator import ResponsivenessEvaluator
from ediscovery.extraction.base import BaseMetadataExtractor
from ediscovery.extraction.factory import ExtractorFactory
from ediscovery.logging.logger import Log
from ediscovery.output.base import HistorySink, OutputSink, StatsSink
from ediscovery.processor.exceptions import EmissionError
from ediscovery.processor.metadata import (
    DOCUMENT_TEXT,
    PROCESSING_EXCEPTION,
    RESERVED_FIELDS,
    MetadataRecord,
    new_metadata_record,
)
from ediscovery.processor.models import DocumentContext, OutputRecord, ProcessingState


def extract_metadata(
    extractor: BaseMetadataExtractor,
    file_path: Path,
    metadata: MetadataRecord,
) -> MetadataRecord:
    """Merge the engine's properties and text into an existing record.

    Properties named like a reserved field are dropped. Engine errors
    propagate unchanged.
    """
    result = extractor.extract(file_path)
    for name, value in result.metadata.items():
        if name in RESERVED_FIELDS:
            Log.warning(f"Ignoring reserved property '{name}' from {file_path.name}")
            continue
        metadata[name] = value
    if result.text is not None:
        metadata[DOCUMENT_TEXT] = result.text
    return metadata


def exception_message(exc: BaseException) -> str:
    """Non-empty description of an extraction failure."""
    return str(exc) or type(exc).__name__


class Processor:
    """Runs one document through extract -> cull -> emit.

    Extraction failures become a metadata field and the document is still
    emitted; non-responsive documents are dropped. Only emission failures
    leave this class.
    """

    def __init__(
        self,
        extractor: BaseMetadataExtractor,
        evaluator: ResponsivenessEvaluator,
        sink: OutputSink,
        stats: StatsSink,
        history: HistorySink,
        culling: str | None = None,
    ) -> None:
        self._extractor = extractor
        self._evaluator = evaluator
        self._sink = sink
        self._stats = stats
        self._history = history
        self._culling = culling

    def process(self, temp_file: Path, original_name: str) -> ProcessingState:
        self._history.append(f"Processing: {original_name}")
        context = DocumentContext(
            temp_file=temp_file,
            original_name=original_name,
            metadata=new_metadata_record(original_name),
        )

        self._extract(context)
        self._evaluate(context)

        if context.responsive or context.exception_message is not None:
            self._emit(context)
            context.state = ProcessingState.EMITTED
        else:
            context.state = ProcessingState.DROPPED

        if context.exception_message is not None:
            self._history.append(f"Failed: {original_name}: {context.exception_message}")
        else:
            self._history.append(f"Responsive: {original_name}: {context.responsive}")
        return context.state

    def _extract(self, context: DocumentContext) -> None:
        try:
            extract_metadata(self._extractor, context.temp_file, context.metadata)
        except Exception as exc:
            context.exception_message = exception_message(exc)
            context.metadata[PROCESSING_EXCEPTION] = context.exception_message
            context.state = ProcessingState.EXTRACTION_FAILED
            Log.error(f"Extraction failed for {context.original_name}: {context.exception_message}")
            return
        context.state = ProcessingState.EXTRACTED

    def _evaluate(self, context: DocumentContext) -> None:
        if context.state is not ProcessingState.EXTRACTED:
            context.state = ProcessingState.EVALUATION_SKIPPED
            return
        context.responsive = self._evaluator.evaluate(context.metadata, self._culling)
        context.state = ProcessingState.EVALUATED

    def _emit(self, context: DocumentContext) -> None:
        try:
            record = OutputRecord.build(context.temp_file, context.metadata)
            self._sink.write(record.key, record)
        except Exception as exc:
            raise EmissionError(
                f"Failed to emit {context.original_name}: {exc}"
            ) from exc
        self._stats.increment_item_count()
        Log.debug(f"Emitted {context.original_name} as {record.key}")


def build_processor(
    settings: Settings,
    sink: OutputSink,
    stats: StatsSink,
    history: HistorySink,
) -> Processor:
    """Build a Processor with the configured extraction engine and culling query."""
    return Processor(
        extractor=ExtractorFactory.create(settings),
        evaluator=ResponsivenessEvaluator(stemming=settings.culling_stemming),
        sink=sink,
        stats=stats,
        history=history,
        culling=settings.culling,
    )
