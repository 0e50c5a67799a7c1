from ediscovery.config.settings import Settings
from ediscovery.logging.logger import Log
from ediscovery.processor.base import DocumentProcessor
from ediscovery.worker.models import UnitResult, WorkUnit


class JobRunner:
    """Run one work unit, catch exceptions, and apply retry logic.

    A retry re-processes the whole unit. Records already emitted by a failed
    attempt are emitted again under the same content-digest keys.
    """

    def __init__(self, processor: DocumentProcessor, settings: Settings) -> None:
        self._processor = processor
        self._settings = settings

    def run(self, unit: WorkUnit) -> UnitResult:
        attempts = 0
        while True:
            attempts += 1
            Log.info(f"Running unit {unit.id} (attempt {attempts}, {len(unit.entries)} documents)")
            try:
                for entry in unit.entries:
                    self._processor.process(entry.path, entry.original_name)
            except Exception as exc:
                if attempts >= self._settings.max_unit_attempts:
                    Log.error(f"Unit {unit.id} permanently failed after {attempts} attempts: {exc}")
                    return UnitResult(unit.id, attempts, succeeded=False, error_message=str(exc))
                Log.warning(f"Unit {unit.id} failed: {exc}; will be retried")
                continue
            Log.info(f"Unit {unit.id} completed successfully")
            return UnitResult(unit.id, attempts, succeeded=True)
