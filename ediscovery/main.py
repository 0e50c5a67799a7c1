from pathlib import Path

from ediscovery.config.settings import Settings, save_parameters
from ediscovery.logging.logger import Log
from ediscovery.output.history import History
from ediscovery.output.sinks import JsonLinesOutputSink
from ediscovery.output.stats import ItemCounter
from ediscovery.processor.processor import build_processor
from ediscovery.worker.exceptions import OutputDirectoryNotEmptyError
from ediscovery.worker.job_runner import JobRunner
from ediscovery.worker.source import DirectorySource, partition
from ediscovery.worker.worker import Worker

RECORDS_FILE = "records.jsonl"


def check_output_dir(output_dir: Path) -> None:
    """Refuse to run over the results of a previous run."""
    if output_dir.exists() and any(output_dir.iterdir()):
        raise OutputDirectoryNotEmptyError(
            f"Please remove output directory {output_dir} before processing"
        )


def main() -> None:
    """Entry point: load settings -> build dependencies -> process input directory."""
    settings = Settings()
    Log.configure(settings.log_level)
    check_output_dir(settings.output_dir)

    history = History(settings.history_file)
    history.append(f"Processing project: {settings.project_name}")
    parameters_path = save_parameters(settings, settings.history_file.parent)
    history.append(f"Processing parameters were saved to {parameters_path}")

    stats = ItemCounter()
    sink = JsonLinesOutputSink(settings.output_dir / RECORDS_FILE)
    processor = build_processor(settings, sink=sink, stats=stats, history=history)

    units = partition(DirectorySource(settings.input_dir).entries(), settings.files_per_unit)
    results = Worker(JobRunner(processor, settings), settings).run(units)

    failed = [result.unit_id for result in results if not result.succeeded]
    if failed:
        Log.error(f"{len(failed)} units failed: {failed}")
    Log.info(f"Emitted {stats.item_count} records to {sink.path}")
    history.append("Done")


if __name__ == "__main__":
    main()
