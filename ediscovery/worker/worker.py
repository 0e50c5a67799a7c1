from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from ediscovery.config.settings import Settings
from ediscovery.logging.logger import Log
from ediscovery.worker.job_runner import JobRunner
from ediscovery.worker.models import UnitResult, WorkUnit


class Worker:
    """Fans work units out over a pool of worker threads."""

    def __init__(self, job_runner: JobRunner, settings: Settings) -> None:
        self._job_runner = job_runner
        self._settings = settings

    def run(self, units: Iterable[WorkUnit]) -> list[UnitResult]:
        """Process all units and return their results in unit order.

        A KeyboardInterrupt stops scheduling and returns what finished.
        """
        pending = list(units)
        Log.info(f"Worker started: {len(pending)} units on {self._settings.worker_count} threads")
        results: list[UnitResult] = []
        executor = ThreadPoolExecutor(
            max_workers=self._settings.worker_count,
            thread_name_prefix="unit",
        )
        try:
            futures = [executor.submit(self._job_runner.run, unit) for unit in pending]
            for future in futures:
                results.append(future.result())
        except KeyboardInterrupt:
            Log.info("Worker shutting down gracefully")
            executor.shutdown(wait=False, cancel_futures=True)
        finally:
            executor.shutdown(wait=True)
        return results
