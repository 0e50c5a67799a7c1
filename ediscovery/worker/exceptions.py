class WorkerError(Exception):
    """Base exception for batch setup errors."""


class OutputDirectoryNotEmptyError(WorkerError):
    """Raised when a run would write into an existing, non-empty output directory."""
