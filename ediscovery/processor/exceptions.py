class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class EmissionError(ProcessorError):
    """Raised when a record cannot be digested or written to the output channel."""
