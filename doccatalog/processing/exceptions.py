class ProcessingError(Exception):
    """Base exception for all processor-related errors."""


class DocumentValidationError(ProcessingError):
    """Raised when a document fails a processor's validation check."""
