class PipelineError(Exception):
    """Base exception for import failures that abort the whole file."""


class ValidationError(PipelineError):
    """Raised when parsed GEDCOM data does not have the expected shape."""


class ParseExecutionError(PipelineError):
    """Raised when a GEDCOM file cannot be read, parsed or imported."""


class StoreError(Exception):
    """Raised by an entity store that rejects a write."""
