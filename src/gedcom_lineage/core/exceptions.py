class LineageError(Exception):
    """Base exception for gedcom-lineage failures."""


class SourceLoadError(LineageError):
    """Raised when the GEDCOM source text cannot be loaded."""


class PipelineError(LineageError):
    """Raised when a pipeline stage fails unexpectedly."""
