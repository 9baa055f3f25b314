from gedcom_lineage.core.context import TreeContext
from gedcom_lineage.core.exceptions import LineageError, PipelineError, SourceLoadError

__all__ = [
    "LineageError",
    "PipelineError",
    "SourceLoadError",
    "TreeContext",
]
