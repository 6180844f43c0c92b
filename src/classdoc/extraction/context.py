"""Per-call extraction state shared by the pipeline stages."""

from classdoc.core import Diagnostic, DiagnosticLevel
from classdoc.logging import get_logger

logger = get_logger(__name__)


class ExtractionContext:
    """
    Context object passed through one extraction run.

    Mutable container that the pipeline stages use to report
    diagnostics. Every call to `extract()` builds a fresh one, so
    independent extractions never share state.
    """

    def __init__(self, source_path: str) -> None:
        self.source_path = source_path
        self.diagnostics: list[Diagnostic] = []

    def info(self, event: str, message: str, **fields: str | int | bool) -> None:
        """Record an informational diagnostic."""
        self._record(DiagnosticLevel.INFO, event, message, fields)

    def warn(self, event: str, message: str, **fields: str | int | bool) -> None:
        """Record a recoverable problem."""
        self._record(DiagnosticLevel.WARNING, event, message, fields)

    def error(self, event: str, message: str, **fields: str | int | bool) -> None:
        """Record an error that caused part of the input to be skipped."""
        self._record(DiagnosticLevel.ERROR, event, message, fields)

    def _record(
        self,
        level: DiagnosticLevel,
        event: str,
        message: str,
        fields: dict[str, str | int | bool],
    ) -> None:
        self.diagnostics.append(
            Diagnostic(level=level, event=event, message=message, fields=dict(fields))
        )
        log = getattr(logger, level.value)
        log(event, source_path=self.source_path, detail=message, **fields)
