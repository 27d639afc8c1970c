import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Any
from pathlib import Path

"""Unified diagnostic collection for the checker pipeline."""

logger = logging.getLogger("pascal_checker")


class DiagnosticSeverity(Enum):
    """Severity levels for checker diagnostics."""

    DEBUG = "debug"  # Internal checker information
    INFO = "info"  # Informational messages for users
    WARNING = "warning"  # Issues that don't fail validation
    ERROR = "error"  # Issues that fail validation


SEVERITY_ORDER = [
    DiagnosticSeverity.DEBUG,
    DiagnosticSeverity.INFO,
    DiagnosticSeverity.WARNING,
    DiagnosticSeverity.ERROR,
]


class DiagnosticError(RuntimeError):
    """Raised by ``ProgramDiagnostics.error`` when ``raise_errors`` is set."""


@dataclass
class Diagnostic:
    """A single diagnostic message with context."""

    severity: DiagnosticSeverity
    message: str
    stage: str  # declarations, segmentation, parsing, semantic, internal
    line: int = 0
    column: int = 0
    source_file: Optional[str] = None
    node: Optional[Any] = None  # ASTNode reference if available


class ProgramDiagnostics:
    """Central diagnostic collection for a validation run.

    Usage:
        diagnostics = ProgramDiagnostics()
        diagnostics.error("Undeclared variable: x", stage="semantic", line=10)
        if diagnostics.has_errors():
            print("\n".join(diagnostics.get_messages()))
    """

    def __init__(self, log_level: str = "warning", raise_errors: bool = False):
        self.diagnostics: List[Diagnostic] = []
        self.min_severity = DiagnosticSeverity(log_level.lower())
        self.raise_errors = raise_errors
        self._error_count = 0
        self._warning_count = 0
        self.default_stage = "unknown"

    def info(
        self,
        message: str,
        stage: str | None = None,
        line: int = 0,
        column: int = 0,
        source_file: Optional[str] = None,
        node: Optional[Any] = None,
    ) -> None:
        """Add an informational message (kept at info level and below)."""
        if self._enabled(DiagnosticSeverity.INFO):
            self._add(
                DiagnosticSeverity.INFO, message, stage, line, column, source_file, node
            )

    def warning(
        self,
        message: str,
        stage: str | None = None,
        line: int = 0,
        column: int = 0,
        source_file: Optional[str] = None,
        node: Optional[Any] = None,
    ) -> None:
        """Add a warning (always recorded, doesn't fail validation)."""
        self._add(
            DiagnosticSeverity.WARNING, message, stage, line, column, source_file, node
        )
        self._warning_count += 1

    def error(
        self,
        message: str,
        stage: str | None = None,
        line: int = 0,
        column: int = 0,
        source_file: Optional[str] = None,
        node: Optional[Any] = None,
    ) -> None:
        """Add an error (always recorded, fails validation)."""
        diag = self._add(
            DiagnosticSeverity.ERROR, message, stage, line, column, source_file, node
        )
        self._error_count += 1
        if self.raise_errors:
            raise DiagnosticError(self._format_diagnostic(diag))

    def _enabled(self, severity: DiagnosticSeverity) -> bool:
        return SEVERITY_ORDER.index(severity) >= SEVERITY_ORDER.index(self.min_severity)

    def _add(
        self,
        severity: DiagnosticSeverity,
        message: str,
        stage: str | None,
        line: int,
        column: int,
        source_file: Optional[str],
        node: Optional[Any],
    ) -> Diagnostic:
        """Internal method to add a diagnostic."""
        # Extract location from node if provided and location not specified
        if node is not None and line == 0:
            line = getattr(node, "line", 0)
            column = getattr(node, "column", 0)
            if source_file is None:
                source_file = getattr(node, "source_file", None)

        diag = Diagnostic(
            severity=severity,
            message=message,
            stage=stage or self.default_stage,
            line=line,
            column=column,
            source_file=source_file,
            node=node,
        )
        self.diagnostics.append(diag)
        logger.debug("Recorded %s", self._format_diagnostic(diag))
        return diag

    def has_errors(self) -> bool:
        """Check if any errors have been recorded."""
        return self._error_count > 0

    def error_count(self) -> int:
        """Get the number of errors."""
        return self._error_count

    def warning_count(self) -> int:
        """Get the number of warnings."""
        return self._warning_count

    def get_messages(
        self, min_severity: DiagnosticSeverity = DiagnosticSeverity.WARNING
    ) -> List[str]:
        """Get formatted messages at or above the specified severity level."""
        threshold = SEVERITY_ORDER.index(min_severity)
        return [
            self._format_diagnostic(diag)
            for diag in self.diagnostics
            if SEVERITY_ORDER.index(diag.severity) >= threshold
        ]

    def _format_diagnostic(self, diag: Diagnostic) -> str:
        """Format a single diagnostic for display."""
        # Format: SEVERITY [stage:file:line:col]: message
        location_parts = [diag.stage]
        if diag.source_file:
            location_parts.append(Path(diag.source_file).name)
        if diag.line > 0:
            location_parts.append(str(diag.line))
            if diag.column > 0:
                location_parts.append(str(diag.column))

        location = ":".join(location_parts)
        return f"{diag.severity.value.upper()} [{location}]: {diag.message}"

