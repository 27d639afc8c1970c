"""Common utilities shared across checker stages."""

from .diagnostics import ProgramDiagnostics, DiagnosticSeverity, DiagnosticError
from .errors import AnalysisError, ErrorKind
from .constants import *

__all__ = [
    "ProgramDiagnostics",
    "DiagnosticSeverity",
    "DiagnosticError",
    "AnalysisError",
    "ErrorKind",
    # Constants
    "CheckerConfig",
    "DEFAULT_CONFIG",
    "COMPARISON_OPERATORS",
    "ARITHMETIC_OPERATORS",
    "DECLARABLE_TYPE_NAMES",
]
