#!/usr/bin/env python3
"""
End-to-end tests for the Pascal subset checker.
Tests the complete pipeline using sample programs: Source -> Symbol table -> Segmentation -> Parser -> Semantic Analysis
"""

from pathlib import Path

import pytest

from pascal_checker.src.common.diagnostics import ProgramDiagnostics
from pascal_checker.src.common.errors import ErrorKind
from pascal_checker.src.pipeline import analyze_program

SAMPLE_DIR = Path(__file__).parent / "sample_programs"

VALID_SAMPLES = {
    "counter.pas": 8,
    "greeting.pas": 3,
    "comparisons.pas": 7,
}

INVALID_SAMPLES = {
    "mismatch_real_to_integer.pas": (ErrorKind.ASSIGNMENT_TYPE_MISMATCH, 6),
    "undeclared.pas": (ErrorKind.UNDECLARED_VARIABLE, 5),
    "duplicate.pas": (ErrorKind.DUPLICATE_DECLARATION, 3),
    "bad_condition.pas": (ErrorKind.CONDITION_TYPE_ERROR, 4),
    "unknown_instruction.pas": (ErrorKind.UNKNOWN_INSTRUCTION, 5),
}


def _analyze(name):
    path = SAMPLE_DIR / name
    diagnostics = ProgramDiagnostics(log_level="info")
    result = analyze_program(
        path.read_text(encoding="utf-8"),
        source_name=str(path),
        diagnostics=diagnostics,
    )
    return result, diagnostics


class TestEndToEndValidation:
    """End-to-end validation tests using sample programs."""

    def test_all_samples_are_covered(self):
        """Every sample program has an expectation."""
        names = {path.name for path in SAMPLE_DIR.glob("*.pas")}
        assert names == set(VALID_SAMPLES) | set(INVALID_SAMPLES)

    @pytest.mark.parametrize("name,statement_count", sorted(VALID_SAMPLES.items()))
    def test_valid_sample(self, name, statement_count):
        result, diagnostics = _analyze(name)
        assert result.ok, result.error
        assert len(result.statements) == statement_count
        assert not diagnostics.has_errors()
        assert diagnostics.warning_count() == 0

    @pytest.mark.parametrize("name,expected", sorted(INVALID_SAMPLES.items()))
    def test_invalid_sample(self, name, expected):
        kind, line = expected
        result, diagnostics = _analyze(name)
        assert not result.ok
        assert result.error.kind is kind
        assert result.error.line == line
        assert diagnostics.error_count() == 1
        message = diagnostics.get_messages()[0]
        assert f"{name}:{line}" in message

    def test_statements_before_error_are_kept(self):
        result, _ = _analyze("mismatch_real_to_integer.pas")
        assert [c.instruction.text for c in result.statements] == ["x := 5;"]

    def test_multiline_statement_keeps_first_line(self):
        result, _ = _analyze("greeting.pas")
        checked = result.statements[1]
        assert checked.instruction.line == 6
        assert checked.instruction.text == "IF same THEN WRITELN('same letter');"
