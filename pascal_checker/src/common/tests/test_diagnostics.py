"""
Tests for common/diagnostics.py - Diagnostic collection and reporting.
"""

import logging

import pytest

from pascal_checker.src.common.diagnostics import (
    Diagnostic,
    DiagnosticError,
    DiagnosticSeverity,
    ProgramDiagnostics,
)


class TestProgramDiagnostics:
    """Tests for ProgramDiagnostics class."""

    def test_diagnostics_initialization(self):
        """Test ProgramDiagnostics initializes with empty diagnostics."""
        diag = ProgramDiagnostics()
        assert not diag.has_errors()
        assert diag.error_count() == 0
        assert diag.warning_count() == 0

    def test_error_collection(self):
        """Test adding and counting errors."""
        diag = ProgramDiagnostics()
        diag.error("Test error", stage="test")
        assert diag.has_errors()
        assert diag.error_count() == 1

    def test_warning_collection(self):
        """Test adding and counting warnings."""
        diag = ProgramDiagnostics()
        diag.warning("Test warning", stage="test")
        assert not diag.has_errors()  # Warnings don't count as errors
        assert diag.warning_count() == 1

    def test_info_dropped_at_default_level(self):
        """Info messages are not recorded at the default warning level."""
        diag = ProgramDiagnostics()
        diag.info("Test info", stage="test")
        assert diag.diagnostics == []

    def test_info_recorded_at_info_level(self):
        """Info messages are recorded when log_level is info."""
        diag = ProgramDiagnostics(log_level="info")
        diag.info("Test info", stage="test")
        assert len(diag.diagnostics) == 1
        assert diag.diagnostics[0].severity == DiagnosticSeverity.INFO

    def test_invalid_log_level(self):
        """Unknown log levels are rejected."""
        with pytest.raises(ValueError):
            ProgramDiagnostics(log_level="chatty")

    def test_raise_errors_mode(self):
        """Test that raise_errors=True causes errors to raise exceptions."""
        diag = ProgramDiagnostics(raise_errors=True)
        with pytest.raises(DiagnosticError) as exc_info:
            diag.error("This should raise", stage="test")
        assert "This should raise" in str(exc_info.value)
        assert diag.error_count() == 1

    def test_default_stage_used_when_missing(self):
        """Diagnostics without a stage use default_stage."""
        diag = ProgramDiagnostics()
        diag.default_stage = "semantic"
        diag.error("Oops")
        assert diag.diagnostics[0].stage == "semantic"

    def test_get_messages_filters_by_severity(self):
        """Test that get_messages filters out lower severity messages."""
        diag = ProgramDiagnostics(log_level="info")
        diag.info("Info message", stage="test")
        diag.warning("Warning message", stage="test")
        diag.error("Error message", stage="test")

        messages = diag.get_messages(min_severity=DiagnosticSeverity.WARNING)
        assert len(messages) == 2  # warning + error only
        assert not any("Info message" in m for m in messages)
        assert any("Warning message" in m for m in messages)
        assert any("Error message" in m for m in messages)

    def test_get_messages_filters_out_debug(self):
        """Test severity filtering with a manually added DEBUG diagnostic."""
        diag = ProgramDiagnostics()
        diag.diagnostics.append(
            Diagnostic(
                severity=DiagnosticSeverity.DEBUG,
                message="Debug message",
                stage="test",
            )
        )
        diag.warning("Warning message", stage="test")

        messages = diag.get_messages(min_severity=DiagnosticSeverity.WARNING)
        assert not any("Debug message" in m for m in messages)
        assert any("Warning message" in m for m in messages)

    def test_error_with_node_extracts_location(self):
        """Test that error extracts line/column/source_file from node when line=0."""

        class MockNode:
            line = 42
            column = 7
            source_file = "/path/to/test.pas"

        diag = ProgramDiagnostics()
        diag.error("Test error", stage="test", node=MockNode())

        assert len(diag.diagnostics) == 1
        d = diag.diagnostics[0]
        assert d.line == 42
        assert d.column == 7
        assert d.source_file == "/path/to/test.pas"

    def test_format_diagnostic_with_full_location(self):
        """Test diagnostic formatting with source file, line, and column."""
        diag = ProgramDiagnostics()
        diag.error(
            "Test error",
            stage="parsing",
            source_file="/path/to/test.pas",
            line=42,
            column=7,
        )

        messages = diag.get_messages()
        assert messages == ["ERROR [parsing:test.pas:42:7]: Test error"]

    def test_format_diagnostic_without_location(self):
        """Only the stage is shown when no location is known."""
        diag = ProgramDiagnostics()
        diag.error("No VAR section", stage="declarations")
        assert diag.get_messages() == ["ERROR [declarations]: No VAR section"]

    def test_recorded_diagnostics_are_logged(self, caplog):
        """Each recorded diagnostic is traced on the pascal_checker logger."""
        diag = ProgramDiagnostics()
        with caplog.at_level(logging.DEBUG, logger="pascal_checker"):
            diag.warning("Heads up", stage="segmentation")
        assert "Heads up" in caplog.text
