"""Whole-program validation: declarations, segmentation, parsing, checking."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from pascal_checker.src.ast import Statement, ast_to_dict
from pascal_checker.src.common.constants import DEFAULT_CONFIG, CheckerConfig
from pascal_checker.src.common.diagnostics import ProgramDiagnostics
from pascal_checker.src.common.errors import AnalysisError
from pascal_checker.src.parsing.declarations import build_symbol_table
from pascal_checker.src.parsing.exceptions import NestingTooDeepError
from pascal_checker.src.parsing.parser import InstructionParser, default_parser
from pascal_checker.src.parsing.segmenter import (
    Instruction,
    has_program_end,
    segment_instructions,
)
from pascal_checker.src.semantic.analyzer import SemanticAnalyzer
from pascal_checker.src.semantic.symbol_table import SymbolTable
from pascal_checker.src.semantic.type_system import TypedValue

logger = logging.getLogger(__name__)


@dataclass
class CheckedStatement:
    """An instruction that parsed and type checked successfully."""

    instruction: Instruction
    statement: Statement
    result: TypedValue


@dataclass
class AnalysisResult:
    """Outcome of validating one program.

    ``error`` is None on success. On failure it holds the first error; the
    statements checked before it are kept in ``statements``.
    """

    source_name: str = "<string>"
    symbol_table: Optional[SymbolTable] = None
    statements: List[CheckedStatement] = field(default_factory=list)
    error: Optional[AnalysisError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ProgramValidator:
    """Runs the analysis stages over a program, stopping at the first error."""

    def __init__(
        self,
        parser: Optional[InstructionParser] = None,
        config: CheckerConfig = DEFAULT_CONFIG,
    ):
        self.parser = parser or default_parser()
        self.config = config

    def validate(
        self,
        source_code: str,
        source_name: str = "<string>",
        diagnostics: Optional[ProgramDiagnostics] = None,
    ) -> AnalysisResult:
        result = AnalysisResult(source_name=source_name)
        current_line = 0
        try:
            result.symbol_table = build_symbol_table(source_code)
            logger.debug("Symbol table: %s", result.symbol_table.as_dict())
            analyzer = SemanticAnalyzer(result.symbol_table)

            instructions = segment_instructions(source_code)
            if diagnostics is not None and not has_program_end(source_code):
                diagnostics.warning(
                    "No END. after BEGIN; the program body runs to the end of the text",
                    stage="segmentation",
                    source_file=_source_file(source_name),
                )

            for instruction in instructions:
                current_line = instruction.line
                text = self._instruction_text(instruction)
                if not text:
                    continue

                logger.debug("Instruction (line %d): %s", instruction.line, text)
                try:
                    statement = self.parser.parse(text, instruction.line)
                    if logger.isEnabledFor(logging.DEBUG):
                        logger.debug(
                            "AST (line %d): %s", instruction.line, ast_to_dict(statement)
                        )
                    typed = analyzer.check(statement)
                except RecursionError:
                    raise NestingTooDeepError(text, instruction.line) from None
                result.statements.append(CheckedStatement(instruction, statement, typed))

        except AnalysisError as exc:
            result.error = exc.with_line(current_line)
            self._report(result, diagnostics)
            return result

        logger.info(
            "Validated %s: %d variable(s), %d statement(s)",
            source_name,
            len(result.symbol_table),
            len(result.statements),
        )
        if diagnostics is not None:
            diagnostics.info(
                f"Validation passed: {len(result.statements)} statement(s) checked",
                stage="semantic",
                source_file=_source_file(source_name),
            )
        return result

    def _instruction_text(self, instruction: Instruction) -> str:
        text = instruction.text
        if self.config.strip_trailing_semicolon and text.endswith(";"):
            text = text[:-1]
        return text.strip()

    @staticmethod
    def _report(
        result: AnalysisResult, diagnostics: Optional[ProgramDiagnostics]
    ) -> None:
        error = result.error
        if diagnostics is None or error is None:
            return
        source_file = _source_file(result.source_name)
        diagnostics.error(
            error.message,
            stage=error.kind.stage,
            line=error.line,
            column=error.column,
            source_file=source_file,
            node=error.node,
        )


def analyze_program(
    source_code: str,
    source_name: str = "<string>",
    diagnostics: Optional[ProgramDiagnostics] = None,
    config: CheckerConfig = DEFAULT_CONFIG,
) -> AnalysisResult:
    """Validate a whole program and return the verdict.

    Analysis errors never escape: they are returned in ``AnalysisResult.error``
    and, when ``diagnostics`` is given, recorded there as well.
    """
    return ProgramValidator(config=config).validate(
        source_code, source_name=source_name, diagnostics=diagnostics
    )


def _source_file(source_name: str) -> Optional[str]:
    return None if source_name == "<string>" else source_name
