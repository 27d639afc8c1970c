from pascal_checker.src.common.errors import AnalysisError, ErrorKind

"""Errors raised while reading program structure and statement text."""


class ProgramStructureError(AnalysisError):
    """Base for errors in the VAR/BEGIN/END. layout of a program."""


class MissingVarSectionError(ProgramStructureError):
    kind = ErrorKind.MISSING_VAR_SECTION

    def __init__(self) -> None:
        super().__init__("No VAR section found in the source code.")


class MissingProgramBodyError(ProgramStructureError):
    kind = ErrorKind.MISSING_PROGRAM_BODY

    def __init__(self) -> None:
        super().__init__("No BEGIN ... END. block found in the source code.")


class InstructionSyntaxError(AnalysisError):
    """Base for errors in a single instruction's text."""

    def __init__(self, message: str, text: str, line: int = 0) -> None:
        self.text = text
        super().__init__(message, line=line)


class UnknownInstructionError(InstructionSyntaxError):
    kind = ErrorKind.UNKNOWN_INSTRUCTION

    def __init__(self, text: str, line: int = 0) -> None:
        super().__init__(f"Unknown instruction: {text}", text, line)


class MalformedExpressionError(InstructionSyntaxError):
    kind = ErrorKind.MALFORMED_EXPRESSION

    def __init__(self, text: str, line: int = 0) -> None:
        super().__init__(f"Missing operand in expression: {text}", text, line)


class NestingTooDeepError(InstructionSyntaxError):
    kind = ErrorKind.NESTING_TOO_DEEP

    def __init__(self, text: str, line: int = 0) -> None:
        super().__init__(f"Instruction nested too deeply: {text}", text, line)
