from .parser import InstructionParser, parse_instruction, parse_expression
from .tokenizer import Tokenizer
from .declarations import build_symbol_table
from .segmenter import (
    Instruction,
    extract_program_body,
    segment_instructions,
    segment_statements,
)
from .exceptions import (
    MissingVarSectionError,
    MissingProgramBodyError,
    UnknownInstructionError,
    MalformedExpressionError,
    NestingTooDeepError,
)

"""Parsing module for the Pascal subset."""


__all__ = [
    "InstructionParser",
    "parse_instruction",
    "parse_expression",
    "Tokenizer",
    "build_symbol_table",
    "Instruction",
    "extract_program_body",
    "segment_instructions",
    "segment_statements",
    "MissingVarSectionError",
    "MissingProgramBodyError",
    "UnknownInstructionError",
    "MalformedExpressionError",
    "NestingTooDeepError",
]
