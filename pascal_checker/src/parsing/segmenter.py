"""Splitting of the program body into top-level instructions."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from pascal_checker.src.common.constants import BEGIN_KEYWORD, END_KEYWORD

from .exceptions import MissingProgramBodyError

BEGIN_PATTERN = re.compile(rf"\b{BEGIN_KEYWORD}\b")
END_PATTERN = re.compile(re.escape(END_KEYWORD))


@dataclass(frozen=True)
class Instruction:
    """One top-level statement as isolated from the program body."""

    text: str
    line: int = 0  # 1-based source line the instruction starts on


def extract_program_body(source_code: str) -> Tuple[str, int]:
    """Return the text between the first BEGIN and the next END.

    The second element is the source line on which the body starts. Without
    an END. the body runs to the end of the text.
    """
    begin = BEGIN_PATTERN.search(source_code)
    if begin is None:
        raise MissingProgramBodyError()

    end = END_PATTERN.search(source_code, begin.end())
    body_end = end.start() if end is not None else len(source_code)
    first_line = source_code.count("\n", 0, begin.end()) + 1
    return source_code[begin.end() : body_end], first_line


def segment_instructions(source_code: str) -> List[Instruction]:
    """Split the program body into instructions, in program order.

    Lines are trimmed and empty lines dropped. Lines accumulate (joined by a
    single space) until one ends with ``;`` or contains ``END.``. Statement
    boundaries are only recognized at line ends.
    """
    body, first_line = extract_program_body(source_code)

    instructions: List[Instruction] = []
    pending: List[str] = []
    pending_line: Optional[int] = None

    for offset, raw_line in enumerate(body.split("\n")):
        line = raw_line.strip()
        if not line:
            continue
        if pending_line is None:
            pending_line = first_line + offset
        pending.append(line)
        if line.endswith(";") or END_PATTERN.search(line):
            instructions.append(Instruction(" ".join(pending).strip(), pending_line))
            pending = []
            pending_line = None

    if pending:
        instructions.append(Instruction(" ".join(pending).strip(), pending_line or 0))

    return instructions


def segment_statements(source_code: str) -> List[str]:
    """Instruction strings of the program body, in program order."""
    return [instruction.text for instruction in segment_instructions(source_code)]


def has_program_end(source_code: str) -> bool:
    """Whether an END. follows the first BEGIN."""
    begin = BEGIN_PATTERN.search(source_code)
    return begin is not None and END_PATTERN.search(source_code, begin.end()) is not None
