"""Symbol table construction from the VAR block of a program."""

from __future__ import annotations

import logging
import re

from pascal_checker.src.common.constants import (
    BEGIN_KEYWORD,
    DECLARABLE_TYPE_NAMES,
    END_KEYWORD,
    VAR_KEYWORD,
)
from pascal_checker.src.semantic.symbol_table import Symbol, SymbolTable
from pascal_checker.src.semantic.type_system import DeclaredType

from .exceptions import MissingVarSectionError

logger = logging.getLogger(__name__)

VAR_BLOCK_PATTERN = re.compile(
    rf"\b{VAR_KEYWORD}\b(.*?)(\b{BEGIN_KEYWORD}\b|{re.escape(END_KEYWORD)})", re.DOTALL
)
DECLARATION_PATTERN = re.compile(
    r"([\w, ]+)\s*:\s*(" + "|".join(DECLARABLE_TYPE_NAMES) + r");"
)


def build_symbol_table(source_code: str) -> SymbolTable:
    """Build the program's symbol table from its VAR block.

    Args:
        source_code: Full program text

    Returns:
        A frozen SymbolTable mapping every declared name to its type

    Raises:
        MissingVarSectionError: If there is no VAR ... BEGIN/END. block
        DuplicateDeclarationError: If a name is declared more than once
    """
    block_match = VAR_BLOCK_PATTERN.search(source_code)
    if block_match is None:
        raise MissingVarSectionError()

    block_start = block_match.start(1)
    table = SymbolTable()
    for decl in DECLARATION_PATTERN.finditer(block_match.group(1)):
        line = source_code.count("\n", 0, block_start + decl.start(1)) + 1
        declared_type = DeclaredType(decl.group(2))
        for raw_name in decl.group(1).split(","):
            name = raw_name.strip()
            if not name:
                continue
            table.define(Symbol(name, declared_type, line))

    logger.debug("Declared %d variable(s): %s", len(table), table.as_dict())
    return table.freeze()
