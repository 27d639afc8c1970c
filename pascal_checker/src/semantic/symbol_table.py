from dataclasses import dataclass
from typing import Dict, Iterator, Optional
from .exceptions import DuplicateDeclarationError
from .type_system import DeclaredType

"""Symbol table implementation for semantic analysis."""


@dataclass(frozen=True)
class Symbol:
    """Symbol table entry."""

    name: str
    declared_type: DeclaredType
    line: int = 0  # Line of the declaration, 0 when unknown


class SymbolTable:
    """Flat, program-wide symbol table.

    The program has a single scope. The table is filled by the declaration
    builder and frozen before type checking starts.
    """

    def __init__(self) -> None:
        self.symbols: Dict[str, Symbol] = {}
        self._frozen = False

    def define(self, symbol: Symbol) -> None:
        """Define a symbol; a name may only be bound once."""

        if self._frozen:
            raise RuntimeError(f"Cannot define '{symbol.name}' in a frozen symbol table")
        if symbol.name in self.symbols:
            raise DuplicateDeclarationError(symbol.name, line=symbol.line)
        self.symbols[symbol.name] = symbol

    def lookup(self, name: str) -> Optional[Symbol]:
        """Look up a symbol by name."""

        return self.symbols.get(name)

    def freeze(self) -> "SymbolTable":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def as_dict(self) -> Dict[str, str]:
        """Name -> declared type name, for dumps and logs."""
        return {name: symbol.declared_type.value for name, symbol in self.symbols.items()}

    def __contains__(self, name: object) -> bool:
        return name in self.symbols

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols)
