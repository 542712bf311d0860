"""
Symbol table for a single assembly run.

Holds predefined symbols, labels bound by the first pass and variables
allocated by the second pass. Bindings are never changed or removed.
"""

from types import MappingProxyType
from typing import Dict, Iterator, Optional, Set, Tuple

from ..lexer import is_numeral, is_symbol
from .codes import MAX_ADDRESS


SCREEN_BASE = 16384
KEYBOARD = 24576
VARIABLE_BASE = 16

PREDEFINED_SYMBOLS = MappingProxyType({
    **{f'R{i}': i for i in range(16)},
    'SP': 0,
    'LCL': 1,
    'ARG': 2,
    'THIS': 3,
    'THAT': 4,
    'SCREEN': SCREEN_BASE,
    'KBD': KEYBOARD,
})


class SymbolTable:
    """Maps symbol names to addresses."""

    def __init__(self, variable_base: int = VARIABLE_BASE):
        """
        Initialize a table seeded with the predefined symbols.

        Args:
            variable_base: Address of the first allocated variable
        """
        self.symbols: Dict[str, int] = dict(PREDEFINED_SYMBOLS)
        self.labels: Dict[str, int] = {}
        self.variables: Dict[str, int] = {}
        self.referenced: Set[str] = set()
        self.next_variable = variable_base

    def __contains__(self, name: str) -> bool:
        return name in self.symbols

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self) -> Iterator[Tuple[str, int]]:
        return iter(self.symbols.items())

    def contains(self, name: str) -> bool:
        """Check whether a symbol is bound."""
        return name in self.symbols

    def is_predefined(self, name: str) -> bool:
        return name in PREDEFINED_SYMBOLS

    def get_address(self, name: str) -> Optional[int]:
        """Get a bound symbol's address without allocating."""
        return self.symbols.get(name)

    def define(self, name: str, address: int):
        """Bind a label to an instruction address."""
        if name in self.symbols:
            raise ValueError(f"Symbol '{name}' already defined (address {self.symbols[name]})")
        if not 0 <= address <= MAX_ADDRESS:
            raise ValueError(f"Label '{name}' address {address} out of range 0..{MAX_ADDRESS}")
        self.symbols[name] = address
        self.labels[name] = address

    def resolve(self, name: str) -> int:
        """
        Resolve an address operand.

        Decimal numerals resolve to their value and are not stored. Known
        symbols return their address. Unknown symbols become variables at
        the next free data address.

        Args:
            name: Numeral or symbol name

        Returns:
            The 15-bit address
        """
        if is_numeral(name):
            value = int(name)
            if value > MAX_ADDRESS:
                raise ValueError(f"Constant {value} out of range 0..{MAX_ADDRESS}")
            return value

        if name in self.symbols:
            self.referenced.add(name)
            return self.symbols[name]

        if not is_symbol(name):
            raise ValueError(f"Invalid symbol name '{name}'")

        return self.allocate(name)

    def allocate(self, name: str) -> int:
        """Allocate the next variable address for a new symbol."""
        if self.next_variable > MAX_ADDRESS:
            raise ValueError(
                f"Out of variable space allocating '{name}' "
                f"(address {self.next_variable} out of range 0..{MAX_ADDRESS})"
            )
        address = self.next_variable
        self.next_variable += 1
        self.symbols[name] = address
        self.variables[name] = address
        self.referenced.add(name)
        return address

    def unreferenced_labels(self) -> Dict[str, int]:
        """Labels that no address instruction used."""
        return {name: addr for name, addr in self.labels.items()
                if name not in self.referenced}

    def dump(self) -> str:
        """Format labels and variables for a listing."""
        lines = []
        if self.labels:
            lines.append("Labels:")
            for name, addr in sorted(self.labels.items(), key=lambda item: (item[1], item[0])):
                lines.append(f"  {addr:5d}  {name}")
        if self.variables:
            lines.append("Variables:")
            for name, addr in sorted(self.variables.items(), key=lambda item: item[1]):
                lines.append(f"  {addr:5d}  {name}")
        return "\n".join(lines)
