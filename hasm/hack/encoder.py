"""
Hack encoder - second assembler pass.

Turns parsed instructions into 16-character binary words, allocating
variables in the symbol table as they are first referenced.
"""

from typing import Iterable, List

from ..lexer import Instruction
from ..parser import Parser, AInstruction, CInstruction
from .codes import CodeTable, C_PREFIX, format_address
from .symbol_table import SymbolTable


class Encoder:
    """Encodes instructions into binary words."""

    def __init__(self, symbols: SymbolTable, filename: str = "<input>"):
        self.symbols = symbols
        self.filename = filename
        self.parser = Parser(filename)

    def error(self, line: int, message: str):
        """Raise an encoding error with location information."""
        raise ValueError(f"{self.filename}:{line}: {message}")

    def encode(self, instruction: Instruction) -> str:
        """Encode one instruction into a 16-bit word."""
        node = self.parser.parse(instruction)
        if isinstance(node, AInstruction):
            return self.encode_address(node)
        return self.encode_compute(node)

    def encode_all(self, instructions: Iterable[Instruction]) -> List[str]:
        """Encode instructions in order; variable addresses follow this order."""
        return [self.encode(instruction) for instruction in instructions]

    def encode_address(self, node: AInstruction) -> str:
        try:
            address = self.symbols.resolve(node.operand)
            return format_address(address)
        except ValueError as e:
            raise ValueError(f"{self.filename}:{node.line}: {e}") from e

    def encode_compute(self, node: CInstruction) -> str:
        comp = CodeTable.comp(node.comp)
        if comp is None:
            self.error(node.line, f"Unknown computation '{node.comp}'")

        dest = CodeTable.dest(node.dest)
        if dest is None:
            self.error(node.line, f"Unknown destination '{node.dest}'")

        jump = CodeTable.jump(node.jump)
        if jump is None:
            self.error(node.line, f"Unknown jump '{node.jump}'")

        return C_PREFIX + comp + dest + jump
