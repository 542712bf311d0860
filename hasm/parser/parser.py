"""
Hack instruction parser - splits cleaned instruction text into fields.

Table lookups and symbol resolution happen later, in the encoder.
"""

from typing import Optional
from ..lexer import Instruction, is_symbol, is_numeral
from .ast_nodes import ASTNode, AInstruction, CInstruction


ADDRESS_MARKER = '@'
DEST_SEPARATOR = '='
JUMP_SEPARATOR = ';'


class Parser:
    """Parses instructions into AInstruction / CInstruction nodes."""

    def __init__(self, filename: str = "<input>"):
        self.filename = filename
        self.current: Optional[Instruction] = None

    def error(self, message: str):
        """Raise a parser error with location information."""
        if self.current:
            raise SyntaxError(f"{self.filename}:{self.current.line}: {message}")
        raise SyntaxError(f"{self.filename}: {message}")

    def parse(self, instruction: Instruction) -> ASTNode:
        """Parse a single instruction."""
        self.current = instruction
        text = instruction.text.strip()
        if text.startswith(ADDRESS_MARKER):
            return self.parse_address(text)
        return self.parse_compute(text)

    def parse_address(self, text: str) -> AInstruction:
        """Parse @value or @symbol."""
        operand = text[len(ADDRESS_MARKER):].strip()
        if not operand:
            self.error("Missing operand after '@'")
        if not (is_numeral(operand) or is_symbol(operand)):
            self.error(f"Invalid address operand '{operand}'")
        return AInstruction(operand, self.current.line)

    def parse_compute(self, text: str) -> CInstruction:
        """Parse [dest=]comp[;jump]."""
        if text.count(DEST_SEPARATOR) > 1:
            self.error(f"More than one '{DEST_SEPARATOR}' in '{text}'")
        if text.count(JUMP_SEPARATOR) > 1:
            self.error(f"More than one '{JUMP_SEPARATOR}' in '{text}'")

        dest = None
        rest = text
        if DEST_SEPARATOR in text:
            dest, rest = text.split(DEST_SEPARATOR, 1)
            dest = dest.strip()
            if not dest:
                self.error(f"Missing destination before '{DEST_SEPARATOR}' in '{text}'")

        jump = None
        comp = rest
        if JUMP_SEPARATOR in rest:
            comp, jump = rest.split(JUMP_SEPARATOR, 1)
            jump = jump.strip()
            if not jump:
                self.error(f"Missing jump after '{JUMP_SEPARATOR}' in '{text}'")

        comp = comp.strip()
        if not comp:
            self.error(f"Missing computation in '{text}'")

        return CInstruction(comp, dest, jump, self.current.line)
