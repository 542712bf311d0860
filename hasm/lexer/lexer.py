"""
Hack preprocessor - first assembler pass.

Handles:
- // comments (to end of line)
- Blank and whitespace-only lines
- Label definitions (LOOP), bound to the address of the next instruction
- Everything else is kept as instruction text for the second pass
"""

import re
from enum import Enum, auto
from dataclasses import dataclass
from typing import Iterable, List


COMMENT_MARKER = '//'
LABEL_OPEN = '('
LABEL_CLOSE = ')'

SYMBOL_RE = re.compile(r"[A-Za-z_.$:][A-Za-z0-9_.$:]*")
NUMERAL_RE = re.compile(r"[0-9]+")


def is_symbol(text: str) -> bool:
    """True if text is a legal symbol name (may not start with a digit)."""
    return SYMBOL_RE.fullmatch(text) is not None


def is_numeral(text: str) -> bool:
    """True if text is a non-negative decimal constant."""
    return NUMERAL_RE.fullmatch(text) is not None


class LineKind(Enum):
    """Source line classes seen by the first pass."""
    BLANK = auto()        # empty, whitespace or comment only
    LABEL = auto()        # (NAME)
    INSTRUCTION = auto()  # @value or dest=comp;jump


@dataclass
class Instruction:
    """A cleaned instruction line and where it came from."""
    text: str
    line: int = 0


def strip_comment(line: str) -> str:
    """Drop everything from the first comment marker and trim whitespace."""
    return line.split(COMMENT_MARKER, 1)[0].strip()


def classify_line(text: str) -> LineKind:
    """Classify an already cleaned line."""
    if not text:
        return LineKind.BLANK
    if text.startswith(LABEL_OPEN):
        return LineKind.LABEL
    return LineKind.INSTRUCTION


class Preprocessor:
    """Strips comments, collects instructions and binds labels."""

    def __init__(self, filename: str = "<input>"):
        self.filename = filename
        self.line = 0
        self.instructions: List[Instruction] = []

    def error(self, message: str):
        """Raise a syntax error with location information."""
        raise SyntaxError(f"{self.filename}:{self.line}: {message}")

    def process(self, lines: Iterable[str], symbols) -> List[Instruction]:
        """
        Run the first pass over raw source lines.

        Args:
            lines: Source lines, with or without line terminators
            symbols: SymbolTable that receives the label bindings

        Returns:
            Ordered list of instructions; list position is the ROM address
        """
        self.instructions = []
        self.line = 0

        for number, raw in enumerate(lines, start=1):
            self.line = number
            text = strip_comment(raw)
            kind = classify_line(text)

            if kind == LineKind.BLANK:
                continue

            if kind == LineKind.LABEL:
                name = self.parse_label(text)
                self.bind_label(name, symbols)
                continue

            self.instructions.append(Instruction(text, number))

        return self.instructions

    def process_string(self, source: str, symbols) -> List[Instruction]:
        """Run the first pass over a whole source text."""
        return self.process(source.splitlines(), symbols)

    def parse_label(self, text: str) -> str:
        """Extract NAME from (NAME)."""
        close = text.find(LABEL_CLOSE)
        if close < 0:
            self.error(f"Unterminated label definition '{text}'")
        if close != len(text) - 1:
            self.error(f"Unexpected text after label definition: '{text[close + 1:].strip()}'")

        name = text[1:close].strip()
        if not name:
            self.error("Empty label definition")
        if not is_symbol(name):
            self.error(f"Invalid label name '{name}'")
        return name

    def bind_label(self, name: str, symbols):
        """Bind a label to the address of the next instruction."""
        if symbols.contains(name):
            if symbols.is_predefined(name):
                self.error(f"Label '{name}' redefines a predefined symbol")
            self.error(f"Label '{name}' already defined (address {symbols.get_address(name)})")
        symbols.define(name, len(self.instructions))
