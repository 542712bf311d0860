"""
Test fixtures and helpers for the Hack assembler tests.

Provides:
- symbols: a fresh SymbolTable per test
- assemble: source text -> list of binary words
- asm_file: writes source text to a temporary .asm file
"""

import sys
import textwrap
from pathlib import Path

import pytest

# Add repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from hasm.assembler import HackAssembler
from hasm.hack import SymbolTable


ADD_ASM = """\
// Computes R0 = 2 + 3
@2
D=A
@3
D=D+A
@0
M=D
"""

ADD_HACK = [
    "0000000000000010",
    "1110110000010000",
    "0000000000000011",
    "1110000010010000",
    "0000000000000000",
    "1110001100001000",
]

MAX_ASM = """\
// Computes R2 = max(R0, R1)
   @R0
   D=M              // D = first number
   @R1
   D=D-M            // D = first number - second number
   @OUTPUT_FIRST
   D;JGT            // if D>0 (first is greater) goto output_first
   @R1
   D=M              // D = second number
   @OUTPUT_D
   0;JMP            // goto output_d
(OUTPUT_FIRST)
   @R0
   D=M              // D = first number
(OUTPUT_D)
   @R2
   M=D              // M[2] = D (greatest number)
(INFINITE_LOOP)
   @INFINITE_LOOP
   0;JMP            // infinite loop
"""

MAX_HACK = [
    "0000000000000000",
    "1111110000010000",
    "0000000000000001",
    "1111010011010000",
    "0000000000001010",
    "1110001100000001",
    "0000000000000001",
    "1111110000010000",
    "0000000000001100",
    "1110101010000111",
    "0000000000000000",
    "1111110000010000",
    "0000000000000010",
    "1110001100001000",
    "0000000000001110",
    "1110101010000111",
]


@pytest.fixture
def symbols():
    """A fresh symbol table seeded with the predefined symbols."""
    return SymbolTable()


@pytest.fixture
def assembler():
    return HackAssembler()


@pytest.fixture
def assemble(assembler):
    """Assemble dedented source text and return the list of words."""
    def _assemble(source: str):
        return assembler.assemble_lines(textwrap.dedent(source).splitlines(), "test.asm")
    return _assemble


@pytest.fixture
def asm_file(tmp_path):
    """Write source text to a .asm file and return its path."""
    def _write(source: str, name: str = "prog.asm") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        return path
    return _write
