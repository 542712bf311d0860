"""Hack machine code generation: field tables, symbols, encoder."""

from .codes import CodeTable, format_address, WORD_BITS, MAX_ADDRESS
from .symbol_table import SymbolTable, PREDEFINED_SYMBOLS, VARIABLE_BASE
from .encoder import Encoder

__all__ = [
    'CodeTable', 'format_address', 'WORD_BITS', 'MAX_ADDRESS',
    'SymbolTable', 'PREDEFINED_SYMBOLS', 'VARIABLE_BASE',
    'Encoder',
]
