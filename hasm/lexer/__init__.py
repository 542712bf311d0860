"""Hack preprocessor (first pass)."""

from .lexer import (
    Preprocessor, Instruction, LineKind,
    classify_line, strip_comment, is_symbol, is_numeral,
)

__all__ = [
    'Preprocessor', 'Instruction', 'LineKind',
    'classify_line', 'strip_comment', 'is_symbol', 'is_numeral',
]
