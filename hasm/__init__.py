"""
Hack Assembler (hasm) - Translates Hack assembly into Hack machine code.

This package provides a two-pass assembler for the 16-bit Hack computer:
labels are bound in the first pass, variables are allocated and every
instruction is encoded in the second.
"""

__version__ = "0.1.0"
__author__ = "Hack Assembler Project"
