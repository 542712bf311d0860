"""
Hack instruction field codes.

A-instruction:  0vvv vvvv vvvv vvvv   (15-bit value)
C-instruction:  111a cccc ccdd djjj   (comp, dest, jump)
"""

from types import MappingProxyType
from typing import Optional


WORD_BITS = 16
ADDRESS_BITS = 15
MAX_ADDRESS = (1 << ADDRESS_BITS) - 1

C_PREFIX = '111'
NULL_DEST = '000'
NULL_JUMP = '000'


class CodeTable:
    """Fixed comp/dest/jump mnemonic tables."""

    # a bit + c1..c6
    COMP = MappingProxyType({
        # a=0
        '0':   '0101010',
        '1':   '0111111',
        '-1':  '0111010',
        'D':   '0001100',
        'A':   '0110000',
        '!D':  '0001101',
        '!A':  '0110001',
        '-D':  '0001111',
        '-A':  '0110011',
        'D+1': '0011111',
        'A+1': '0110111',
        'D-1': '0001110',
        'A-1': '0110010',
        'D+A': '0000010',
        'D-A': '0010011',
        'A-D': '0000111',
        'D&A': '0000000',
        'D|A': '0010101',
        # a=1, M in place of A
        'M':   '1110000',
        '!M':  '1110001',
        '-M':  '1110011',
        'M+1': '1110111',
        'M-1': '1110010',
        'D+M': '1000010',
        'D-M': '1010011',
        'M-D': '1000111',
        'D&M': '1000000',
        'D|M': '1010101',
    })

    DEST = MappingProxyType({
        'M':   '001',
        'D':   '010',
        'MD':  '011',
        'A':   '100',
        'AM':  '101',
        'AD':  '110',
        'AMD': '111',
    })

    JUMP = MappingProxyType({
        'JGT': '001',
        'JEQ': '010',
        'JGE': '011',
        'JLT': '100',
        'JNE': '101',
        'JLE': '110',
        'JMP': '111',
    })

    @classmethod
    def comp(cls, mnemonic: str) -> Optional[str]:
        """Get the 7-bit comp code, or None if unknown."""
        return cls.COMP.get(mnemonic)

    @classmethod
    def dest(cls, mnemonic: Optional[str]) -> Optional[str]:
        """Get the 3-bit dest code; None encodes as 000."""
        if mnemonic is None:
            return NULL_DEST
        return cls.DEST.get(mnemonic)

    @classmethod
    def jump(cls, mnemonic: Optional[str]) -> Optional[str]:
        """Get the 3-bit jump code; None encodes as 000."""
        if mnemonic is None:
            return NULL_JUMP
        return cls.JUMP.get(mnemonic)


def format_address(value: int) -> str:
    """Format an address as a zero-padded 16-bit word."""
    if not 0 <= value <= MAX_ADDRESS:
        raise ValueError(f"Address {value} out of range 0..{MAX_ADDRESS}")
    return format(value, f'0{WORD_BITS}b')
