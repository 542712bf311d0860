"""
Instruction node definitions for Hack assembly.

Each node is one machine instruction after field splitting.
"""

from dataclasses import dataclass
from typing import Optional
from enum import Enum, auto


class NodeType(Enum):
    """Instruction node types."""
    A_INSTRUCTION = auto()  # @value / @symbol
    C_INSTRUCTION = auto()  # dest=comp;jump


@dataclass
class ASTNode:
    """Base class for all instruction nodes."""
    node_type: NodeType
    line: int = 0

    def __repr__(self):
        return f"{self.__class__.__name__}(...)"


class AInstruction(ASTNode):
    """Address instruction: loads a 15-bit constant into A."""
    def __init__(self, operand: str, line: int = 0):
        super().__init__(NodeType.A_INSTRUCTION, line)
        self.operand = operand

    def __repr__(self):
        return f"AInstruction(@{self.operand})"


class CInstruction(ASTNode):
    """Compute instruction: [dest=]comp[;jump]."""
    def __init__(self, comp: str, dest: Optional[str] = None,
                 jump: Optional[str] = None, line: int = 0):
        super().__init__(NodeType.C_INSTRUCTION, line)
        self.comp = comp
        self.dest = dest    # None means no store
        self.jump = jump    # None means no jump

    def __repr__(self):
        text = self.comp
        if self.dest is not None:
            text = f"{self.dest}={text}"
        if self.jump is not None:
            text = f"{text};{self.jump}"
        return f"CInstruction({text})"
