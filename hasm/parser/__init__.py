"""Hack instruction parser - splits instructions into fields."""

from .parser import Parser
from .ast_nodes import NodeType, ASTNode, AInstruction, CInstruction

__all__ = ['Parser', 'NodeType', 'ASTNode', 'AInstruction', 'CInstruction']
