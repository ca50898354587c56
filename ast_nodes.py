"""AST node definitions for the let/fun expression language.

This module defines the expression dataclasses produced by the parser and
handed to later phases such as type inference. The language has exactly five
expression forms, identified by the `NodeType` enum:

    x                      VarNode(name="x")
    Nil                    ConNode(name="Nil")
    let x = e1 in e2       LetNode(name="x", bound=e1, body=e2)
    fun x -> e             LamNode(param="x", body=e)
    f a                    AppNode(function=f, argument=a)

Conventions:
- All nodes inherit from `ASTNode`, which records the node kind and the
    `line`/`column` of the node's first token. Positions are excluded from
    equality, so trees built by hand compare equal to parsed ones.
- Every node owns its children; parentheses never appear in the tree.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union


class NodeType(Enum):
    VAR = auto()
    CON = auto()
    LET = auto()
    LAM = auto()
    APP = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass
class ASTNode:
    type: NodeType
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)


@dataclass
class VarNode(ASTNode):
    type: NodeType = NodeType.VAR
    name: str = ""


@dataclass
class ConNode(ASTNode):
    type: NodeType = NodeType.CON
    name: str = ""


@dataclass
class LetNode(ASTNode):
    type: NodeType = NodeType.LET
    name: str = ""
    bound: ASTNode = field(default_factory=lambda: VarNode())
    body: ASTNode = field(default_factory=lambda: VarNode())


@dataclass
class LamNode(ASTNode):
    type: NodeType = NodeType.LAM
    param: str = ""
    body: ASTNode = field(default_factory=lambda: VarNode())


@dataclass
class AppNode(ASTNode):
    type: NodeType = NodeType.APP
    function: ASTNode = field(default_factory=lambda: VarNode())
    argument: ASTNode = field(default_factory=lambda: VarNode())


Expr = Union[VarNode, ConNode, LetNode, LamNode, AppNode]
