"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a flat node table
describing an expression tree:

    {"root": 0,
     "nodes": [{"id": 0, "node_type": "App", "function": 1, "argument": 2},
               {"id": 1, "node_type": "Var", "name": "f"},
               {"id": 2, "node_type": "Con", "name": "Nil"}]}

Children are referenced by id, so the output stays shallow however deep the
tree is and `json.dumps` never recurses past the first level. Nodes are
numbered in pre-order, left to right. Source positions are included only
when asked for, so the output for two equal trees is identical by default.
"""

from typing import Any, Dict, List, Optional, Tuple
from ast_nodes import *


def _fields(node: ASTNode) -> Tuple[Dict[str, Any], List[Tuple[str, ASTNode]]]:
    """Return a node's scalar fields and its (role, child) pairs."""
    t = node.type
    if t == NodeType.VAR and isinstance(node, VarNode):
        return {"node_type": "Var", "name": node.name}, []
    if t == NodeType.CON and isinstance(node, ConNode):
        return {"node_type": "Con", "name": node.name}, []
    if t == NodeType.LET and isinstance(node, LetNode):
        return {"node_type": "Let", "name": node.name}, [
            ("bound", node.bound),
            ("body", node.body),
        ]
    if t == NodeType.LAM and isinstance(node, LamNode):
        return {"node_type": "Lam", "param": node.param}, [("body", node.body)]
    if t == NodeType.APP and isinstance(node, AppNode):
        return {"node_type": "App"}, [
            ("function", node.function),
            ("argument", node.argument),
        ]
    raise TypeError(f"Cannot serialize node of type {t}")


def ast_to_json(node: Optional[ASTNode], positions: bool = False) -> Any:
    if node is None:
        return None

    nodes: List[Dict[str, Any]] = []
    # Each entry is a node plus the (parent record, role) slot to fill with its id.
    stack: List[Tuple[ASTNode, Optional[Dict[str, Any]], str]] = [(node, None, "")]
    while stack:
        current, parent, role = stack.pop()
        data, children = _fields(current)
        data = {"id": len(nodes), **data}
        if positions:
            data["line"] = current.line
            data["column"] = current.column
        nodes.append(data)
        if parent is not None:
            parent[role] = data["id"]

        # Push in reverse so children are numbered left to right.
        for child_role, child in reversed(children):
            stack.append((child, data, child_role))

    return {"root": 0, "nodes": nodes}
