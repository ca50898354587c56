"""Graphviz visualization helpers for expression trees.

Provides `render_ast_dot(expr)` which returns a `graphviz.Digraph` object
(not rendered). Optionally `write_and_render` can write the file to disk.

Layout: each AST node becomes a box labelled with its kind and name
(`Let x`, `Fun x`, `App`, `Var f`, `Con Nil`); edges point from a node to
its children and are labelled with the child's role (`bound`/`body`,
`fun`/`arg`). The tree is walked with an explicit stack so long application
chains do not hit the recursion limit.
"""

from typing import List, Tuple
from ast_nodes import *
from graphviz import Digraph


def _node_label(node: ASTNode) -> str:
    match node.type:
        case NodeType.VAR:
            return f"Var {node.name}"
        case NodeType.CON:
            return f"Con {node.name}"
        case NodeType.LET:
            return f"Let {node.name}"
        case NodeType.LAM:
            return f"Fun {node.param}"
        case NodeType.APP:
            return "App"
    raise TypeError(f"Cannot render node of type {node.type}")


def _children(node: ASTNode) -> List[Tuple[str, ASTNode]]:
    if isinstance(node, LetNode):
        return [("bound", node.bound), ("body", node.body)]
    if isinstance(node, LamNode):
        return [("body", node.body)]
    if isinstance(node, AppNode):
        return [("fun", node.function), ("arg", node.argument)]
    return []


def render_ast_dot(expr: Expr) -> Digraph:
    """Return a graphviz.Digraph for the given expression tree.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    dot.attr("node", shape="box", fontname="Helvetica")

    counter = 0
    stack: List[Tuple[ASTNode, str]] = [(expr, "n0")]
    while stack:
        node, node_id = stack.pop()
        dot.node(node_id, label=_node_label(node))

        # Push children in reverse so they are emitted left to right.
        edges = []
        for role, child in _children(node):
            counter += 1
            child_id = f"n{counter}"
            dot.edge(node_id, child_id, label=role)
            edges.append((child, child_id))
        stack.extend(reversed(edges))

    return dot


def write_and_render(expr: Expr, out_path: str, fmt: str = "svg") -> None:
    """Write and render the tree to the given path (without extension).

    Example: write_and_render(expr, 'out/ast', fmt='png') will create out/ast.png
    (requires Graphviz)."""
    dot = render_ast_dot(expr)
    dot.format = fmt
    # Note: render will append extension automatically
    dot.render(out_path, cleanup=True)
