from __future__ import annotations
import json
import logging
from typing import List, Optional
from lexer import Lexer
from tokens import Token
from ast_nodes import ASTNode
from parser import parse
from ast_json import ast_to_json
from ast_viz import write_and_render

logger = logging.getLogger(__name__)


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def parse_text(text: str) -> ASTNode:
    """Parse source text into an AST."""
    return parse(text)


def format_ast(ast: ASTNode) -> str:
    """Render an AST as one line per node, children referenced by id."""
    lines = []
    for node in ast_to_json(ast)["nodes"]:
        parts = [f"{k}={v}" for k, v in node.items() if k not in ("id", "node_type")]
        lines.append(f"  {node['id']:4}: {node['node_type']} " + ", ".join(parts))
    return "\n".join(lines)


def process_program(
    text: str,
    *,
    print_tokens: bool = False,
    print_ast: bool = True,
    json_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> bool:
    """Process a single program: lex, parse and optionally dump the result.

    Returns True when the program parsed, False on a syntax error.
    """
    try:
        if print_tokens:
            tokens = lex(text)
            print(f"Tokens ({len(tokens)}):")
            for i, token in enumerate(tokens[:50]):
                print(f"  {i:3}: {token}")
            if len(tokens) > 50:
                print(f"  ... and {len(tokens) - 50} more")

        ast = parse_text(text)
        logger.debug("parsed %d characters into %s", len(text), ast.type)
    except SyntaxError as e:
        logger.debug("error at line %s, column %s", e.line, e.column)
        print(f"Syntax Error: {e}")
        return False

    if print_ast:
        print("\nAST:")
        print(format_ast(ast))

    if json_path:
        try:
            with open(json_path, "w", encoding="utf-8") as fh:
                json.dump(ast_to_json(ast), fh, indent=2)
            print(f"Wrote AST JSON to {json_path}")
        except OSError as e:
            print(f"Failed to write AST JSON to {json_path}: {e}")

    # Optionally render visualization via Graphviz
    if viz_path:
        try:
            write_and_render(ast, viz_path, fmt=viz_format)
            print(f"Wrote AST visualization to {viz_path}.{viz_format}")
        except Exception as e:
            logger.debug("graphviz render failed", exc_info=True)
            print(f"Failed to render AST visualization to {viz_path}: {e}")

    return True


def interactive_mode(print_tokens: bool = False, print_ast: bool = True) -> None:
    """Run an interactive parser REPL reading expressions from stdin."""
    print("\nInteractive Parser Mode (type 'quit' to exit)")
    print("=" * 80)

    while True:
        try:
            text = input("\nEnter expression: ").strip()
            if text.lower() in ("quit", "exit", "q"):
                print("Goodbye!")
                break

            if not text:
                continue

            process_program(text, print_tokens=print_tokens, print_ast=print_ast)

        except (KeyboardInterrupt, EOFError):
            print("\n\nExiting...")
            break


def main(argv: Optional[List[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        description="Parse a let/fun expression from a file, the command line or stdin"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to source file to process"
    )
    group.add_argument(
        "--expr", "-e", dest="expr", help="Source text to process"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    # printing/verbosity options
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--no-ast", dest="print_ast", action="store_false", help="Do not print AST"
    )
    parser.add_argument(
        "--json", dest="json_path", help="Path to write the AST as JSON"
    )
    parser.add_argument(
        "--viz",
        dest="viz_path",
        help="Path (without extension) to write Graphviz visualization of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )
    parser.add_argument(
        "--verbose", "-v", dest="verbose", action="store_true", help="Debug logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if args.interactive:
        interactive_mode(print_tokens=args.print_tokens, print_ast=args.print_ast)
        return 0

    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as fh:
                text = fh.read()
        except OSError as e:
            print(f"Failed to read file {args.file}: {e}")
            return 1
    elif args.expr is not None:
        text = args.expr
    else:
        parser.print_help()
        return 0

    ok = process_program(
        text,
        print_tokens=args.print_tokens,
        print_ast=args.print_ast,
        json_path=args.json_path,
        viz_path=args.viz_path,
        viz_format=args.viz_format,
    )
    return 0 if ok else 1


if __name__ == "__main__":
    import sys

    sys.exit(main())
