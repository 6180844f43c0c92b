#!/usr/bin/env python3
"""Debug script to see the tree-sitter node types and the extracted documentation for a class file."""

import json
import sys
from dataclasses import asdict
from pathlib import Path

import tree_sitter_javascript as ts_javascript
from tree_sitter import Language, Parser

from classdoc import extract


def print_tree(node, source: bytes, indent: int = 0, max_depth: int = 4):
    """Print AST tree structure."""
    if indent > max_depth:
        return

    text = source[node.start_byte:node.end_byte].decode()[:60].replace('\n', '\\n')
    marker = " [ERROR]" if node.type == "ERROR" or node.is_missing else ""
    print(f"{'  ' * indent}{node.type}{marker}: {text!r}")

    for child in node.children:
        print_tree(child, source, indent + 1, max_depth)


def main():
    if len(sys.argv) < 2:
        print(f"usage: {sys.argv[0]} <class-file.js> [max-depth]")
        sys.exit(1)

    path = Path(sys.argv[1])
    max_depth = int(sys.argv[2]) if len(sys.argv) > 2 else 4
    source_code = path.read_text(encoding="utf-8")

    language = Language(ts_javascript.language())
    parser = Parser(language)

    source_bytes = source_code.encode('utf-8')
    tree = parser.parse(source_bytes)

    print("=" * 80)
    print(f"Tree-sitter-javascript AST structure (has_error={tree.root_node.has_error}):")
    print("=" * 80)
    print_tree(tree.root_node, source_bytes, max_depth=max_depth)

    print("\n" + "=" * 80)
    print("Extracted documentation model:")
    print("=" * 80)
    model = extract(source_code, str(path))
    print(json.dumps(asdict(model), indent=2, default=str))

if __name__ == "__main__":
    main()
