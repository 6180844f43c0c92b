"""Syntax tree building with tree-sitter, comment collection and class recovery."""

import re
from collections.abc import Iterator
from dataclasses import dataclass

import tree_sitter_javascript as ts_javascript
from tree_sitter import Language, Node, Parser, Tree

from classdoc.core import CommentBlock, CommentKind, ParseTier
from classdoc.extraction.comments import CommentIndex
from classdoc.extraction.context import ExtractionContext

# /** comment */ (class Name extends Base {
# The comment group never crosses a closing "*/", so a leading module
# comment does not swallow the class comment.
_WRAPPED_CLASS_HEAD = re.compile(
    r"/\*\*((?:(?!\*/)[\s\S])*)\*/\s*"
    r"\(\s*class\s+(\w+)[^{]*\{"
)

# }.initThisClass()); or }).initThisCategory();
_WRAPPER_END = re.compile(
    r"\}\s*(?:\.\s*\w+\s*\(\s*\)\s*\)|\)\s*\.\s*\w+\s*\(\s*\))\s*(?:;|\Z)"
)


@dataclass(frozen=True, slots=True)
class ParsedTree:
    """
    A tree that parsed without syntax errors.

    `line_offset` maps tree rows back to lines of the original text
    when the tree was built from a re-synthesized snippet.
    """

    tier: ParseTier
    tree: Tree
    source_bytes: bytes
    comments: CommentIndex
    line_offset: int = 0

    @property
    def root(self) -> Node:
        return self.tree.root_node

    @property
    def lines(self) -> list[str]:
        return self.source_bytes.decode("utf-8", errors="replace").split("\n")


@dataclass(frozen=True, slots=True)
class Unparseable:
    """No tree could be built; the regex tier has to take over."""

    reason: str


ParseResult = ParsedTree | Unparseable


@dataclass(frozen=True, slots=True)
class RecoveredSnippet:
    """A minimal single-class program re-synthesized from broken input."""

    class_name: str
    text: str
    line_offset: int


def iter_nodes(root: Node) -> Iterator[Node]:
    """Yield every node under `root` in pre-order (document order)."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def node_text(node: Node, source_bytes: bytes) -> str:
    """Extract text from node."""
    return source_bytes[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


def _braces_balanced(text: str) -> bool:
    depth = 0
    for char in text:
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def synthesize_single_class(source_code: str) -> RecoveredSnippet | None:
    """
    Rebuild `/**comment*/ class Name { body }` from a wrapped class expression.

    Returns None when no wrapped class pattern is present.
    """
    head = _WRAPPED_CLASS_HEAD.search(source_code)
    if not head:
        return None
    ends = list(_WRAPPER_END.finditer(source_code, head.end()))
    if not ends:
        return None
    # First terminator closing a brace-balanced body; a body with broken
    # braces takes the first terminator.
    end = next(
        (e for e in ends if _braces_balanced(source_code[head.end() : e.start()])),
        ends[0],
    )
    comment, class_name = head.group(1), head.group(2)
    body = source_code[head.end() : end.start()]
    prefix = f"/**{comment}*/\nclass {class_name} {{"
    text = f"{prefix}{body}}}\n"
    original_body_line = source_code.count("\n", 0, head.end())
    return RecoveredSnippet(
        class_name=class_name,
        text=text,
        line_offset=original_body_line - prefix.count("\n"),
    )


class TreeBuilder:
    """
    Builds a JavaScript syntax tree and indexes its block comments.

    tree-sitter never raises on bad input; a parse counts as failed when
    the tree contains ERROR or MISSING nodes.
    """

    def __init__(self, enable_recovery: bool = True) -> None:
        self._language = Language(ts_javascript.language())
        self._parser = Parser(self._language)
        self._enable_recovery = enable_recovery

    def build(self, source_code: str, ctx: ExtractionContext) -> ParseResult:
        """Parse the full text, falling back to single-class recovery once."""
        parsed = self._parse(source_code, ParseTier.PARSED)
        if not parsed.root.has_error:
            return parsed

        self._report_syntax_error(parsed, ctx, "tree_build_failed")

        if not self._enable_recovery:
            return Unparseable(reason="syntax errors and recovery disabled")

        snippet = synthesize_single_class(source_code)
        if snippet is None:
            ctx.warn(
                "class_pattern_not_found",
                "Could not extract class definition. Falling back to basic parsing.",
            )
            return Unparseable(reason="no wrapped class pattern")

        ctx.info(
            "class_resynthesized",
            f"Extracted class {snippet.class_name} for re-parsing",
            class_name=snippet.class_name,
        )
        recovered = self._parse(snippet.text, ParseTier.RECOVERED, snippet.line_offset)
        if recovered.root.has_error:
            self._report_syntax_error(recovered, ctx, "recovery_failed")
            return Unparseable(reason="re-synthesized class has syntax errors")
        return recovered

    def _parse(self, source_code: str, tier: ParseTier, line_offset: int = 0) -> ParsedTree:
        source_bytes = source_code.encode("utf-8")
        tree = self._parser.parse(source_bytes)
        comments = CommentIndex()
        self._collect_comments(tree.root_node, source_bytes, comments)
        return ParsedTree(
            tier=tier,
            tree=tree,
            source_bytes=source_bytes,
            comments=comments,
            line_offset=line_offset,
        )

    def _collect_comments(self, root: Node, source_bytes: bytes, comments: CommentIndex) -> None:
        """Index every block comment in the tree; line comments are dropped."""
        for node in iter_nodes(root):
            if node.type != "comment":
                continue
            text = node_text(node, source_bytes)
            if not text.startswith("/*"):
                continue
            comments.add(
                CommentBlock(
                    kind=CommentKind.BLOCK,
                    text=text[2:].removesuffix("*/"),
                    start_offset=node.start_byte,
                    end_offset=node.end_byte,
                )
            )

    def _report_syntax_error(self, parsed: ParsedTree, ctx: ExtractionContext, event: str) -> None:
        """Record the first ERROR/MISSING node with its location and source line."""
        error_node = next(
            (n for n in iter_nodes(parsed.root) if n.type == "ERROR" or n.is_missing),
            parsed.root,
        )
        row, column = error_node.start_point
        lines = parsed.lines
        problem_line = lines[row] if row < len(lines) else ""
        ctx.warn(
            event,
            f"Syntax error at line {row + 1 + parsed.line_offset}, column {column}",
            line=row + 1 + parsed.line_offset,
            column=column,
            code=problem_line.strip(),
        )
