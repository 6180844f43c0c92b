"""Record builder: turns declarations plus their comments into documentation records."""

from classdoc.core import (
    UNCATEGORIZED,
    UNDOCUMENTED,
    Access,
    ClassInfo,
    MethodRecord,
    Parameter,
    ReturnInfo,
)
from classdoc.extraction.context import ExtractionContext
from classdoc.extraction.escaping import escape_prose
from classdoc.extraction.tags import TagEntryMap, parse_tags
from classdoc.extraction.tree import ParsedTree
from classdoc.extraction.visitor import ClassDeclaration, MemberDeclaration


def derive_access(name: str, is_static: bool, is_constructor: bool = False) -> Access:
    """Access level by priority: constructor, static, private naming, public."""
    if is_constructor:
        return Access.CONSTRUCTOR
    if is_static:
        return Access.STATIC
    if name.startswith(("_", "#")):
        return Access.PRIVATE
    return Access.PUBLIC


def build_signature(name: str, parameter_names: tuple[str, ...] | list[str]) -> str:
    return f"{name}({', '.join(parameter_names)})"


def dedent_source(lines: list[str], start_row: int, end_row: int) -> str:
    """
    Slice the lines of a declaration and remove the first line's indentation.

    Lines that do not start with that indentation are kept unchanged,
    so relative indentation inside the body survives.
    """
    source_lines = lines[start_row : end_row + 1]
    if not source_lines:
        return ""
    first = source_lines[0]
    base_indent = first[: len(first) - len(first.lstrip())]
    return "\n".join(line.removeprefix(base_indent) for line in source_lines)


class RecordBuilder:
    """
    Assembles ClassInfo and MethodRecord values for one parsed tree.

    Member comments are claimed from the tree's comment index as methods
    are built, so members must be passed in document order.
    """

    def __init__(self, parsed: ParsedTree, source_path: str, ctx: ExtractionContext) -> None:
        self._parsed = parsed
        self._source_path = source_path
        self._ctx = ctx
        self._lines = parsed.lines

    def build_class_info(self, declaration: ClassDeclaration | None) -> ClassInfo:
        """Combine the class node with its nearest preceding comment."""
        if declaration is None:
            self._ctx.warn("class_not_found", "No class declaration or expression in source")
            return ClassInfo(class_name="", extends_name="", source_path=self._source_path)

        comment = self._parsed.comments.nearest_for_class(declaration.start_offset)
        entries = self._parse_comment(comment.text if comment else "", declaration.name)

        description = entries.classdesc or entries.resolved_description
        return ClassInfo(
            class_name=entries.class_name or declaration.name,
            extends_name=entries.extends or declaration.extends_name,
            source_path=self._source_path,
            description=escape_prose(description) if description else UNDOCUMENTED,
        )

    def build_method(self, member: MemberDeclaration, class_info: ClassInfo) -> MethodRecord:
        """Claim the member's comment and build its record."""
        comment = self._parsed.comments.claim_for_member(member.start_offset)
        entries = self._parse_comment(comment.text if comment else "", member.name)

        description = entries.resolved_description
        returns = self._returns(entries)
        if description:
            description = escape_prose(description)
        elif returns is None:
            description = UNDOCUMENTED

        # Comment association can hand the class doc to the first method
        if description == class_info.description:
            description = UNDOCUMENTED

        offset = self._parsed.line_offset
        start_line = max(member.start_row + 1 + offset, 1)
        end_line = max(member.end_row + 1 + offset, start_line)

        return MethodRecord(
            name=member.name,
            signature=build_signature(member.name, member.parameter_names),
            access=derive_access(member.name, member.is_static, member.is_constructor),
            is_async=member.is_async,
            is_static=member.is_static,
            parameters=tuple(
                Parameter(name=p.name, type=p.type, description=p.description)
                for p in entries.params
            ),
            description=description,
            returns=returns,
            throws=entries.throws if entries.throws and entries.throws.strip() else None,
            example=entries.example or None,
            deprecated=entries.deprecated or None,
            since=entries.since or None,
            category=entries.category or UNCATEGORIZED,
            start_line=start_line,
            end_line=end_line,
            source_text=dedent_source(self._lines, member.start_row, member.end_row),
            kind=member.kind,
        )

    def _returns(self, entries: TagEntryMap) -> ReturnInfo | None:
        if entries.returns is None:
            return None
        if not entries.returns.type and not entries.returns.description:
            return None
        return ReturnInfo(type=entries.returns.type, description=entries.returns.description)

    def _parse_comment(self, text: str, owner: str) -> TagEntryMap:
        entries = parse_tags(text)
        for tag in entries.unknown_tags:
            self._ctx.warn("unknown_tag", f"Unknown tag: @{tag}", tag=tag, owner=owner)
        return entries
