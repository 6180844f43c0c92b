"""Categorizer: property discovery from @member comments and category grouping."""

import re
from collections.abc import Iterable
from typing import TypeVar

from classdoc.core import UNCATEGORIZED, UNDOCUMENTED, MethodRecord, PropertyRecord
from classdoc.extraction.context import ExtractionContext
from classdoc.extraction.escaping import escape_prose
from classdoc.extraction.tags import parse_tags

_DOC_COMMENT = re.compile(r"/\*\*\s*([\s\S]*?)\s*\*/")

T = TypeVar("T", MethodRecord, PropertyRecord)


def scan_properties(source_code: str, ctx: ExtractionContext) -> list[PropertyRecord]:
    """
    Build a PropertyRecord for every `/** ... */` comment carrying `@member`.

    Properties are comment-only declarations, so this scans the raw text
    and never consults the syntax tree.
    """
    properties: list[PropertyRecord] = []
    for match in _DOC_COMMENT.finditer(source_code):
        entries = parse_tags(match.group(1))
        if entries.member is None:
            continue

        if entries.description:
            description = escape_prose(entries.description)
        elif entries.member.description:
            description = entries.member.description  # Escaped by the tag parser
        elif entries.text:
            description = escape_prose(entries.text)
        else:
            description = UNDOCUMENTED

        for tag in entries.unknown_tags:
            ctx.warn("unknown_tag", f"Unknown tag: @{tag}", tag=tag, owner=entries.member.name)

        properties.append(
            PropertyRecord(
                name=entries.member.name,
                type=entries.member.type,
                description=description,
                category=entries.category or UNCATEGORIZED,
                default=entries.default or None,
            )
        )
    return properties


def group_by_category(records: Iterable[T]) -> dict[str, tuple[T, ...]]:
    """Group records by category, keeping first-seen category order and record order."""
    groups: dict[str, list[T]] = {}
    for record in records:
        groups.setdefault(record.category or UNCATEGORIZED, []).append(record)
    return {category: tuple(items) for category, items in groups.items()}
