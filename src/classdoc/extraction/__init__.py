"""Documentation extraction engine built on tree-sitter."""

from classdoc.extraction.comments import CommentIndex
from classdoc.extraction.extractor import ClassDocExtractor, extract
from classdoc.extraction.tags import TagEntryMap, parse_tags

__all__ = [
    "ClassDocExtractor",
    "CommentIndex",
    "TagEntryMap",
    "extract",
    "parse_tags",
]
