"""JSDoc tag grammar: turns one comment's text into typed entries."""

import re
from collections.abc import Callable
from dataclasses import dataclass, field, replace

from classdoc.extraction.escaping import escape_markup

_TAG_LINE = re.compile(r"^@(\w+)")
_LEADING_ASTERISK = re.compile(r"^\*\s?")


@dataclass(frozen=True, slots=True)
class ParamEntry:
    name: str
    type: str
    description: str


@dataclass(frozen=True, slots=True)
class ReturnEntry:
    type: str
    description: str | None


@dataclass(frozen=True, slots=True)
class MemberEntry:
    name: str
    type: str
    description: str


@dataclass(frozen=True, slots=True)
class TypeEntry:
    name: str
    type: str


@dataclass(frozen=True, slots=True)
class TagEntryMap:
    """
    Parsed result of one comment.

    `text` is the untagged free-text description; `description` holds
    an explicit `@description` tag. Parameter, return, throws, member
    and type fields are already markup-escaped.
    """

    text: str = ""
    params: tuple[ParamEntry, ...] = ()
    returns: ReturnEntry | None = None
    throws: str | None = None
    example: str | None = None
    deprecated: str | None = None
    since: str | None = None
    class_name: str | None = None
    extends: str | None = None
    description: str | None = None
    classdesc: str | None = None
    category: str | None = None
    default: str | None = None
    member: MemberEntry | None = None
    type: TypeEntry | None = None
    unknown_tags: tuple[str, ...] = field(default=())

    @property
    def resolved_description(self) -> str:
        """The `@description` tag if present, else the untagged text."""
        return self.description or self.text


def split_type(content: str) -> tuple[str, str]:
    """
    Split a leading `{type}` expression from the rest of a tag's content.

    Braces are matched so types such as `{Array<{a: string}> | null}`
    stay whole. Content without a leading brace has an empty type.
    """
    content = content.strip()
    if not content.startswith("{"):
        return "", content
    depth = 0
    for index, char in enumerate(content):
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return content[1:index].strip(), content[index + 1 :].strip()
    # Unterminated brace: treat the first token as the type
    first, _, rest = content.partition(" ")
    return first.strip("{}").strip(), rest.strip()


def _named_field(content: str) -> tuple[str, str | None, str]:
    """Parse `{type} name description` into its three parts."""
    type_text, rest = split_type(content)
    tokens = rest.split()
    if not tokens:
        return type_text, None, ""
    return type_text, tokens[0], " ".join(tokens[1:])


def _strip_dash(description: str) -> str:
    return description.removeprefix("- ").strip()


# ============== Tag handlers ==============


def _param(entries: TagEntryMap, content: str) -> TagEntryMap:
    type_text, name, description = _named_field(content)
    name = (name or "").lstrip("-").strip()
    param = ParamEntry(
        name=name or "unnamed",
        type=escape_markup(type_text),
        description=escape_markup(_strip_dash(description)),
    )
    return replace(entries, params=(*entries.params, param))


def _returns(entries: TagEntryMap, content: str) -> TagEntryMap:
    type_text, rest = split_type(content)
    description = " ".join(rest.split())
    if not type_text and not description:
        return entries
    return replace(
        entries,
        returns=ReturnEntry(
            type=escape_markup(type_text),
            description=escape_markup(description) or None,
        ),
    )


def _throws(entries: TagEntryMap, content: str) -> TagEntryMap:
    return replace(entries, throws=escape_markup(content.strip()))


def _member(entries: TagEntryMap, content: str) -> TagEntryMap:
    type_text, name, description = _named_field(content)
    if not name:
        name = entries.type.name if entries.type else "unnamed"
    return replace(
        entries,
        member=MemberEntry(
            name=name,
            type=escape_markup(type_text),
            description=escape_markup(_strip_dash(description)),
        ),
    )


def _type(entries: TagEntryMap, content: str) -> TagEntryMap:
    type_text, name, _ = _named_field(content)
    return replace(
        entries,
        type=TypeEntry(name=name or "unnamed", type=escape_markup(type_text)),
    )


def _verbatim(field_name: str) -> Callable[[TagEntryMap, str], TagEntryMap]:
    def handler(entries: TagEntryMap, content: str) -> TagEntryMap:
        return replace(entries, **{field_name: content.strip()})

    return handler


TAG_HANDLERS: dict[str, Callable[[TagEntryMap, str], TagEntryMap]] = {
    "param": _param,
    "returns": _returns,
    "return": _returns,
    "throws": _throws,
    "member": _member,
    "type": _type,
    "example": _verbatim("example"),
    "deprecated": _verbatim("deprecated"),
    "since": _verbatim("since"),
    "class": _verbatim("class_name"),
    "extends": _verbatim("extends"),
    "description": _verbatim("description"),
    "classdesc": _verbatim("classdesc"),
    "category": _verbatim("category"),
    "default": _verbatim("default"),
}


def parse_tags(comment: str) -> TagEntryMap:
    """
    Parse a JSDoc comment body into a TagEntryMap.

    Lines before the first tag form the free-text description. Each
    `@tag` line starts a new tag whose content continues until the next
    tag. Unknown tags are recorded in `unknown_tags` and otherwise ignored.
    """
    entries = TagEntryMap()
    free_text: list[str] = []
    current_tag: str | None = None
    current_content: list[str] = []

    def finish(entries: TagEntryMap) -> TagEntryMap:
        if current_tag is None:
            return entries
        handler = TAG_HANDLERS.get(current_tag)
        if handler is None:
            return replace(entries, unknown_tags=(*entries.unknown_tags, current_tag))
        return handler(entries, "\n".join(current_content))

    for raw_line in comment.split("\n"):
        line = _LEADING_ASTERISK.sub("", raw_line.strip())
        tag_match = _TAG_LINE.match(line)
        if tag_match:
            entries = finish(entries)
            current_tag = tag_match.group(1)
            current_content = [line[tag_match.end() :].strip()]
        elif current_tag is not None:
            current_content.append(line)
        elif line:
            free_text.append(line)

    entries = finish(entries)
    return replace(entries, text="\n".join(free_text))
