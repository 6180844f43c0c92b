"""Markup escaping for text pulled out of comments and source."""

import re

_FENCED_CODE = re.compile(r"```([\s\S]*?)```")

_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def escape_markup(value: object) -> str:
    """Escape `&`, `<`, `>` and quotes. None becomes an empty string."""
    if value is None:
        return ""
    text = str(value)
    for raw, escaped in _ESCAPES:
        text = text.replace(raw, escaped)
    return text


def escape_prose(value: object) -> str:
    """
    Escape a description that is rendered as formatted prose.

    Tabs are kept as character references and fenced code blocks
    (```code```) become inline <code> elements.
    """
    text = escape_markup(value).replace("\t", "&#9;")
    return _FENCED_CODE.sub(lambda match: f"<code>{match.group(1)}</code>", text)
