"""
Line classifier for .env files.

Handles:
- Blank lines
- ``#`` and ``;`` comment lines
- KEY=value, KEY="value", KEY='value'
- ``export KEY=value``
- Inline comments after an unquoted ``#`` or ``;``

There is no escape handling inside quotes and no multi-line values.
"""

from __future__ import annotations

import re

from envexample.core.models.template import ClassifiedLine, LineKind, ParsedAssignmentLine

_LINE_BREAK = re.compile(r"\r?\n")
_COMMENT_CHARS = ("#", ";")
_QUOTE_CHARS = ('"', "'")
_EXPORT_PREFIX = "export "


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` or ``\\r\\n``, keeping a trailing empty segment."""
    return _LINE_BREAK.split(text)


def split_value_and_comment(segment: str) -> tuple[str, str | None]:
    """Split the text after ``=`` into ``(value, trailing_comment)``.

    A quote opens only when no other quote is open and closes only on the
    same character.  An unterminated quote keeps comment detection off
    for the rest of the line.
    """
    open_quote: str | None = None

    for index, char in enumerate(segment):
        if char in _QUOTE_CHARS:
            if open_quote == char:
                open_quote = None
            elif open_quote is None:
                open_quote = char

        if open_quote is None and char in _COMMENT_CHARS:
            comment = segment[index:].strip()
            return segment[:index].strip(), comment or None

    return segment.strip(), None


def parse_assignment(line: str) -> ParsedAssignmentLine | None:
    """Parse a ``[export ]KEY=VALUE`` line, or return None if it has no key."""
    trimmed = line.strip()
    if "=" not in trimmed:
        return None

    export_prefix = trimmed.startswith(_EXPORT_PREFIX)
    if export_prefix:
        trimmed = trimmed[len(_EXPORT_PREFIX):].lstrip()

    key, sep, rest = trimmed.partition("=")
    key = key.strip()
    if not sep or not key:
        return None

    value, comment = split_value_and_comment(rest)
    return ParsedAssignmentLine(
        key=key,
        value=value,
        trailing_comment=comment,
        export_prefix=export_prefix,
    )


def classify_line(line: str) -> ClassifiedLine:
    """Classify one raw line as blank, comment, assignment or unparseable."""
    if not line.strip():
        return ClassifiedLine(kind=LineKind.BLANK)

    left_trimmed = line.lstrip()
    if left_trimmed.startswith(_COMMENT_CHARS):
        return ClassifiedLine(kind=LineKind.COMMENT, text=left_trimmed)

    assignment = parse_assignment(line)
    if assignment is None:
        return ClassifiedLine(kind=LineKind.UNPARSEABLE)
    return ClassifiedLine(kind=LineKind.ASSIGNMENT, assignment=assignment)
