"""
Template builder — render a .env body with placeholders in place of values.

Comments and blank lines pass through in order, assignments are rewritten
as ``[export ]KEY=[quote]PLACEHOLDER[quote][ comment]`` and lines that are
neither are dropped.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from envexample.core.models.template import (
    LineKind,
    ParsedAssignmentLine,
    TemplateBuild,
)
from envexample.core.services.env_parser import classify_line, split_lines

logger = logging.getLogger(__name__)


def wrap_placeholder(value: str, placeholder: str) -> str:
    """Re-apply the value's quotes to the placeholder if it was fully quoted."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return f"{value[0]}{placeholder}{value[0]}"
    return placeholder


def render_assignment(
    assignment: ParsedAssignmentLine,
    placeholder_factory: Callable[[str], str],
) -> str:
    placeholder = wrap_placeholder(assignment.value, placeholder_factory(assignment.key))
    prefix = "export " if assignment.export_prefix else ""
    suffix = f" {assignment.trailing_comment}" if assignment.trailing_comment else ""
    return f"{prefix}{assignment.key}={placeholder}{suffix}"


def build_template(
    text: str,
    placeholder_factory: Callable[[str], str],
) -> TemplateBuild:
    """Transform every line of ``text`` and collect stats.

    Trailing blank lines are removed from the result; interior ones are
    kept.  ``blank_line_count`` still counts the removed ones.
    """
    build = TemplateBuild()
    stats = build.stats

    for raw_line in split_lines(text):
        classified = classify_line(raw_line)

        if classified.kind == LineKind.BLANK:
            stats.blank_line_count += 1
            build.lines.append("")
        elif classified.kind == LineKind.COMMENT:
            stats.comment_count += 1
            build.lines.append(classified.text)
        elif classified.assignment is not None:
            stats.variable_count += 1
            build.lines.append(render_assignment(classified.assignment, placeholder_factory))
        else:
            logger.debug("Skipping unparseable line: %.40s", raw_line.strip())

    while build.lines and build.lines[-1] == "":
        build.lines.pop()

    return build


def compose_document(header_lines: Sequence[str], body_lines: Sequence[str]) -> str:
    """Join header, one blank separator and body; end with a single newline."""
    lines = list(header_lines)

    if body_lines:
        if not lines or lines[-1] != "":
            lines.append("")
        lines.extend(body_lines)

    return "\n".join(lines) + "\n"
