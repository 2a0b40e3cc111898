"""
Template models — value types shared by the parser, builder and generator.

Per-line values (``ParsedAssignmentLine``, ``ClassifiedLine``) are frozen
dataclasses created and discarded while a file is processed.  The public
outcome (``GenerationResult``) and the injected configuration
(``GeneratorConfig``) are Pydantic models.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field

# Prepended to every generated template.
TEMPLATE_HEADER_LINES: tuple[str, ...] = (
    "# This file was generated by env-example-gen.",
    "# Copy it to .env and replace each placeholder with a real value.",
)


@dataclass(frozen=True)
class PlaceholderRule:
    """One ``pattern → placeholder`` pair.  Rules are evaluated in order."""

    pattern: re.Pattern[str]
    placeholder: str

    @classmethod
    def from_regex(cls, regex: str, placeholder: str) -> PlaceholderRule:
        """Build a rule from a case-insensitive regular expression."""
        return cls(pattern=re.compile(regex, re.IGNORECASE), placeholder=placeholder)

    def matches(self, key: str) -> bool:
        return self.pattern.search(key) is not None


class LineKind(StrEnum):
    """Classification of one raw source line."""

    BLANK = "blank"
    COMMENT = "comment"
    ASSIGNMENT = "assignment"
    UNPARSEABLE = "unparseable"


@dataclass(frozen=True)
class ParsedAssignmentLine:
    """A ``[export ]KEY=VALUE [# comment]`` line split into its parts.

    Attributes:
        key:              Variable name, trimmed, never empty.
        value:            Trimmed value with the comment removed.  Wrapping
                          quotes are kept as they appeared in the source.
        trailing_comment: Inline comment including its ``#``/``;`` delimiter.
        export_prefix:    Whether the line started with ``export ``.
    """

    key: str
    value: str
    trailing_comment: str | None = None
    export_prefix: bool = False


@dataclass(frozen=True)
class ClassifiedLine:
    """Result of classifying one line.

    ``text`` holds the left-trimmed line for comments and is empty
    otherwise; ``assignment`` is set only for ``LineKind.ASSIGNMENT``.
    """

    kind: LineKind
    text: str = ""
    assignment: ParsedAssignmentLine | None = None


@dataclass
class TemplateStats:
    """Counters accumulated over one build."""

    variable_count: int = 0
    comment_count: int = 0
    blank_line_count: int = 0


@dataclass
class TemplateBuild:
    """Rendered body lines plus the stats collected while rendering them."""

    lines: list[str] = field(default_factory=list)
    stats: TemplateStats = field(default_factory=TemplateStats)


def _default_placeholder_factory() -> Callable[[str], str]:
    from envexample.core.services.placeholders import infer_placeholder

    return infer_placeholder


class GeneratorConfig(BaseModel):
    """Configuration injected into ``EnvTemplateGenerator``.

    Attributes:
        header_lines:        Lines written before the template body.
        placeholder_factory: Maps a variable key to its placeholder.
    """

    model_config = ConfigDict(frozen=True)

    header_lines: tuple[str, ...] = TEMPLATE_HEADER_LINES
    placeholder_factory: Callable[[str], str] = Field(
        default_factory=_default_placeholder_factory,
    )


class GenerationResult(BaseModel):
    """Public outcome of one ``generate`` call."""

    model_config = ConfigDict(frozen=True)

    input_path: Path
    output_path: Path
    variable_count: int = 0
    comment_count: int = 0

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")
