"""
Domain models for template generation.

    from envexample.core.models import GeneratorConfig, GenerationResult
"""

from envexample.core.models.template import (
    TEMPLATE_HEADER_LINES,
    ClassifiedLine,
    GenerationResult,
    GeneratorConfig,
    LineKind,
    ParsedAssignmentLine,
    PlaceholderRule,
    TemplateBuild,
    TemplateStats,
)

__all__ = [
    "TEMPLATE_HEADER_LINES",
    "ClassifiedLine",
    "GenerationResult",
    "GeneratorConfig",
    "LineKind",
    "ParsedAssignmentLine",
    "PlaceholderRule",
    "TemplateBuild",
    "TemplateStats",
]
