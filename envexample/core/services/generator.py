"""
Template generator — read a .env file, render it, write the .example file.

No transformation logic lives here; the work is done by
``template_builder``.  This module owns path resolution, file I/O and
the translation of I/O failures into ``EnvTemplateError`` kinds.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from envexample.core.errors import EnvTemplateError, ErrorKind
from envexample.core.models.template import GenerationResult, GeneratorConfig, TemplateBuild
from envexample.core.services.template_builder import build_template, compose_document

logger = logging.getLogger(__name__)

EXAMPLE_SUFFIX = ".example"


def absolute_path(path: str | Path) -> Path:
    """Absolute, normalized path.  Symlinks are left in place."""
    return Path(os.path.abspath(path))


def suggested_output_path(input_path: str | Path) -> Path:
    """``<dir>/<name>.example`` for ``<dir>/<name>``, unchanged if already ``.example``."""
    resolved = absolute_path(input_path)
    if resolved.name.endswith(EXAMPLE_SUFFIX):
        return resolved
    return resolved.with_name(resolved.name + EXAMPLE_SUFFIX)


class EnvTemplateGenerator:
    """Generate .env.example templates.

    Args:
        config: Header lines and placeholder function.  Defaults to the
            built-in header and ``infer_placeholder``.
    """

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self.config = config or GeneratorConfig()

    def suggested_output_path(self, input_path: str | Path) -> Path:
        return suggested_output_path(input_path)

    def build(self, text: str) -> TemplateBuild:
        """Render the body of a template from raw .env text."""
        return build_template(text, self.config.placeholder_factory)

    def render(self, text: str) -> str:
        """Render a complete template document from raw .env text."""
        return compose_document(self.config.header_lines, self.build(text).lines)

    def generate(
        self,
        input_path: str | Path,
        output_path: str | Path | None = None,
    ) -> GenerationResult:
        """Generate a template for ``input_path`` and write it to disk.

        Args:
            input_path:  Source .env file.
            output_path: Destination; defaults to ``suggested_output_path``.

        Returns:
            GenerationResult with resolved paths and counts.

        Raises:
            EnvTemplateError: INPUT_NOT_FOUND, INPUT_READ_FAILED or
                OUTPUT_WRITE_FAILED.
        """
        resolved_input = absolute_path(input_path)
        resolved_output = absolute_path(
            output_path if output_path is not None else suggested_output_path(resolved_input)
        )

        text = read_env_text(resolved_input)
        build = self.build(text)
        document = compose_document(self.config.header_lines, build.lines)

        _write_text(resolved_output, document)

        logger.info("Wrote %s (%d variables)", resolved_output, build.stats.variable_count)
        logger.debug(
            "Stats for %s: variables=%d comments=%d blanks=%d",
            resolved_input.name,
            build.stats.variable_count,
            build.stats.comment_count,
            build.stats.blank_line_count,
        )

        return GenerationResult(
            input_path=resolved_input,
            output_path=resolved_output,
            variable_count=build.stats.variable_count,
            comment_count=build.stats.comment_count,
        )


def read_env_text(path: Path) -> str:
    """Read a .env file as UTF-8 (a leading BOM is dropped).

    Failures are translated to ``EnvTemplateError``.
    """
    logger.info("Reading %s", path)
    try:
        with path.open("r", encoding="utf-8-sig", newline="") as fh:
            return fh.read()
    except FileNotFoundError as e:
        raise EnvTemplateError(
            ErrorKind.INPUT_NOT_FOUND, f"Input file not found: {path}"
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise EnvTemplateError(
            ErrorKind.INPUT_READ_FAILED, f"Unable to read {path}: {e}"
        ) from e


def _write_text(path: Path, content: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(content)
    except OSError as e:
        raise EnvTemplateError(
            ErrorKind.OUTPUT_WRITE_FAILED, f"Unable to write template to {path}: {e}"
        ) from e
