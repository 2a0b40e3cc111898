"""
Generate use cases — single-file and batch template generation.

The batch run keeps going after a failed file; every outcome is
attributed to its input path and the report decides the exit status.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from envexample.core.errors import EnvTemplateError, ErrorKind
from envexample.core.models.template import GenerationResult
from envexample.core.services.discovery import discover_env_files
from envexample.core.services.generator import EnvTemplateGenerator

logger = logging.getLogger(__name__)


@dataclass
class FileOutcome:
    """Success or failure of one file in a run."""

    input_path: Path
    output_path: Path | None = None
    result: GenerationResult | None = None
    error_kind: ErrorKind | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.result is not None

    def to_dict(self) -> dict:
        data: dict = {
            "input_path": str(self.input_path),
            "output_path": str(self.output_path) if self.output_path else None,
            "ok": self.ok,
        }
        if self.result:
            data["variable_count"] = self.result.variable_count
            data["comment_count"] = self.result.comment_count
        if self.error_kind:
            data["error_kind"] = str(self.error_kind)
            data["error"] = self.error
        return data


@dataclass
class BatchReport:
    """Aggregate of every file processed in one invocation."""

    outcomes: list[FileOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return sum(1 for o in self.outcomes if o.ok)

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if not o.ok)

    @property
    def ok(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "succeeded": self.succeeded,
            "failed": self.failed,
            "files": [o.to_dict() for o in self.outcomes],
        }


def generate_one(
    generator: EnvTemplateGenerator,
    input_path: Path,
    output_path: Path | None = None,
) -> FileOutcome:
    """Run one generation, capturing a typed failure instead of raising it."""
    target = output_path or generator.suggested_output_path(input_path)
    try:
        result = generator.generate(input_path, target)
    except EnvTemplateError as e:
        logger.info("Failed %s: %s", input_path, e.message)
        return FileOutcome(
            input_path=input_path,
            output_path=target,
            error_kind=e.kind,
            error=e.message,
        )
    return FileOutcome(input_path=result.input_path, output_path=result.output_path, result=result)


def generate_batch(
    generator: EnvTemplateGenerator,
    input_paths: list[Path],
) -> BatchReport:
    """Generate a template next to each input, in order."""
    report = BatchReport()
    for input_path in input_paths:
        report.outcomes.append(generate_one(generator, input_path))
    return report


def generate_directory(
    generator: EnvTemplateGenerator,
    directory: Path | None = None,
) -> BatchReport:
    """Discover env files in ``directory`` and generate a template for each.

    Raises:
        EnvTemplateError: NO_ENV_FILES when discovery finds nothing.
    """
    root = (directory or Path.cwd()).resolve()
    env_files = discover_env_files(root)
    if not env_files:
        raise EnvTemplateError(
            ErrorKind.NO_ENV_FILES, f"No .env files were found in {root}."
        )
    return generate_batch(generator, env_files)
