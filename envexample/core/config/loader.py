"""
Configuration loader — reads .envexample.yml into template settings.

The file is optional.  When present it can replace the header, change
the fallback placeholder and add rules that take priority over the
built-in ones:

    header:
      - "# Example configuration for my-app"
    default_placeholder: "<CHANGE_ME>"
    rules:
      - pattern: "REGION"
        placeholder: "<AWS_REGION>"
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from envexample.core.models.template import (
    TEMPLATE_HEADER_LINES,
    GeneratorConfig,
    PlaceholderRule,
)
from envexample.core.services.placeholders import DEFAULT_PLACEHOLDER, make_placeholder_factory

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = ".envexample.yml"


class ConfigError(Exception):
    """Raised when the configuration file is invalid or unreadable."""


class RuleSpec(BaseModel):
    """A user-defined placeholder rule."""

    pattern: str
    placeholder: str

    @field_validator("pattern")
    @classmethod
    def check_regex(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid regular expression {value!r}: {e}") from e
        return value


class TemplateSettings(BaseModel):
    """Contents of .envexample.yml."""

    header: list[str] | None = None
    default_placeholder: str = DEFAULT_PLACEHOLDER
    rules: list[RuleSpec] = Field(default_factory=list)

    def to_generator_config(self) -> GeneratorConfig:
        extra = [PlaceholderRule.from_regex(r.pattern, r.placeholder) for r in self.rules]
        header = tuple(self.header) if self.header is not None else TEMPLATE_HEADER_LINES
        return GeneratorConfig(
            header_lines=header,
            placeholder_factory=make_placeholder_factory(extra, self.default_placeholder),
        )


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for .envexample.yml from ``start_dir`` (default: cwd) upward."""
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_settings(path: Path | None = None) -> TemplateSettings:
    """Load template settings.

    Args:
        path: Explicit config file.  If None, searches upward and falls
            back to defaults when nothing is found.

    Raises:
        ConfigError: If the file is missing (explicit path only) or invalid.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            return TemplateSettings()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading template settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return TemplateSettings()
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        settings = TemplateSettings.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.info("Loaded %s with %d custom rule(s)", path, len(settings.rules))
    return settings
