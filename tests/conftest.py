"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from envexample.core.models.template import TEMPLATE_HEADER_LINES


@pytest.fixture
def header_lines() -> list[str]:
    """Default header lines, as a list."""
    return list(TEMPLATE_HEADER_LINES)


@pytest.fixture
def env_dir(tmp_path: Path, monkeypatch) -> Path:
    """A temporary working directory with no config file above it."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def write_env(env_dir: Path):
    """Write a file into ``env_dir`` and return its path."""

    def _write(name: str, content: str) -> Path:
        path = env_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
