"""
Tests for env file discovery.
"""

import os
from pathlib import Path

import pytest

from envexample.core.services.discovery import discover_env_files, is_env_file_name
from envexample.core.services.generator import EnvTemplateGenerator
from envexample.core.use_cases.generate import generate_directory


class TestIsEnvFileName:
    def test_matches(self):
        for name in (".env", ".env.local", ".env.production", ".env.test.local"):
            assert is_env_file_name(name), name

    def test_rejects(self):
        for name in (
            ".env.example",
            ".env.local.example",
            ".env.example.bak",
            "env",
            ".envrc",
            "app.env",
            ".env.",
        ):
            assert not is_env_file_name(name), name


class TestDiscoverEnvFiles:
    def test_sorted_absolute_paths(self, write_env, env_dir: Path):
        write_env(".env.production", "A=1")
        write_env(".env", "A=1")
        write_env(".env.local", "A=1")
        write_env(".env.example", "A=<VALUE>")
        write_env("README.md", "docs")

        found = discover_env_files(env_dir)

        assert [p.name for p in found] == [".env", ".env.local", ".env.production"]
        assert all(p.is_absolute() for p in found)

    def test_ignores_directories(self, env_dir: Path):
        (env_dir / ".env.d").mkdir()
        assert discover_env_files(env_dir) == []

    def test_defaults_to_cwd(self, write_env, env_dir: Path):
        write_env(".env", "A=1")
        assert discover_env_files() == [env_dir.resolve() / ".env"]

    def test_missing_directory(self, tmp_path: Path):
        assert discover_env_files(tmp_path / "nope") == []


@pytest.mark.skipif(not hasattr(os, "symlink") or os.name == "nt", reason="needs POSIX symlinks")
class TestDiscoverSymlinks:
    def test_symlinked_file_is_included(self, tmp_path: Path, env_dir: Path):
        shared = tmp_path / "shared.env"
        shared.write_text("A=1\n")
        (env_dir / ".env.shared").symlink_to(shared)

        assert discover_env_files(env_dir) == [env_dir.resolve() / ".env.shared"]

    def test_template_written_next_to_link(self, tmp_path: Path, env_dir: Path):
        shared = tmp_path / "shared.env"
        shared.write_text("DB_HOST=db\n")
        (env_dir / ".env.shared").symlink_to(shared)

        report = generate_directory(EnvTemplateGenerator(), env_dir)

        assert report.ok
        assert (env_dir / ".env.shared.example").is_file()
        assert not (tmp_path / "shared.env.example").exists()

    def test_dangling_link_is_skipped(self, tmp_path: Path, env_dir: Path):
        (env_dir / ".env.gone").symlink_to(tmp_path / "missing.env")
        assert discover_env_files(env_dir) == []
