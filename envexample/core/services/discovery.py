"""
Env file discovery — find the .env files a batch run should process.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

# .env, .env.local, .env.production, ...
ENV_FILE_PATTERN = re.compile(r"^\.env(\..+)?$")


def is_env_file_name(name: str) -> bool:
    """True for dotenv names that are not already templates."""
    return bool(ENV_FILE_PATTERN.match(name)) and ".example" not in name


def discover_env_files(directory: str | Path | None = None) -> list[Path]:
    """List env files directly inside ``directory`` (default: cwd).

    Returns:
        Sorted absolute paths.  Empty if the directory does not exist.
    """
    root = Path(directory or Path.cwd()).resolve()
    if not root.is_dir():
        logger.warning("Not a directory: %s", root)
        return []

    names = sorted(
        entry.name
        for entry in root.iterdir()
        if entry.is_file() and is_env_file_name(entry.name)
    )
    logger.info("Discovered %d env file(s) in %s", len(names), root)
    return [root / name for name in names]
