"""Directory scanning for image files referenced by scan directives."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from config import IMAGE_EXTENSIONS

logger = logging.getLogger(__name__)


def is_image_file(path: Path) -> bool:
    """Check if a path is a supported image file (symlinks excluded)."""
    return path.suffix.lower() in IMAGE_EXTENSIONS and path.is_file() and not path.is_symlink()


def collect_image_files(directory: Path, recursive: bool = False) -> list[Path]:
    """Collect image files below a directory.

    The walk uses an explicit stack, so deep trees do not grow the call
    stack. Symlinks are skipped: linked directories are never descended
    and linked files are not collected. A directory that cannot be listed
    is logged and skipped; the rest of the walk continues.

    Args:
        directory: Directory to scan
        recursive: Whether to descend into subdirectories

    Returns:
        Image file paths sorted by their full path string
    """
    results: list[Path] = []
    stack = [Path(directory)]

    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as it:
                entries = list(it)
        except OSError as exc:
            logger.warning("Unable to read directory %s: %s", current, exc)
            continue

        for entry in entries:
            full_path = current / entry.name
            try:
                if entry.is_dir(follow_symlinks=False):
                    if recursive:
                        stack.append(full_path)
                elif is_image_file(full_path):
                    results.append(full_path)
            except OSError as exc:
                logger.warning("Unable to inspect %s: %s", full_path, exc)

    return sorted(results, key=str)
