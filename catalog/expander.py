"""Expand scan directives into one finalized entry per scanned image."""

from __future__ import annotations

import logging
import os
import posixpath
from pathlib import Path

from config import PUBLIC_PREFIX
from .finalizer import finalize_entry
from .paths import strip_extension
from .scanner import collect_image_files
from .schemas import FinalizedEntry, RawEntry, ScanDirective

logger = logging.getLogger(__name__)


def _template_fields(directive: ScanDirective) -> dict:
    """Copy every non-directive key of ``directive`` as config-style keys."""
    return directive.model_dump(
        by_alias=True,
        exclude_none=True,
        exclude={"scan_dir", "recurse", "use_relative_path"},
    )


def generate_entries_from_scan(
    directive: ScanDirective,
    used_ids: set[str],
) -> list[FinalizedEntry]:
    """Scan ``directive.scan_dir`` and finalize one entry per image found.

    A missing scan directory, or one that is not a directory, is logged and
    contributes no entries.
    """
    scan_dir = Path(os.path.abspath(directive.scan_dir))
    if not scan_dir.exists():
        logger.warning("scan_dir missing: %s", scan_dir)
        return []
    if not scan_dir.is_dir():
        logger.warning("scan_dir is not a directory: %s", scan_dir)
        return []

    files = collect_image_files(scan_dir, recursive=directive.recurse)
    logger.debug("Found %d images under %s", len(files), scan_dir)

    shared = _template_fields(directive)
    generated = []
    for file_path in files:
        relative_path = file_path.relative_to(scan_dir).as_posix()
        if directive.use_relative_path:
            base_name = strip_extension(relative_path)
            preferred_path = relative_path
        else:
            base_name = file_path.stem
            preferred_path = file_path.name

        template = RawEntry.model_validate({
            **shared,
            "id": base_name,
            "name": base_name,
            "filetype": shared.get("filetype") or file_path.suffix.lstrip(".").lower(),
            "$src_localpath": str(file_path),
            "$thumb_src_localpath": str(file_path),
            "src": posixpath.join(PUBLIC_PREFIX, preferred_path),
            "thumb_src": posixpath.join(PUBLIC_PREFIX, preferred_path),
        })
        generated.append(finalize_entry(template, used_ids))
    return generated


def expand_entry(entry: RawEntry, used_ids: set[str]) -> list[FinalizedEntry]:
    """Finalize a raw entry, expanding it first if it is a scan directive."""
    if isinstance(entry, ScanDirective):
        return generate_entries_from_scan(entry, used_ids)
    return [finalize_entry(entry, used_ids)]
