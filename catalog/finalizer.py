"""Turn one raw entry into a finalized catalog entry."""

from __future__ import annotations

import os

from config import DEFAULT_FILETYPE, FALLBACK_ID
from .paths import (
    ensure_background_image_path,
    sanitize_id,
    sanitize_name,
    strip_extension,
)
from .schemas import FinalizedEntry, RawEntry


def infer_extension(path: str | None) -> str:
    """Return the lowercased extension of ``path`` without its dot."""
    if not path:
        return ""
    return os.path.splitext(path)[1].lstrip(".").lower()


def ensure_unique_id(raw_id: str | None, used_ids: set[str], fallback: str | None = None) -> str:
    """Pick an unused identifier and register it in ``used_ids``.

    The base is the sanitized ``raw_id``, else the sanitized ``fallback``,
    else ``FALLBACK_ID``. Collisions get ``_1``, ``_2``, ... appended in the
    order they are encountered.
    """
    base = (
        sanitize_id(strip_extension(raw_id))
        or sanitize_id(strip_extension(fallback))
        or FALLBACK_ID
    )
    candidate = base
    counter = 1
    while candidate in used_ids:
        candidate = f"{base}_{counter}"
        counter += 1
    used_ids.add(candidate)
    return candidate


def finalize_entry(entry: RawEntry, used_ids: set[str]) -> FinalizedEntry:
    """Normalize one entry against the catalog-wide set of used ids.

    Args:
        entry: Raw or scan-generated entry
        used_ids: Ids already assigned in this catalog; updated in place

    Returns:
        The finalized entry
    """
    inferred_ext = infer_extension(entry.src_localpath or entry.src)

    fallback_name = entry.name or os.path.basename(entry.src or entry.src_localpath or "")
    entry_id = ensure_unique_id(entry.id, used_ids, fallback_name)

    name = sanitize_name(strip_extension(entry.name) or entry_id) or entry_id

    if entry.src:
        src = ensure_background_image_path(entry.src)
    else:
        suffix = f".{inferred_ext}" if inferred_ext else ""
        src = ensure_background_image_path(f"/{entry_id}{suffix}")

    thumb_src = ensure_background_image_path(entry.thumb_src or src)

    filetype = (entry.filetype or "").strip().lstrip(".").lower()

    return FinalizedEntry(
        id=entry_id,
        name=name,
        src=src,
        thumb_src=thumb_src,
        filetype=filetype or inferred_ext or DEFAULT_FILETYPE,
        src_localpath=entry.src_localpath,
        thumb_src_localpath=entry.thumb_src_localpath,
    )
