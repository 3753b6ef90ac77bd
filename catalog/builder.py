"""Build the immutable asset catalog from the raw config entries.

The catalog is built once at startup. One used-id set is shared across the
whole entry list, so ids are unique catalog-wide and suffixes are assigned
in config order (and, inside a scan directive, in sorted file order).
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from config import CATALOG_KEY
from .expander import expand_entry
from .schemas import CatalogDocument, FinalizedEntry, RawEntry, ScanDirective

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Catalog:
    """Finalized entries plus their public JSON projection.

    Attributes:
        entries: Finalized entries in catalog order.
        asset_root: Directory that entries without a local path are served from.
        payload: Serialized ``/config.json`` body, built once.
    """

    entries: tuple[FinalizedEntry, ...]
    asset_root: Path
    payload: bytes

    def __len__(self) -> int:
        return len(self.entries)


def parse_raw_entry(data: dict) -> RawEntry:
    """Parse one config mapping into a ``ScanDirective`` or a ``RawEntry``."""
    if data.get("$scan_dir"):
        return ScanDirective.model_validate(data)
    return RawEntry.model_validate(data)


def build_catalog(raw_entries: list, asset_root: Path) -> Catalog:
    """Expand and finalize every raw entry, in order.

    Args:
        raw_entries: Config mappings, or already-parsed entries
        asset_root: Local directory backing entries without a local path

    Returns:
        The immutable catalog

    Raises:
        ValueError: If an entry is not an object or fails validation
    """
    used_ids: set[str] = set()
    entries: list[FinalizedEntry] = []

    for index, raw in enumerate(raw_entries):
        if isinstance(raw, RawEntry):
            entry = raw
        elif isinstance(raw, dict):
            try:
                entry = parse_raw_entry(raw)
            except ValidationError as exc:
                raise ValueError(f"Invalid entry at index {index}: {exc}") from exc
        else:
            raise ValueError(
                f"Invalid entry at index {index}: expected an object, got {type(raw).__name__}"
            )
        entries.extend(expand_entry(entry, used_ids))

    document = CatalogDocument(entries=entries)
    return Catalog(
        entries=tuple(entries),
        asset_root=Path(asset_root),
        payload=document.to_json().encode("utf-8"),
    )


def load_raw_entries(path: Path) -> list:
    """Read the raw entry list from a JSON config file.

    The file holds either a bare array of entries or an object with a
    ``videoBackgroundImages`` array.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid JSON or has the wrong shape
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        entries = data.get(CATALOG_KEY) or []
        if not isinstance(entries, list):
            raise ValueError(f"{CATALOG_KEY} in {path} must be an array")
        return entries
    raise ValueError(f"{path} must contain an array or an object, got {type(data).__name__}")


def load_catalog(config_path: Path, asset_root: Path) -> Catalog:
    """Read the config file and build the catalog from it."""
    logger.info("Reading config from: %s", config_path)
    catalog = build_catalog(load_raw_entries(config_path), asset_root)
    logger.info("Loaded %d background entries", len(catalog))
    return catalog
