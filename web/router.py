"""Resolve request paths against the finalized catalog."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import NamedTuple
from urllib.parse import unquote

from catalog import Catalog, public_relative_path
from config import CATALOG_ENDPOINT

logger = logging.getLogger(__name__)


class _Target(NamedTuple):
    local_path: Path
    derived: bool  # built from the public path rather than stored on the entry


def decode_request_path(url: str) -> str:
    """Drop the query string from a raw request URL and percent-decode it."""
    return unquote(url.split("?", 1)[0])


class CatalogRouter:
    """Maps public paths to local files for one immutable catalog.

    The lookup index is built once. When several entries publish the same
    path the later entry wins, and within one entry ``src`` wins over
    ``thumb_src``.
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog
        self.asset_root = Path(os.path.abspath(catalog.asset_root))
        self._index: dict[str, _Target] = {}

        for entry in catalog.entries:
            targets = {
                entry.thumb_src: self._target(entry.thumb_src, entry.thumb_src_localpath),
                entry.src: self._target(entry.src, entry.src_localpath),
            }
            for public_path, target in targets.items():
                previous = self._index.get(public_path)
                if previous is not None and previous.local_path != target.local_path:
                    logger.warning(
                        "Public path %s published twice; serving %s instead of %s",
                        public_path, target.local_path, previous.local_path,
                    )
                self._index[public_path] = target

    def _target(self, public_path: str, local_path: str | None) -> _Target:
        if local_path:
            # relative local paths are relative to the working directory
            return _Target(Path(os.path.abspath(local_path)), derived=False)
        return _Target(self.asset_root / public_relative_path(public_path), derived=True)

    @staticmethod
    def is_catalog_request(path: str) -> bool:
        return path.split("?", 1)[0] == CATALOG_ENDPOINT

    def local_path_for(self, path: str) -> Path | None:
        """Return the local file registered for a decoded public path.

        A path derived under the asset root that resolves outside of it
        (through ``..`` or a symlink) is refused. Existence is not checked.
        """
        target = self._index.get(path)
        if target is None:
            return None
        if target.derived:
            resolved = target.local_path.resolve()
            if not resolved.is_relative_to(self.asset_root.resolve()):
                logger.warning("Refusing %s: resolves outside %s", path, self.asset_root)
                return None
        return target.local_path

    def resolve_asset(self, path: str) -> Path | None:
        """Return the existing local file for a decoded path, or None."""
        local_path = self.local_path_for(path)
        if local_path is None:
            logger.info("Not found: %s", path)
            return None
        if not local_path.is_file():
            logger.info("Not found: %s (local path is %s)", path, local_path)
            return None
        return local_path
