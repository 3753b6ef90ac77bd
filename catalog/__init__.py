"""Background image catalog: config normalization and directory scanning."""

from .paths import (
    strip_extension,
    sanitize_id,
    sanitize_name,
    normalize_serving_path,
    ensure_background_image_path,
    public_relative_path,
)
from .scanner import collect_image_files, is_image_file
from .schemas import RawEntry, ScanDirective, FinalizedEntry, CatalogDocument
from .finalizer import ensure_unique_id, finalize_entry, infer_extension
from .expander import expand_entry, generate_entries_from_scan
from .builder import (
    Catalog,
    build_catalog,
    load_catalog,
    load_raw_entries,
    parse_raw_entry,
)

__all__ = [
    # Paths
    "strip_extension",
    "sanitize_id",
    "sanitize_name",
    "normalize_serving_path",
    "ensure_background_image_path",
    "public_relative_path",
    # Scanner
    "collect_image_files",
    "is_image_file",
    # Schemas
    "RawEntry",
    "ScanDirective",
    "FinalizedEntry",
    "CatalogDocument",
    # Finalizer
    "ensure_unique_id",
    "finalize_entry",
    "infer_extension",
    # Expander
    "expand_entry",
    "generate_entries_from_scan",
    # Builder
    "Catalog",
    "build_catalog",
    "load_catalog",
    "load_raw_entries",
    "parse_raw_entry",
]
