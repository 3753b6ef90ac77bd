"""Pydantic models for raw config entries and the finalized catalog.

Raw entries come in two variants:

- ``RawEntry``: one asset, finalized as-is.
- ``ScanDirective``: expands into one entry per image found under ``$scan_dir``.

Keys prefixed with ``$`` are internal. They are read from the config file
through aliases and never serialized into the public catalog document.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from config import CATALOG_KEY


class RawEntry(BaseModel):
    """A single config entry before normalization.

    Unrecognized keys are kept as extras so scan expansion can copy them
    onto generated entries; they never reach the public payload.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str | None = None
    name: str | None = None
    src: str | None = None
    thumb_src: str | None = None
    filetype: str | None = None
    src_localpath: str | None = Field(default=None, alias="$src_localpath")
    thumb_src_localpath: str | None = Field(default=None, alias="$thumb_src_localpath")

    @field_validator(
        "id", "name", "src", "thumb_src", "filetype",
        "src_localpath", "thumb_src_localpath",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, v: object) -> str | None:
        # JSON numbers are accepted as identifiers; blanks mean "absent"
        if v is None or isinstance(v, (dict, list)):
            return v
        text = str(v)
        return text if text.strip() else None


class ScanDirective(RawEntry):
    """A config entry that expands into one entry per scanned image."""

    scan_dir: str = Field(alias="$scan_dir", min_length=1)
    recurse: bool = Field(default=False, alias="$recurse")
    use_relative_path: bool = Field(
        default=False, alias="$use_relative_path_as_filename_and_id"
    )

    @field_validator("scan_dir", mode="before")
    @classmethod
    def _scan_dir_text(cls, v: object) -> object:
        # a scalar that names no directory is reported at scan time
        if isinstance(v, (int, float)):
            return str(v)
        return v

    @field_validator("recurse", "use_relative_path", mode="before")
    @classmethod
    def _truthy(cls, v: object) -> bool:
        return bool(v)


class FinalizedEntry(BaseModel):
    """A normalized, public-facing catalog entry.

    Attributes:
        id: Catalog-wide unique identifier (``[A-Za-z0-9_]+``).
        name: Display name.
        src: Public URL path of the image.
        thumb_src: Public URL path of the thumbnail.
        filetype: Lowercase extension without the leading dot.
        src_localpath: Local file backing ``src`` (never serialized).
        thumb_src_localpath: Local file backing ``thumb_src`` (never serialized).
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, pattern=r"^[A-Za-z0-9_]+$")
    name: str = Field(min_length=1)
    src: str
    thumb_src: str
    filetype: str
    src_localpath: str | None = Field(default=None, exclude=True)
    thumb_src_localpath: str | None = Field(default=None, exclude=True)


class CatalogDocument(BaseModel):
    """Wire format of ``GET /config.json``."""

    entries: list[FinalizedEntry] = Field(default_factory=list, alias=CATALOG_KEY)

    model_config = ConfigDict(populate_by_name=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
