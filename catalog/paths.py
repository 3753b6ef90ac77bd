"""String helpers for identifiers, display names and public URL paths.

Everything here is pure: no filesystem access, no logging.
"""

from __future__ import annotations

import posixpath
import re

from config import PUBLIC_PREFIX

_NON_ID_CHARS = re.compile(r"[^A-Za-z0-9_]+")
_UNDERSCORE_RUNS = re.compile(r"_+")
_PATH_SEPARATORS = re.compile(r"[\\/]+")
_NON_NAME_CHARS = re.compile(r"[^A-Za-z0-9_\-\s]+")
_WHITESPACE_RUNS = re.compile(r"\s+")


def _as_text(value: object) -> str:
    if value is None:
        return ""
    return str(value)


def strip_extension(value: object) -> str:
    """Remove a trailing ``.ext`` from the last path component.

    A dot inside a directory name is not an extension::

        >>> strip_extension("a.b/c.txt")
        'a.b/c'
        >>> strip_extension("a.b/c")
        'a.b/c'
    """
    text = _as_text(value)
    last_slash = max(text.rfind("/"), text.rfind("\\"))
    last_dot = text.rfind(".")
    if last_dot == -1 or last_dot < last_slash:
        return text
    return text[:last_dot]


def sanitize_id(value: object) -> str:
    """Reduce a value to ``[A-Za-z0-9_]`` with single, inner underscores."""
    text = _NON_ID_CHARS.sub("_", _as_text(value))
    text = _UNDERSCORE_RUNS.sub("_", text)
    return text.strip("_")


def sanitize_name(value: object) -> str:
    """Turn a value into a display name without path separators."""
    text = _PATH_SEPARATORS.sub(" - ", _as_text(value))
    text = _NON_NAME_CHARS.sub(" ", text)
    text = _WHITESPACE_RUNS.sub(" ", text)
    return text.strip()


def normalize_serving_path(value: object) -> str:
    """Normalize a URL path: forward slashes, one leading slash, no ``//``.

    ``.`` and ``..`` segments are resolved against the URL root, so the
    result never climbs above ``/``. A trailing slash is kept.
    """
    text = _as_text(value).strip()
    if not text:
        return ""
    text = text.replace("\\", "/")

    segments: list[str] = []
    for segment in text.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if segments:
                segments.pop()
            continue
        segments.append(segment)

    normalized = "/" + "/".join(segments)
    if segments and text.endswith("/"):
        normalized += "/"
    return normalized


def ensure_background_image_path(value: object) -> str:
    """Return ``value`` as a URL path under ``PUBLIC_PREFIX``."""
    normalized = normalize_serving_path(value)
    if not normalized:
        return PUBLIC_PREFIX
    if normalized == PUBLIC_PREFIX or normalized.startswith(PUBLIC_PREFIX + "/"):
        return normalized
    return posixpath.join(PUBLIC_PREFIX, normalized.lstrip("/"))


def public_relative_path(value: object) -> str:
    """Strip leading slashes and the public prefix from a served path."""
    relative = _as_text(value).lstrip("/")
    prefix = PUBLIC_PREFIX.strip("/") + "/"
    if relative.startswith(prefix):
        relative = relative[len(prefix):]
    return relative
