"""Shared fixtures: throwaway asset trees under tmp_path."""

import json

import pytest

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


@pytest.fixture
def write_file():
    """Return a helper that writes bytes to a path, creating parents."""
    def _write(path, data=PNG_BYTES):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path
    return _write


@pytest.fixture
def write_config():
    """Return a helper that dumps a config document as JSON."""
    def _write(path, document):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(document))
        return path
    return _write


@pytest.fixture
def asset_root(tmp_path, write_file):
    """An asset root with a flat and a nested image directory.

    Layout::

        backgrounds/
            plain.png
            scans/b.png, scans/a.PNG, scans/c.txt
            scans/sub/deep.jpg
    """
    root = tmp_path / "backgrounds"
    write_file(root / "plain.png", b"plain")
    write_file(root / "scans" / "b.png", b"b")
    write_file(root / "scans" / "a.PNG", b"a")
    write_file(root / "scans" / "c.txt", b"not an image")
    write_file(root / "scans" / "sub" / "deep.jpg", b"deep")
    return root
