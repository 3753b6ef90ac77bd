"""Tests for catalog.scanner — image discovery under a directory."""

import logging
import os

import pytest

from catalog.scanner import collect_image_files, is_image_file


class TestIsImageFile:
    def test_image_suffix_case_insensitive(self, tmp_path, write_file):
        assert is_image_file(write_file(tmp_path / "a.PNG"))

    def test_other_suffix(self, tmp_path, write_file):
        assert not is_image_file(write_file(tmp_path / "a.txt"))

    def test_missing_file(self, tmp_path):
        assert not is_image_file(tmp_path / "missing.png")

    def test_directory_named_like_image(self, tmp_path):
        (tmp_path / "dir.png").mkdir()
        assert not is_image_file(tmp_path / "dir.png")

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_symlink_is_not_an_image_file(self, tmp_path, write_file):
        target = write_file(tmp_path / "real.png")
        (tmp_path / "link.png").symlink_to(target)
        assert not is_image_file(tmp_path / "link.png")


class TestCollectImageFiles:
    def test_non_recursive_sorted_and_filtered(self, asset_root):
        scans = asset_root / "scans"
        files = collect_image_files(scans)
        assert files == [scans / "a.PNG", scans / "b.png"]

    def test_recursive_includes_subdirectories(self, asset_root):
        scans = asset_root / "scans"
        files = collect_image_files(scans, recursive=True)
        assert files == [scans / "a.PNG", scans / "b.png", scans / "sub" / "deep.jpg"]

    def test_sorted_by_full_path_string(self, tmp_path, write_file):
        write_file(tmp_path / "a" / "x.png")
        write_file(tmp_path / "a-b" / "x.png")
        files = collect_image_files(tmp_path, recursive=True)
        # '-' sorts before '/' in the full string
        assert files == [tmp_path / "a-b" / "x.png", tmp_path / "a" / "x.png"]

    @pytest.mark.parametrize("name", ["p.png", "p.jpg", "p.jpeg", "p.gif", "p.bmp", "p.webp", "p.JPEG"])
    def test_all_image_extensions(self, tmp_path, write_file, name):
        write_file(tmp_path / name)
        assert collect_image_files(tmp_path) == [tmp_path / name]

    def test_ignores_other_extensions(self, tmp_path, write_file):
        write_file(tmp_path / "photo.tiff")
        write_file(tmp_path / "notes.txt")
        write_file(tmp_path / "png")
        assert collect_image_files(tmp_path) == []

    def test_empty_directory(self, tmp_path):
        assert collect_image_files(tmp_path) == []

    def test_unreadable_directory_is_skipped(self, tmp_path, caplog):
        missing = tmp_path / "gone"
        with caplog.at_level(logging.WARNING, logger="catalog.scanner"):
            assert collect_image_files(missing) == []
        assert "Unable to read directory" in caplog.text

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_symlinked_directories_are_not_descended(self, tmp_path, write_file):
        write_file(tmp_path / "real" / "a.png")
        (tmp_path / "real" / "loop").symlink_to(tmp_path / "real", target_is_directory=True)
        files = collect_image_files(tmp_path / "real", recursive=True)
        assert files == [tmp_path / "real" / "a.png"]

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_symlinked_files_are_not_collected(self, tmp_path, write_file):
        write_file(tmp_path / "real.png")
        write_file(tmp_path / "d" / "own.png")
        (tmp_path / "d" / "link.png").symlink_to(tmp_path / "real.png")
        files = collect_image_files(tmp_path / "d")
        assert files == [tmp_path / "d" / "own.png"]
