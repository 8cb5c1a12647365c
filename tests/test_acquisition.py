"""Tests for file acquisition."""

import pytest

from assetdrop.services.uploader.acquisition import acquire_file, file_from_bytes
from assetdrop.services.uploader.exceptions import UnreadableFileError


def test_acquire_file_from_disk(tmp_path):
    """Test selecting an image from the filesystem."""
    path = tmp_path / "Holiday Pic.png"
    path.write_bytes(b"\x89PNG" + b"\x00" * 60)

    selected = acquire_file(path)

    assert selected.name == "Holiday Pic.png"
    assert selected.mime_type == "image/png"
    assert selected.size_bytes == 64
    assert selected.reader() == b"\x89PNG" + b"\x00" * 60


def test_acquire_file_unknown_type(tmp_path):
    """Test that an unknown extension gives an empty MIME type."""
    path = tmp_path / "blob.unknownext"
    path.write_bytes(b"abc")

    selected = acquire_file(str(path))

    assert selected.mime_type == ""
    assert selected.size_bytes == 3


def test_acquire_missing_file(tmp_path):
    """Test that a missing path cannot be selected."""
    with pytest.raises(UnreadableFileError, match="Cannot access"):
        acquire_file(tmp_path / "missing.jpg")


def test_acquire_directory(tmp_path):
    """Test that a directory cannot be selected."""
    with pytest.raises(UnreadableFileError, match="Not a file"):
        acquire_file(tmp_path)


def test_file_from_bytes():
    """Test selecting in-memory content."""
    selected = file_from_bytes("clip.mp4", b"\x00\x01\x02", "video/mp4")

    assert selected.name == "clip.mp4"
    assert selected.mime_type == "video/mp4"
    assert selected.size_bytes == 3
    assert selected.reader() == b"\x00\x01\x02"


def test_file_from_bytes_defaults_mime_type():
    """Test that a missing MIME type becomes an empty string."""
    selected = file_from_bytes("x", b"", None)

    assert selected.mime_type == ""
    assert selected.size_bytes == 0
