"""Tests for asset format classification."""

import pytest

from assetdrop.services.uploader.classifier import AssetFormat, classify_format


@pytest.mark.parametrize(
    "mime_type,expected",
    [
        ("image/jpeg", AssetFormat.IMAGE),
        ("image/svg+xml", AssetFormat.IMAGE),
        ("image/", AssetFormat.IMAGE),
        ("video/mp4", AssetFormat.VIDEO),
        ("video/quicktime", AssetFormat.VIDEO),
        ("application/pdf", AssetFormat.OTHER),
        ("audio/mpeg", AssetFormat.OTHER),
        ("text/plain", AssetFormat.OTHER),
    ],
)
def test_classify_known_types(mime_type, expected):
    """Test classification by the primary MIME segment."""
    assert classify_format(mime_type) == expected


@pytest.mark.parametrize("mime_type", ["", "/jpeg", "garbage", "imagery/png", " image/png", "IMAGE/PNG"])
def test_classify_malformed_types_is_other(mime_type):
    """Test that empty, slash-less or unknown types fall back to Other."""
    assert classify_format(mime_type) == AssetFormat.OTHER


def test_classify_type_without_slash_uses_whole_string():
    """Test that a type without a slash is treated as its own primary segment."""
    assert classify_format("image") == AssetFormat.IMAGE
    assert classify_format("video") == AssetFormat.VIDEO


def test_classify_only_inspects_primary_segment():
    """Test that the subtype never influences the result."""
    assert classify_format("application/image") == AssetFormat.OTHER
    assert classify_format("image/video") == AssetFormat.IMAGE


def test_format_values():
    """Test that exactly three format tags exist with their metadata values."""
    assert [f.value for f in AssetFormat] == ["Image", "Video", "Other"]
