"""
Asset format classifier.

Tags uploads with a coarse format derived from the primary segment of their
MIME type:
- Image: image/*
- Video: video/*
- Other: everything else, including empty or malformed types
"""

from enum import Enum
from typing import Dict


class AssetFormat(str, Enum):
    """Format tag stored in the asset metadata."""

    IMAGE = "Image"
    VIDEO = "Video"
    OTHER = "Other"


# Primary MIME type segment to format tag
PRIMARY_TYPE_FORMAT_MAP: Dict[str, AssetFormat] = {
    "image": AssetFormat.IMAGE,
    "video": AssetFormat.VIDEO,
}


def classify_format(mime_type: str) -> AssetFormat:
    """
    Classify a MIME type into an asset format tag.

    Only the segment before the first "/" is inspected.

    Args:
        mime_type: The MIME type string (e.g., "image/jpeg"), may be empty

    Returns:
        AssetFormat enum value (IMAGE, VIDEO or OTHER)

    Examples:
        >>> classify_format("image/png")
        <AssetFormat.IMAGE: 'Image'>
        >>> classify_format("video/mp4")
        <AssetFormat.VIDEO: 'Video'>
        >>> classify_format("application/pdf")
        <AssetFormat.OTHER: 'Other'>
        >>> classify_format("")
        <AssetFormat.OTHER: 'Other'>
    """
    primary_type = (mime_type or "").split("/", 1)[0]
    return PRIMARY_TYPE_FORMAT_MAP.get(primary_type, AssetFormat.OTHER)
