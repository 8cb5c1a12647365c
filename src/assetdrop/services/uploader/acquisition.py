"""File acquisition: turn a picked or dropped file into a SelectedFile."""

import logging
import mimetypes
from pathlib import Path

from assetdrop.services.uploader.exceptions import UnreadableFileError
from assetdrop.services.uploader.models import SelectedFile

logger = logging.getLogger(__name__)


def acquire_file(path: str | Path) -> SelectedFile:
    """Select a file from the local filesystem.

    The content is not read here; the returned reader opens the file when
    the upload begins.

    Args:
        path: Path to the file

    Returns:
        SelectedFile with a guessed MIME type ("" when unknown)

    Raises:
        UnreadableFileError: If the path does not point to a readable file
    """
    file_path = Path(path)
    try:
        stat = file_path.stat()
    except OSError as e:
        raise UnreadableFileError(f"Cannot access {file_path.name}") from e

    if not file_path.is_file():
        raise UnreadableFileError(f"Not a file: {file_path.name}")

    mime_type, _ = mimetypes.guess_type(file_path.name)

    logger.debug(
        "File acquired from disk",
        extra={"file_name": file_path.name, "mime_type": mime_type, "size_bytes": stat.st_size},
    )

    return SelectedFile(
        name=file_path.name,
        mime_type=mime_type or "",
        size_bytes=stat.st_size,
        reader=file_path.read_bytes,
    )


def file_from_bytes(name: str, data: bytes, mime_type: str = "") -> SelectedFile:
    """Select a file whose content is already in memory."""
    content = bytes(data)
    return SelectedFile(
        name=name,
        mime_type=mime_type or "",
        size_bytes=len(content),
        reader=lambda: content,
    )
