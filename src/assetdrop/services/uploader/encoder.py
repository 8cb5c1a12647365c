"""Base64 encoding of selected file content."""

import asyncio
import base64
import binascii
import logging

from assetdrop.services.uploader.exceptions import UnreadableFileError
from assetdrop.services.uploader.models import SelectedFile

logger = logging.getLogger(__name__)


async def encode(file: SelectedFile) -> str:
    """Read a selected file and return its content as base64 text.

    The read runs in a worker thread so the event loop stays free.

    Args:
        file: The selected file

    Returns:
        Standard base64 text of the file bytes

    Raises:
        UnreadableFileError: If the reader fails or returns something other than bytes
    """
    try:
        content = await asyncio.to_thread(file.reader)
    except Exception as e:
        logger.error(
            f"Failed to read {file.name}: {e}",
            extra={"file_name": file.name, "error": str(e)},
        )
        raise UnreadableFileError() from e

    if not isinstance(content, (bytes, bytearray, memoryview)):
        logger.error(
            "File reader returned a non-binary result",
            extra={"file_name": file.name, "result_type": type(content).__name__},
        )
        raise UnreadableFileError()

    return base64.b64encode(bytes(content)).decode("ascii")


def decode(text: str) -> bytes:
    """Decode base64 text produced by encode() back into raw bytes.

    Raises:
        UnreadableFileError: If the text is not valid base64
    """
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise UnreadableFileError() from e
