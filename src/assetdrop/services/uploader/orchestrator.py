"""
Upload orchestration.

Sequences encode -> classify -> signed URL request -> binary transfer for the
currently selected file and owns the status shown to the user. Every failure
ends the attempt with a FAILED status; nothing is raised to the caller.
"""

import logging
from typing import Callable, Optional

from assetdrop.core.logging import asset_id_context, upload_file_context
from assetdrop.services.uploader.clients import AuthorizationClient, TransferClient
from assetdrop.services.uploader.encoder import decode, encode
from assetdrop.services.uploader.exceptions import UnreadableFileError
from assetdrop.services.uploader.models import (
    HostContext,
    SelectedFile,
    UploadRequest,
    UploadStatus,
)

logger = logging.getLogger(__name__)


class UploadOrchestrator:
    """Single-flight uploader for one selected file at a time.

    A trigger that arrives while an attempt is still running is ignored,
    including after a cancel: cancelling does not abort the network call,
    it only discards the attempt's late outcome.
    """

    def __init__(
        self,
        authorization_client: AuthorizationClient,
        transfer_client: TransferClient,
        context: Optional[HostContext] = None,
        metadata_folder: str = "DEFAULT",
        metadata_tenant: str = "GLOBAL",
        on_status: Optional[Callable[[UploadStatus], None]] = None,
    ):
        self.authorization_client = authorization_client
        self.transfer_client = transfer_client
        self.context = context or HostContext()
        self.metadata_folder = metadata_folder
        self.metadata_tenant = metadata_tenant
        self._on_status = on_status

        self._file: Optional[SelectedFile] = None
        self._status = UploadStatus.idle()
        self._generation = 0
        self._active = False

    @property
    def selected_file(self) -> Optional[SelectedFile]:
        return self._file

    @property
    def status(self) -> UploadStatus:
        return self._status

    @property
    def is_active(self) -> bool:
        """True while an attempt (possibly a cancelled one) is still running."""
        return self._active

    def _set_status(self, status: UploadStatus) -> None:
        self._status = status
        if self._on_status is not None:
            self._on_status(status)

    def select(self, file: SelectedFile) -> None:
        """Replace the held file. The status is left untouched."""
        self._file = file
        logger.info(
            "File selected",
            extra={"file_name": file.name, "mime_type": file.mime_type, "size_bytes": file.size_bytes},
        )

    def cancel(self) -> None:
        """Drop the held file and reset the status to idle."""
        self._generation += 1
        self._file = None
        self._set_status(UploadStatus.idle())
        logger.info("Upload cancelled")

    async def upload(self, context: Optional[HostContext] = None) -> UploadStatus:
        """
        Upload the held file.

        Args:
            context: Host values for this attempt; defaults to the constructor context

        Returns:
            The status once the attempt is over (unchanged if nothing was done)
        """
        file = self._file
        if file is None:
            logger.debug("Upload triggered without a selected file")
            return self._status

        if self._active:
            logger.warning(
                "Upload already in progress, trigger ignored",
                extra={"file_name": file.name, "state": self._status.state.value},
            )
            return self._status

        context = context or self.context
        self._generation += 1
        generation = self._generation
        self._active = True
        token = upload_file_context.set(file.name)
        asset_token = asset_id_context.set(None)

        try:
            self._set_status(UploadStatus.reading())
            payload = decode(await encode(file))
            if len(payload) != file.size_bytes:
                raise UnreadableFileError(
                    f"File size changed while reading ({len(payload)} != {file.size_bytes} bytes)"
                )

            request = UploadRequest.build(
                file,
                context,
                payload_size=len(payload),
                metadata_folder=self.metadata_folder,
                metadata_tenant=self.metadata_tenant,
            )

            if generation != self._generation:
                return self._status
            self._set_status(UploadStatus.uploading())

            target = await self.authorization_client.request_target(request)
            asset_id_context.set(target.asset_id)
            await self.transfer_client.transfer(target, payload, request)

            if generation != self._generation:
                logger.info(
                    "Upload finished after cancel, result discarded",
                    extra={"asset_id": target.asset_id},
                )
                return self._status

            # A file picked during the attempt stays selected
            if self._file is file:
                self._file = None
            self._set_status(UploadStatus.completed())
            logger.info(
                "Upload completed",
                extra={
                    "asset_id": target.asset_id,
                    "format": request.metadata.format.value,
                    "size_bytes": request.content_length,
                },
            )

        except Exception as e:
            logger.error(
                f"Upload failed: {e}",
                extra={"error": str(e), "error_type": type(e).__name__},
                exc_info=True,
            )
            if generation == self._generation:
                self._set_status(UploadStatus.failed(str(e) or type(e).__name__))

        finally:
            self._active = False
            asset_id_context.reset(asset_token)
            upload_file_context.reset(token)

        return self._status
