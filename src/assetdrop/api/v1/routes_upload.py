"""Upload API routes.

These routes are the host shell around the uploader: they supply identity
values from settings, hold the picked file and expose the status string.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, File, UploadFile

from assetdrop.core.config import settings
from assetdrop.models.upload import SelectionResponse, StatusResponse, UploadTriggerRequest
from assetdrop.services.uploader import (
    AuthorizationClient,
    TransferClient,
    UploadOrchestrator,
    file_from_bytes,
)

router = APIRouter(prefix="/api/v1", tags=["upload"])
logger = logging.getLogger(__name__)


def build_orchestrator() -> UploadOrchestrator:
    """Create an orchestrator wired to the configured services."""
    return UploadOrchestrator(
        authorization_client=AuthorizationClient(
            endpoint=settings.SIGNED_URL_ENDPOINT,
            timeout=settings.REQUEST_TIMEOUT,
        ),
        transfer_client=TransferClient(timeout=settings.TRANSFER_TIMEOUT),
        context=settings.host_context,
        metadata_folder=settings.METADATA_FOLDER,
        metadata_tenant=settings.METADATA_TENANT,
    )


# Singleton instance, one upload session per process
upload_orchestrator = build_orchestrator()


def get_orchestrator() -> UploadOrchestrator:
    return upload_orchestrator


def _status_response(orchestrator: UploadOrchestrator) -> StatusResponse:
    status = orchestrator.status
    selected = orchestrator.selected_file
    return StatusResponse(
        state=status.state,
        message=status.message,
        file_name=selected.name if selected else None,
    )


@router.get("/upload/status", response_model=StatusResponse)
async def get_status(
    orchestrator: UploadOrchestrator = Depends(get_orchestrator),
) -> StatusResponse:
    """Return the current upload status and the selected file name."""
    return _status_response(orchestrator)


@router.post("/upload/select", response_model=SelectionResponse)
async def select_file(
    file: UploadFile = File(...),
    orchestrator: UploadOrchestrator = Depends(get_orchestrator),
) -> SelectionResponse:
    """Pick (or drop) a file. Replaces any previous selection."""
    data = await file.read()
    selected = file_from_bytes(
        name=file.filename or "unnamed",
        data=data,
        mime_type=file.content_type or "",
    )
    orchestrator.select(selected)

    logger.info(
        f"File selected: name={selected.name}, mime_type={selected.mime_type}, "
        f"size={selected.size_bytes}"
    )

    return SelectionResponse(
        name=selected.name,
        mime_type=selected.mime_type,
        size_bytes=selected.size_bytes,
    )


@router.post("/upload", response_model=StatusResponse)
async def trigger_upload(
    request: Optional[UploadTriggerRequest] = Body(None),
    orchestrator: UploadOrchestrator = Depends(get_orchestrator),
) -> StatusResponse:
    """Upload the selected file.

    Upload failures are reported through the status message, never as an
    HTTP error.
    """
    context = settings.host_context
    if request is not None and request.asset_id is not None:
        context = context.model_copy(update={"asset_id": request.asset_id or None})

    status = await orchestrator.upload(context)

    logger.info(
        f"Upload triggered: state={status.state.value}, overwrite={context.asset_id}"
    )
    return _status_response(orchestrator)


@router.post("/upload/cancel", response_model=StatusResponse)
async def cancel_upload(
    orchestrator: UploadOrchestrator = Depends(get_orchestrator),
) -> StatusResponse:
    """Drop the selected file and reset the status."""
    orchestrator.cancel()
    logger.info("Upload cancelled by host")
    return _status_response(orchestrator)
