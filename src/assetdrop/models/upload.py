"""Upload API data models."""

from typing import Optional

from pydantic import BaseModel

from assetdrop.services.uploader.models import UploadState


class UploadTriggerRequest(BaseModel):
    """Optional per-attempt overrides for the configured host context."""

    asset_id: Optional[str] = None


class SelectionResponse(BaseModel):
    """Response model for file selection."""

    name: str
    mime_type: str
    size_bytes: int


class StatusResponse(BaseModel):
    """Response model for the current upload status."""

    state: UploadState
    message: str
    file_name: Optional[str] = None
