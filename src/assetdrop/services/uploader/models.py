"""
Data models for the two-phase signed URL upload.

Phase one sends an UploadRequest to the signed URL service and receives a
SignedUploadTarget. Phase two PUTs the raw bytes to the target URL.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator

from assetdrop.services.uploader.classifier import AssetFormat, classify_format

VISIBILITY_PUBLIC = "PUBLIC"

_WHITESPACE = re.compile(r"\s+")


def sanitize_asset_name(name: str) -> str:
    """Remove every whitespace character from a file name."""
    return _WHITESPACE.sub("", name)


@dataclass
class SelectedFile:
    """File chosen by the user, held by the orchestrator until uploaded."""

    name: str
    mime_type: str
    size_bytes: int
    reader: Callable[[], bytes] = field(repr=False, compare=False)

    def __post_init__(self):
        if self.size_bytes < 0:
            raise ValueError("size_bytes must be non-negative")


class HostContext(BaseModel):
    """
    Identity and target values supplied by the host shell.

    Values are opaque and passed through verbatim. They are read once when
    an upload attempt begins.
    """

    model_config = ConfigDict(frozen=True)

    tenant: str = ""
    service_account: str = ""
    user_login: str = ""
    folder: str = ""
    folder_id: str = ""
    asset_id: Optional[str] = Field(None, description="Existing asset to overwrite")

    @field_validator("asset_id")
    @classmethod
    def _empty_asset_id_is_absent(cls, value: Optional[str]) -> Optional[str]:
        return value or None


class UploadMetadata(BaseModel):
    """Custom metadata attached to the asset."""

    folder: str
    tenant: str
    uploader: str
    format: AssetFormat


class UploadRequest(BaseModel):
    """Phase-one request body sent to the signed URL service."""

    model_config = ConfigDict(populate_by_name=True)

    content_type: str = Field(..., alias="contentType")
    content_length: int = Field(..., alias="contentLength", ge=0)
    original_asset_name: str = Field(..., alias="originalAssetName")
    service_account: str = Field(..., alias="serviceAccount")
    visibility: str = VISIBILITY_PUBLIC
    tenant: str
    metadata: UploadMetadata
    overwrite: Optional[str] = None

    @classmethod
    def build(
        cls,
        file: SelectedFile,
        context: HostContext,
        payload_size: int,
        metadata_folder: str = "DEFAULT",
        metadata_tenant: str = "GLOBAL",
    ) -> "UploadRequest":
        """
        Build the phase-one request for a selected file.

        Args:
            file: The file being uploaded
            context: Host identity values for this attempt
            payload_size: Exact number of bytes that phase two will send
            metadata_folder: Folder recorded in the asset metadata
            metadata_tenant: Tenant recorded in the asset metadata

        Returns:
            UploadRequest ready to be serialized with to_payload()
        """
        return cls(
            content_type=file.mime_type,
            content_length=payload_size,
            original_asset_name=sanitize_asset_name(file.name),
            service_account=context.service_account,
            tenant=context.tenant,
            metadata=UploadMetadata(
                folder=metadata_folder,
                tenant=metadata_tenant,
                uploader=context.user_login,
                format=classify_format(file.mime_type),
            ),
            overwrite=context.asset_id,
        )

    def to_payload(self) -> dict:
        """JSON body for the signed URL service; overwrite only when set."""
        payload = self.model_dump(by_alias=True, mode="json")
        if self.overwrite is None:
            payload.pop("overwrite")
        return payload


class SignedUploadTarget(BaseModel):
    """Phase-one response: where and as which asset to upload."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    url: str = Field(..., description="Signed URL for the binary PUT")
    asset_id: str = Field(..., alias="assetId", description="Created or overwritten asset id")

    @field_validator("url")
    @classmethod
    def _require_absolute_http_url(cls, value: str) -> str:
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"url must be an absolute http(s) URL: {value!r}")
        return value

    @field_validator("asset_id", mode="before")
    @classmethod
    def _coerce_asset_id(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class UploadState(str, Enum):
    """Upload progression states."""

    IDLE = "idle"
    READING = "reading"
    UPLOADING = "uploading"
    COMPLETED = "completed"
    FAILED = "failed"


class UploadStatus(BaseModel):
    """Snapshot of the orchestrator status, with its human-readable message."""

    model_config = ConfigDict(frozen=True)

    state: UploadState = UploadState.IDLE
    message: str = ""

    @classmethod
    def idle(cls) -> "UploadStatus":
        return cls()

    @classmethod
    def reading(cls) -> "UploadStatus":
        return cls(state=UploadState.READING, message="Reading file...")

    @classmethod
    def uploading(cls) -> "UploadStatus":
        return cls(state=UploadState.UPLOADING, message="Uploading (1/1)...")

    @classmethod
    def completed(cls) -> "UploadStatus":
        return cls(state=UploadState.COMPLETED, message="Upload completed successfully")

    @classmethod
    def failed(cls, error: str) -> "UploadStatus":
        return cls(state=UploadState.FAILED, message=f"Error: {error}")
