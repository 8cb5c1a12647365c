"""
Uploader Service

Uploads a single selected file to object storage in two phases: a signed URL
request to the asset service, then a binary PUT to the returned URL.
"""

from assetdrop.services.uploader.acquisition import acquire_file, file_from_bytes
from assetdrop.services.uploader.classifier import AssetFormat, classify_format
from assetdrop.services.uploader.clients import AuthorizationClient, TransferClient
from assetdrop.services.uploader.models import (
    HostContext,
    SelectedFile,
    SignedUploadTarget,
    UploadRequest,
    UploadState,
    UploadStatus,
)
from assetdrop.services.uploader.orchestrator import UploadOrchestrator

__all__ = [
    "AssetFormat",
    "AuthorizationClient",
    "HostContext",
    "SelectedFile",
    "SignedUploadTarget",
    "TransferClient",
    "UploadOrchestrator",
    "UploadRequest",
    "UploadState",
    "UploadStatus",
    "acquire_file",
    "classify_format",
    "file_from_bytes",
]
