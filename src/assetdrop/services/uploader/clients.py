"""HTTP clients for the two upload phases.

Phase one asks the signed URL service for an upload target. Phase two PUTs
the raw bytes to that target. Neither phase retries.
"""

import logging
from typing import Dict, Optional

import httpx
from pydantic import ValidationError

from .exceptions import MalformedResponseError, TransferFailedError, UploadRejectedError
from .models import VISIBILITY_PUBLIC, SignedUploadTarget, UploadRequest

logger = logging.getLogger(__name__)

METADATA_VERSION = "2"


class AuthorizationClient:
    """Client for the signed URL service (phase one)."""

    def __init__(
        self,
        endpoint: str,
        timeout: float = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            endpoint: Absolute URL of the signed URL service
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.endpoint = endpoint
        self.timeout = timeout
        self._transport = transport

    async def request_target(self, request: UploadRequest) -> SignedUploadTarget:
        """
        Request a signed upload target for a file.

        Args:
            request: Phase-one request describing the file

        Returns:
            SignedUploadTarget with the signed URL and asset id

        Raises:
            UploadRejectedError: If the service answers with a non-2xx status
            MalformedResponseError: If the 2xx body lacks a usable url/assetId
            httpx.HTTPError: If the service cannot be reached
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            logger.info(
                "Requesting signed upload URL",
                extra={
                    "original_asset_name": request.original_asset_name,
                    "content_length": request.content_length,
                    "overwrite": request.overwrite,
                },
            )
            response = await client.post(self.endpoint, json=request.to_payload())

        if not response.is_success:
            logger.warning(
                "Signed URL request rejected",
                extra={
                    "status_code": response.status_code,
                    "original_asset_name": request.original_asset_name,
                },
            )
            raise UploadRejectedError()

        try:
            target = SignedUploadTarget.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(
                f"Invalid signed URL response: {e}",
                extra={"status_code": response.status_code, "error": str(e)},
            )
            raise MalformedResponseError() from e

        logger.info(
            "Signed upload URL received",
            extra={"asset_id": target.asset_id},
        )
        return target


def build_transfer_headers(
    target: SignedUploadTarget, request: UploadRequest, size_bytes: int
) -> Dict[str, str]:
    """
    Build the header set required by the storage backend for the PUT.

    The content length range has equal bounds so the stored object must be
    exactly the size announced in phase one.
    """
    headers = {
        "Content-Type": request.content_type,
        "x-goog-content-length-range": f"{size_bytes},{size_bytes}",
        "x-goog-meta-sa": request.service_account,
        "x-goog-meta-assetid": target.asset_id,
        "x-goog-meta-originalassetname": request.original_asset_name,
        "x-goog-meta-visibility": VISIBILITY_PUBLIC,
        "x-goog-meta-tenant": request.tenant,
        "x-goog-meta-version": METADATA_VERSION,
    }
    if request.overwrite:
        headers["x-goog-meta-overwrite"] = request.overwrite
    return headers


class TransferClient:
    """Client for the binary PUT to a signed URL (phase two)."""

    def __init__(
        self,
        timeout: float = 300,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout
        self._transport = transport

    async def transfer(
        self, target: SignedUploadTarget, payload: bytes, request: UploadRequest
    ) -> None:
        """
        Upload the raw bytes to the signed URL.

        Args:
            target: Signed target returned by phase one
            payload: Exact bytes to store
            request: The phase-one request, source of the provenance headers

        Raises:
            TransferFailedError: If the storage backend answers with a non-2xx status
            httpx.HTTPError: If the storage backend cannot be reached
        """
        headers = build_transfer_headers(target, request, request.content_length)

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            logger.info(
                "Uploading file to signed URL",
                extra={
                    "asset_id": target.asset_id,
                    "size_bytes": len(payload),
                },
            )
            response = await client.put(target.url, content=payload, headers=headers)

        if not response.is_success:
            logger.warning(
                "Signed URL upload failed",
                extra={"asset_id": target.asset_id, "status_code": response.status_code},
            )
            raise TransferFailedError(response.status_code)

        logger.info(
            "File uploaded to signed URL",
            extra={"asset_id": target.asset_id, "status_code": response.status_code},
        )
