"""Pytest configuration and shared fixtures."""

import json
from typing import Any, Dict, List, Optional

import httpx
import pytest

from assetdrop.services.uploader import (
    AuthorizationClient,
    HostContext,
    TransferClient,
    UploadOrchestrator,
    file_from_bytes,
)

SIGNED_URL_ENDPOINT = "https://assets.test/v2/signedUrl"


class FakeStorageService:
    """Answers both upload phases and records every request it receives."""

    def __init__(
        self,
        signed_status: int = 200,
        signed_body: Optional[Any] = None,
        put_status: int = 200,
    ):
        self.signed_status = signed_status
        self.signed_body = signed_body if signed_body is not None else {
            "url": "https://store/x",
            "assetId": "A1",
        }
        self.put_status = put_status
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "POST":
            if isinstance(self.signed_body, (dict, list)):
                return httpx.Response(self.signed_status, json=self.signed_body)
            return httpx.Response(self.signed_status, content=self.signed_body)
        return httpx.Response(self.put_status)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def post_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == "POST"]

    @property
    def put_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == "PUT"]

    def post_body(self, index: int = 0) -> Dict[str, Any]:
        return json.loads(self.post_requests[index].content)


@pytest.fixture
def make_storage_service():
    """Factory for fake services with custom answers."""
    return FakeStorageService


@pytest.fixture
def storage_service():
    """Fake signed URL service and storage backend that accept everything."""
    return FakeStorageService()


@pytest.fixture
def host_context():
    """Host identity values for an upload attempt."""
    return HostContext(
        tenant="tenant-1",
        service_account="sa-uploader",
        user_login="jdoe",
        folder="Campaign",
        folder_id="folder-9",
    )


@pytest.fixture
def photo():
    """A 1 KiB JPEG whose name contains whitespace."""
    return file_from_bytes("My Photo.JPG", bytes(range(256)) * 4, "image/jpeg")


@pytest.fixture
def make_orchestrator(host_context):
    """Factory for orchestrators wired to a fake storage service."""
    def _make(service: FakeStorageService, context: Optional[HostContext] = None, **kwargs) -> UploadOrchestrator:
        transport = service.transport
        return UploadOrchestrator(
            authorization_client=AuthorizationClient(SIGNED_URL_ENDPOINT, transport=transport),
            transfer_client=TransferClient(transport=transport),
            context=context or host_context,
            **kwargs,
        )
    return _make


@pytest.fixture
def orchestrator(make_orchestrator, storage_service):
    """Orchestrator wired to the fake storage service."""
    return make_orchestrator(storage_service)
