"""Health check endpoint for AssetDrop."""

from urllib.parse import urlparse

from fastapi import APIRouter

from assetdrop.core.config import settings

router = APIRouter()


@router.get("/health")
async def health_check() -> dict:
    """Report service identity and the signed URL service it talks to.

    No outbound call is made; the endpoint only reflects configuration.
    """
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "signed_url_host": urlparse(settings.SIGNED_URL_ENDPOINT).netloc,
    }
