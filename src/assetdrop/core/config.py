"""Configuration management for AssetDrop."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from assetdrop.services.uploader.models import HostContext


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
    )

    ENV: str = "local"
    SERVICE_NAME: str = "assetdrop"
    SERVICE_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"

    # Signed URL service (phase one)
    SIGNED_URL_ENDPOINT: str = "https://amanda.inditex.com/v2/signedUrl"
    REQUEST_TIMEOUT: int = 30  # seconds for the signed URL request
    TRANSFER_TIMEOUT: int = 300  # seconds for the binary PUT

    # Fixed metadata expected by the asset service
    METADATA_FOLDER: str = "DEFAULT"
    METADATA_TENANT: str = "GLOBAL"

    # Host context (identity and target values supplied by the host shell)
    TENANT: str = ""
    SERVICE_ACCOUNT: str = ""
    USER_LOGIN: str = ""
    FOLDER: str = ""
    FOLDER_ID: str = ""
    ASSET_ID: str = ""  # Empty = create a new asset

    @property
    def host_context(self) -> HostContext:
        """Build the host context from the configured identity values."""
        return HostContext(
            tenant=self.TENANT,
            service_account=self.SERVICE_ACCOUNT,
            user_login=self.USER_LOGIN,
            folder=self.FOLDER,
            folder_id=self.FOLDER_ID,
            asset_id=self.ASSET_ID or None,
        )


# Singleton settings instance
settings = Settings()
