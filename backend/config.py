# =============================================================================
# SKIN PROPOSAL BACKEND - CONFIGURATION
# =============================================================================
"""
Configuration management using Pydantic Settings.
Handles environment variables and the base64-encoded GCP service account key.
"""

import base64
import binascii
import json
import logging
from functools import lru_cache
from typing import Optional

from google.auth import exceptions as auth_exceptions
from google.oauth2 import service_account
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings

from errors import ConfigurationError

logger = logging.getLogger(__name__)

CLOUD_PLATFORM_SCOPE = "https://www.googleapis.com/auth/cloud-platform"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Google Cloud
    gcp_sa_key_base64: Optional[str] = Field(default=None, alias="GCP_SA_KEY_BASE64")
    gcp_location: str = Field(default="asia-northeast1", alias="GCP_LOCATION")
    gemini_model: str = Field(default="gemini-2.5-flash", alias="GEMINI_MODEL")

    # Outbound call timeouts in seconds
    vision_timeout: float = Field(default=30.0, alias="VISION_TIMEOUT")
    generation_timeout: float = Field(default=60.0, alias="GENERATION_TIMEOUT")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Comma-separated list of allowed frontend origins
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def allowed_origins(self) -> list[str]:
        """CORS origins as a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


class ServiceAccountCredentials(BaseModel):
    """The subset of a GCP service account key the clients need."""
    client_email: str = Field(..., min_length=1)
    private_key: str = Field(..., min_length=1)
    project_id: str = Field(..., min_length=1)

    @property
    def service_account_info(self) -> dict[str, str]:
        """Key dict accepted by google.oauth2.service_account."""
        return {
            "type": "service_account",
            "client_email": self.client_email,
            "private_key": self.private_key,
            "project_id": self.project_id,
            "token_uri": "https://oauth2.googleapis.com/token",
        }

    def to_google_credentials(self) -> service_account.Credentials:
        """Scoped google-auth credentials for the Vision and Vertex AI clients."""
        try:
            return service_account.Credentials.from_service_account_info(
                self.service_account_info,
                scopes=[CLOUD_PLATFORM_SCOPE],
            )
        except (ValueError, auth_exceptions.GoogleAuthError) as e:
            raise ConfigurationError("Service account private key could not be loaded.") from e


def load_credentials(settings: Settings) -> ServiceAccountCredentials:
    """
    Decode and validate the service account key from settings.

    Raises:
        ConfigurationError: if the variable is missing, is not base64 JSON,
            or lacks client_email / private_key / project_id.
    """
    if not settings.gcp_sa_key_base64:
        logger.error("Fatal Error: GCP_SA_KEY_BASE64 environment variable not found.")
        raise ConfigurationError("Server configuration error: GCP_SA_KEY_BASE64 is not set.")

    try:
        raw = base64.b64decode(settings.gcp_sa_key_base64)
        data = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        logger.error(f"Could not decode GCP_SA_KEY_BASE64: {e}")
        raise ConfigurationError("Server configuration error: GCP_SA_KEY_BASE64 is not valid base64 JSON.") from e

    if not isinstance(data, dict):
        raise ConfigurationError("Server configuration error: service account key must be a JSON object.")

    try:
        credentials = ServiceAccountCredentials.model_validate(data)
    except PydanticValidationError as e:
        logger.error("Authentication Error: Service account credentials not parsed correctly.")
        raise ConfigurationError("Service account credentials are not configured correctly.") from e

    logger.info(f"Successfully parsed credentials for service account: {credentials.client_email}")
    return credentials


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance for dependency injection."""
    return Settings()
