"""Application configuration."""
import os
from dataclasses import dataclass


@dataclass
class MwsApiConfig:
    """MWS endpoint configuration."""

    host: str = "mws.amazonservices.com"
    scheme: str = "https"
    timeout: int = 60
    seller_id: str = ""  # Read from .env or user input
    auth_token: str = ""

    @classmethod
    def from_env(cls) -> "MwsApiConfig":
        """Load config from environment variables."""
        return cls(
            host=os.getenv("MWS_HOST", "mws.amazonservices.com"),
            scheme=os.getenv("MWS_SCHEME", "https"),
            timeout=int(os.getenv("MWS_TIMEOUT", "60")),
            seller_id=os.getenv("MWS_SELLER_ID", ""),
            auth_token=os.getenv("MWS_AUTH_TOKEN", ""),
        )


@dataclass
class AppConfig:
    """Application configuration."""

    log_level: str = "WARNING"
    mws_api: MwsApiConfig = None

    def __post_init__(self):
        """Fill in defaults."""
        if self.mws_api is None:
            self.mws_api = MwsApiConfig.from_env()

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load config from environment variables."""
        return cls(
            log_level=os.getenv("MWS_LOG_LEVEL", "WARNING"),
            mws_api=MwsApiConfig.from_env(),
        )


# Global instance
app_config = AppConfig.from_env()
