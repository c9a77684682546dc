"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here. No scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_mutating: Rate limit for endpoints that broadcast
            blockchain transactions.
        nft_gateway_url: Base URL of the NFT Operation Service.
        nft_gateway_api_key: API key sent as ``x-api-key``.
        nft_gateway_testnet_type: Testnet selector sent as
            ``x-testnet-type`` (e.g. ``ethereum-sepolia``).
        nft_gateway_timeout_seconds: Timeout for gateway calls.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "NFT Connector"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "120/minute"
    rate_limit_mutating: str = "30/minute"

    nft_gateway_url: str = "https://api.tatum.io"
    nft_gateway_api_key: Optional[str] = None
    nft_gateway_testnet_type: Optional[str] = None
    nft_gateway_timeout_seconds: float = 30.0

    def gateway_headers(self) -> dict[str, str]:
        """Return the headers sent with every gateway call."""
        headers = {"Accept": "application/json"}
        if self.nft_gateway_api_key:
            headers["x-api-key"] = self.nft_gateway_api_key
        if self.nft_gateway_testnet_type:
            headers["x-testnet-type"] = self.nft_gateway_testnet_type
        return headers


settings = Settings()
