"""Configuration model for the client and CLI."""

from __future__ import annotations

from dataclasses import dataclass

API_URL = "https://api.pinata.cloud"


@dataclass
class ClientConfig:
    """Complete client configuration."""

    # Credentials
    api_key: str = ""  # loaded from env var PINATA_API_KEY
    secret_api_key: str = ""  # loaded from env var PINATA_SECRET_API_KEY

    # HTTP
    base_url: str = API_URL
    timeout: float = 30.0  # seconds

    # Logging
    log_level: str = "info"
