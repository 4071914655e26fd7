"""Configuration module for ClickUp API interactions."""

import logging
import os
from dataclasses import dataclass
from typing import Literal

from ..models.constants import DEFAULT_CURRENCY
from .constants import DEFAULT_CLICKUP_API_URL, DEFAULT_TIMEOUT_SECONDS

logger = logging.getLogger("mcp-clickup.clickup.config")


@dataclass
class ClickUpConfig:
    """ClickUp API configuration.

    Handles the two ways ClickUp accepts credentials:
    - Personal API token (``pk_...``), sent as-is in the Authorization header
    - OAuth access token, sent as a Bearer token
    """

    url: str = DEFAULT_CLICKUP_API_URL  # Base URL of the ClickUp REST API
    auth_type: Literal["token", "oauth"] = "token"  # Authentication type
    api_token: str | None = None  # Personal API token
    oauth_token: str | None = None  # OAuth 2.0 access token
    ssl_verify: bool = True  # Whether to verify SSL certificates
    timeout: int = DEFAULT_TIMEOUT_SECONDS  # Request timeout in seconds
    default_currency: str = DEFAULT_CURRENCY  # Fallback for currency custom fields
    http_proxy: str | None = None  # HTTP proxy URL
    https_proxy: str | None = None  # HTTPS proxy URL
    no_proxy: str | None = None  # Comma-separated list of hosts to bypass proxy

    @property
    def auth_header(self) -> str:
        """Value of the Authorization header for the configured credentials."""
        if self.auth_type == "oauth":
            return f"Bearer {self.oauth_token}"
        return self.api_token or ""

    @classmethod
    def from_env(cls) -> "ClickUpConfig":
        """Create configuration from environment variables.

        Returns:
            ClickUpConfig with values from environment variables

        Raises:
            ValueError: If no credentials are configured or a value is invalid
        """
        api_token = os.getenv("CLICKUP_API_TOKEN")
        oauth_token = os.getenv("CLICKUP_OAUTH_ACCESS_TOKEN")

        if oauth_token:
            # OAuth takes precedence when both are present
            auth_type = "oauth"
        elif api_token:
            auth_type = "token"
        else:
            error_msg = "ClickUp authentication requires CLICKUP_API_TOKEN or CLICKUP_OAUTH_ACCESS_TOKEN"
            raise ValueError(error_msg)

        url = os.getenv("CLICKUP_API_URL", DEFAULT_CLICKUP_API_URL).rstrip("/")

        ssl_verify_env = os.getenv("CLICKUP_SSL_VERIFY", "true").lower()
        ssl_verify = ssl_verify_env not in ("false", "0", "no")

        timeout_env = os.getenv("CLICKUP_TIMEOUT")
        timeout = DEFAULT_TIMEOUT_SECONDS
        if timeout_env:
            if not timeout_env.isdigit() or int(timeout_env) <= 0:
                error_msg = f"CLICKUP_TIMEOUT must be a positive integer, got '{timeout_env}'"
                raise ValueError(error_msg)
            timeout = int(timeout_env)

        default_currency = (
            os.getenv("CLICKUP_DEFAULT_CURRENCY", DEFAULT_CURRENCY).strip().upper()
            or DEFAULT_CURRENCY
        )

        http_proxy = os.getenv("CLICKUP_HTTP_PROXY", os.getenv("HTTP_PROXY"))
        https_proxy = os.getenv("CLICKUP_HTTPS_PROXY", os.getenv("HTTPS_PROXY"))
        no_proxy = os.getenv("CLICKUP_NO_PROXY", os.getenv("NO_PROXY"))

        return cls(
            url=url,
            auth_type=auth_type,
            api_token=api_token,
            oauth_token=oauth_token,
            ssl_verify=ssl_verify,
            timeout=timeout,
            default_currency=default_currency,
            http_proxy=http_proxy,
            https_proxy=https_proxy,
            no_proxy=no_proxy,
        )

    def is_auth_configured(self) -> bool:
        """Check if the authentication configuration is complete.

        Returns:
            bool: True if a token for the configured auth type is present.
        """
        if self.auth_type == "oauth":
            return bool(self.oauth_token)
        elif self.auth_type == "token":
            return bool(self.api_token)
        logger.warning(
            f"Unknown or unsupported auth_type: {self.auth_type} in ClickUpConfig"
        )
        return False
