"""Exceptions raised by the ClickUp client layer."""


class MCPClickUpError(Exception):
    """Base error for MCP ClickUp."""


class MCPClickUpAuthenticationError(MCPClickUpError):
    """Raised when ClickUp rejects the configured credentials."""


class MCPClickUpApiError(MCPClickUpError):
    """Raised when ClickUp answers a request with an error status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_code = error_code
