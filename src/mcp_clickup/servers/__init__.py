"""Server implementations for MCP ClickUp."""

from .clickup import clickup_mcp
from .main import main_mcp

__all__ = ["clickup_mcp", "main_mcp"]
