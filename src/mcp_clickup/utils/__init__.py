"""
Utility functions for the MCP ClickUp integration.
This package provides various utility functions used throughout the codebase.
"""

from .date import parse_date
from .io import is_read_only_mode
from .logging import setup_logging
from .ssl import SSLIgnoreAdapter, configure_ssl_verification

__all__ = [
    "SSLIgnoreAdapter",
    "configure_ssl_verification",
    "is_read_only_mode",
    "setup_logging",
    "parse_date",
]
