from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcp_clickup.clickup.config import ClickUpConfig


@dataclass(frozen=True)
class MainAppContext:
    """
    Context holding the fully configured ClickUp configuration loaded from
    environment variables at server startup.
    The configuration includes the global/default authentication details.
    """

    full_clickup_config: ClickUpConfig | None = None
    read_only: bool = False
    enabled_tools: list[str] | None = None
