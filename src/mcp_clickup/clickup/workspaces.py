"""Module for ClickUp workspace operations."""

import logging
from typing import Any

from .client import ClickUpClient

logger = logging.getLogger("mcp-clickup")


class WorkspacesMixin(ClickUpClient):
    """Mixin for ClickUp workspace (team) operations."""

    def get_workspaces(self) -> list[dict[str, Any]]:
        """
        Get the workspaces the authenticated user can access.

        ClickUp still calls workspaces "teams" in API v2.

        Returns:
            List of workspaces with their members and colors
        """
        result = self.get("/team")
        teams = result.get("teams", [])
        if not isinstance(teams, list):
            msg = f"Unexpected 'teams' value in ClickUp response: {type(teams)}"
            logger.error(msg)
            raise TypeError(msg)
        logger.debug(f"Found {len(teams)} ClickUp workspaces")
        return teams

    def get_workspace_seats(self, workspace_id: str) -> dict[str, Any]:
        """
        Get seat usage of a workspace.

        Args:
            workspace_id: The workspace (team) ID

        Returns:
            Filled and available member and guest seats
        """
        return self.get(f"/team/{workspace_id}/seats")
