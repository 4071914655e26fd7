"""Module for ClickUp folder operations."""

import logging
from typing import Any

from .client import ClickUpClient

logger = logging.getLogger("mcp-clickup")


class FoldersMixin(ClickUpClient):
    """Mixin for ClickUp folder operations."""

    def create_folder(self, space_id: str, name: str) -> dict[str, Any]:
        """Create a folder in a space."""
        result = self.post(f"/space/{space_id}/folder", json={"name": name})
        logger.info(f"Created folder {result.get('id')} in space {space_id}")
        return result

    def update_folder(self, folder_id: str, name: str) -> dict[str, Any]:
        """Rename a folder."""
        return self.put(f"/folder/{folder_id}", json={"name": name})

    def delete_folder(self, folder_id: str) -> dict[str, Any]:
        """
        Delete a folder together with its lists.

        Args:
            folder_id: The folder ID

        Returns:
            The (usually empty) ClickUp response
        """
        result = self.delete(f"/folder/{folder_id}")
        logger.info(f"Deleted folder {folder_id}")
        return result
