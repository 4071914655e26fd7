"""Module for ClickUp list operations."""

import logging
from typing import Any

from .client import ClickUpClient
from .constants import LIST_CONTAINER_TYPES

logger = logging.getLogger("mcp-clickup")


def _check_container_type(container_type: str) -> None:
    if container_type not in LIST_CONTAINER_TYPES:
        raise ValueError(
            f"Invalid container_type '{container_type}'. "
            f"Must be one of: {', '.join(LIST_CONTAINER_TYPES)}"
        )


class ListsMixin(ClickUpClient):
    """Mixin for ClickUp list operations."""

    def get_lists(
        self, container_type: str, container_id: str, archived: bool | None = None
    ) -> dict[str, Any]:
        """
        Get the lists of a folder, or the folderless lists of a space.

        Args:
            container_type: 'folder' or 'space'
            container_id: The folder or space ID
            archived: Whether to return archived lists

        Returns:
            The ClickUp response with a `lists` list

        Raises:
            ValueError: If the container type is invalid
        """
        _check_container_type(container_type)
        return self.get(
            f"/{container_type}/{container_id}/list", params={"archived": archived}
        )

    def get_folderless_lists(self, space_id: str) -> dict[str, Any]:
        """Get the lists of a space that are not in any folder."""
        return self.get_lists("space", space_id)

    def create_list(
        self, container_type: str, container_id: str, name: str, **fields: Any
    ) -> dict[str, Any]:
        """
        Create a list in a folder, or a folderless list in a space.

        Args:
            container_type: 'folder' or 'space'
            container_id: The folder or space ID
            name: The list name
            **fields: Optional list fields (content, due_date, priority, ...)

        Returns:
            The created list

        Raises:
            ValueError: If the container type is invalid
        """
        _check_container_type(container_type)
        payload = {key: value for key, value in fields.items() if value is not None}
        payload["name"] = name
        result = self.post(f"/{container_type}/{container_id}/list", json=payload)
        logger.info(f"Created list {result.get('id')} in {container_type} {container_id}")
        return result

    def create_folderless_list(self, space_id: str, name: str, **fields: Any) -> dict[str, Any]:
        """Create a list directly in a space."""
        return self.create_list("space", space_id, name, **fields)

    def get_list(self, list_id: str) -> dict[str, Any]:
        return self.get(f"/list/{list_id}")

    def update_list(self, list_id: str, name: str, **fields: Any) -> dict[str, Any]:
        """Update a list's name and optional fields."""
        payload = {key: value for key, value in fields.items() if value is not None}
        payload["name"] = name
        return self.put(f"/list/{list_id}", json=payload)

    def delete_list(self, list_id: str) -> dict[str, Any]:
        """Delete a list together with its tasks."""
        result = self.delete(f"/list/{list_id}")
        logger.info(f"Deleted list {list_id}")
        return result

    def add_task_to_list(self, list_id: str, task_id: str) -> dict[str, Any]:
        """
        Add an existing task to an additional list.

        Requires the "Tasks in Multiple Lists" ClickApp.
        """
        return self.post(f"/list/{list_id}/task/{task_id}")

    def remove_task_from_list(self, list_id: str, task_id: str) -> dict[str, Any]:
        """Remove a task from one of its additional lists without deleting it."""
        return self.delete(f"/list/{list_id}/task/{task_id}")

    def create_list_from_template(
        self, container_type: str, container_id: str, template_id: str, name: str
    ) -> dict[str, Any]:
        """
        Create a list from a list template.

        Args:
            container_type: 'folder' or 'space'
            container_id: The folder or space ID
            template_id: The template ID
            name: The new list name

        Returns:
            The ClickUp response describing the created list

        Raises:
            ValueError: If the container type is invalid
        """
        _check_container_type(container_type)
        return self.post(
            f"/{container_type}/{container_id}/list_template/{template_id}",
            json={"name": name},
        )
