"""Module for ClickUp task operations."""

import logging
from typing import Any

from ..models.clickup import build_task_summary, resolve_task_custom_fields
from .client import ClickUpClient

logger = logging.getLogger("mcp-clickup")

# Task fields ClickUp accepts on create and update besides the description
TASK_FIELDS = (
    "name",
    "assignees",
    "tags",
    "status",
    "priority",
    "due_date",
    "due_date_time",
    "time_estimate",
    "start_date",
    "start_date_time",
    "notify_all",
    "parent",
)


class TasksMixin(ClickUpClient):
    """Mixin for ClickUp task operations."""

    def get_tasks(
        self,
        list_id: str,
        include_closed: bool | None = None,
        subtasks: bool | None = None,
        page: int | None = None,
        order_by: str | None = None,
        reverse: bool | None = None,
    ) -> dict[str, Any]:
        """
        Get the tasks of a list.

        Args:
            list_id: The list ID
            include_closed: Whether to include closed tasks
            subtasks: Whether to include subtasks
            page: Page number, starting at 0
            order_by: Field to order by (id, created, updated, due_date)
            reverse: Whether to reverse the order

        Returns:
            The ClickUp response with a `tasks` list
        """
        params = {
            "include_closed": include_closed,
            "subtasks": subtasks,
            "page": page,
            "order_by": order_by,
            "reverse": reverse,
        }
        return self.get(f"/list/{list_id}/task", params=params)

    def get_task(
        self, task_id: str, include_subtasks: bool | None = None
    ) -> dict[str, Any]:
        """
        Get a task with its custom fields resolved to readable values.

        Args:
            task_id: The task ID
            include_subtasks: Whether to include subtasks

        Returns:
            The task, each custom field carrying a `resolved_value`
        """
        task = self.get(f"/task/{task_id}", params={"include_subtasks": include_subtasks})
        return resolve_task_custom_fields(
            task, default_currency=self.config.default_currency
        )

    def get_task_summary(
        self, task_id: str, include_subtasks: bool | None = None
    ) -> dict[str, Any]:
        """
        Get a compact summary of a task.

        Args:
            task_id: The task ID
            include_subtasks: Whether to include subtasks

        Returns:
            The task summary dictionary
        """
        return build_task_summary(self.get_task(task_id, include_subtasks=include_subtasks))

    def _task_payload(
        self,
        description: str | None,
        markdown_content: str | None,
        fields: dict[str, Any],
    ) -> dict[str, Any]:
        payload = {
            key: value
            for key, value in fields.items()
            if key in TASK_FIELDS and value is not None
        }
        if markdown_content and description:
            logger.warning(
                "Both description and markdown_content provided. Using markdown_content."
            )
            description = None
        if markdown_content:
            payload["markdown_content"] = markdown_content
        elif description is not None:
            payload["description"] = description
        return payload

    def create_task(
        self,
        list_id: str,
        name: str,
        description: str | None = None,
        markdown_content: str | None = None,
        **fields: Any,
    ) -> dict[str, Any]:
        """
        Create a task in a list.

        Args:
            list_id: The list ID
            name: The task name
            description: Plain description
            markdown_content: Markdown description; wins over `description`
            **fields: Other task fields (assignees, tags, status, priority,
                due_date, due_date_time, time_estimate, start_date,
                start_date_time, notify_all, parent)

        Returns:
            The created task
        """
        payload = self._task_payload(description, markdown_content, {**fields, "name": name})
        result = self.post(f"/list/{list_id}/task", json=payload)
        logger.info(f"Created task {result.get('id')} in list {list_id}")
        return result

    def update_task(
        self,
        task_id: str,
        description: str | None = None,
        markdown_content: str | None = None,
        **fields: Any,
    ) -> dict[str, Any]:
        """
        Update a task.

        Args:
            task_id: The task ID
            description: New plain description
            markdown_content: New Markdown description; wins over `description`
            **fields: Task fields to change

        Returns:
            The updated task
        """
        payload = self._task_payload(description, markdown_content, fields)
        if not payload:
            raise ValueError("At least one task field must be provided to update a task")
        return self.put(f"/task/{task_id}", json=payload)
