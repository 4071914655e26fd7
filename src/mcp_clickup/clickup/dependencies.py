"""Module for ClickUp task dependency operations."""

import logging
from typing import Any

from ..models.clickup import (
    DependencyType,
    TaskDependency,
    make_dependency_id,
    parse_dependency_id,
)
from .client import ClickUpClient

logger = logging.getLogger("mcp-clickup")


class DependenciesMixin(ClickUpClient):
    """Mixin for ClickUp task dependency operations."""

    def create_dependency(
        self, task_id: str, depends_on: str, type: DependencyType = "waiting_on"
    ) -> dict[str, Any]:
        """
        Create a dependency between two tasks.

        Args:
            task_id: The task the dependency is created on
            depends_on: The other task
            type: 'waiting_on' when `task_id` waits on `depends_on`,
                'blocking' when `task_id` blocks `depends_on`

        Returns:
            The created dependency

        Raises:
            ValueError: If the type is invalid or both tasks are the same
        """
        if task_id == depends_on:
            raise ValueError("A task cannot depend on itself")
        if type == "waiting_on":
            payload = {"depends_on": depends_on}
            waiting, blocking = task_id, depends_on
        elif type == "blocking":
            payload = {"dependency_of": depends_on}
            waiting, blocking = depends_on, task_id
        else:
            raise ValueError(
                f"Invalid dependency type '{type}'. Must be one of: waiting_on, blocking"
            )

        self.post(f"/task/{task_id}/dependency", json=payload)
        logger.info(f"Created dependency: task {waiting} waits on {blocking}")
        return TaskDependency(
            waiting_task_id=waiting, blocking_task_id=blocking, type=type
        ).to_simplified_dict()

    def get_task_dependencies(
        self, task_id: str, type: DependencyType | None = None
    ) -> dict[str, Any]:
        """
        Get the dependencies of a task.

        Args:
            task_id: The task ID
            type: Only return dependencies of this type, seen from the task

        Returns:
            The task ID, its dependencies and their count
        """
        task = self.get(f"/task/{task_id}")
        records = task.get("dependencies")
        if not isinstance(records, list):
            records = []

        dependencies = []
        for record in records:
            dependency = TaskDependency.from_api_response(record, task_id=task_id)
            if not dependency.waiting_task_id or not dependency.blocking_task_id:
                continue
            if type and dependency.type != type:
                continue
            dependencies.append(dependency.to_simplified_dict())

        return {
            "task_id": task_id,
            "dependencies": dependencies,
            "total": len(dependencies),
        }

    def delete_dependency(self, dependency_id: str) -> dict[str, Any]:
        """
        Delete a dependency.

        Args:
            dependency_id: Identifier ``<waiting task id>:<blocking task id>``

        Returns:
            The deleted dependency ID

        Raises:
            ValueError: If the identifier is malformed
        """
        waiting, blocking = parse_dependency_id(dependency_id)
        self.delete(f"/task/{waiting}/dependency", params={"depends_on": blocking})
        logger.info(f"Deleted dependency {dependency_id}")
        return {"id": make_dependency_id(waiting, blocking), "deleted": True}

    def update_dependency(
        self, dependency_id: str, type: DependencyType | None = None
    ) -> dict[str, Any]:
        """
        Change the orientation of a dependency.

        `type` is read from the first task of the identifier: 'waiting_on'
        keeps it waiting on the second task, 'blocking' makes it block the
        second task instead. ClickUp has no update endpoint, so a changed
        dependency is deleted and recreated.

        Args:
            dependency_id: Identifier ``<waiting task id>:<blocking task id>``
            type: New type seen from the first task

        Returns:
            The resulting dependency, with its possibly new ID

        Raises:
            ValueError: If the identifier is malformed
        """
        waiting, blocking = parse_dependency_id(dependency_id)
        if type is None or type == "waiting_on":
            logger.debug(f"Dependency {dependency_id} already has the requested type")
            return {
                **TaskDependency(
                    waiting_task_id=waiting, blocking_task_id=blocking
                ).to_simplified_dict(),
                "updated": False,
            }

        self.delete_dependency(dependency_id)
        result = self.create_dependency(waiting, blocking, type=type)
        return {**result, "previous_id": dependency_id, "updated": True}
