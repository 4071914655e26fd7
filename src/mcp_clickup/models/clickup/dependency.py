"""
ClickUp task dependency models.

ClickUp stores a dependency as a pair: `task_id` waits on `depends_on`.
Seen from one of the two tasks the relationship is either `waiting_on`
(the task is blocked) or `blocking` (the task blocks the other one).
"""

import logging
from typing import Any, Literal

from ..base import ApiModel, TimestampMixin
from ..constants import EMPTY_STRING

logger = logging.getLogger(__name__)

DependencyType = Literal["waiting_on", "blocking"]

DEPENDENCY_ID_SEPARATOR = ":"


def make_dependency_id(waiting_task_id: str, blocking_task_id: str) -> str:
    """Build the identifier of a dependency from its two task ids."""
    return f"{waiting_task_id}{DEPENDENCY_ID_SEPARATOR}{blocking_task_id}"


def parse_dependency_id(dependency_id: str) -> tuple[str, str]:
    """
    Split a dependency identifier into its waiting and blocking task ids.

    Args:
        dependency_id: Identifier of the form ``<waiting task>:<blocking task>``

    Returns:
        A (waiting_task_id, blocking_task_id) tuple

    Raises:
        ValueError: If the identifier is malformed
    """
    waiting, sep, blocking = (dependency_id or "").strip().partition(
        DEPENDENCY_ID_SEPARATOR
    )
    if not sep or not waiting or not blocking or DEPENDENCY_ID_SEPARATOR in blocking:
        raise ValueError(
            f"Invalid dependency id '{dependency_id}'. "
            "Expected '<waiting task id>:<blocking task id>'."
        )
    return waiting, blocking


class TaskDependency(ApiModel, TimestampMixin):
    """
    Model representing a dependency seen from one of its tasks.
    """

    waiting_task_id: str = EMPTY_STRING
    blocking_task_id: str = EMPTY_STRING
    type: DependencyType = "waiting_on"
    date_created: str = EMPTY_STRING
    user_id: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "TaskDependency":
        """
        Create a TaskDependency from an entry of a task's `dependencies`.

        Args:
            data: The dependency record from the ClickUp API
            **kwargs: `task_id`, the task the dependency is viewed from

        Returns:
            A TaskDependency instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        waiting = str(data.get("task_id") or EMPTY_STRING)
        blocking = str(data.get("depends_on") or EMPTY_STRING)
        viewed_from = kwargs.get("task_id")
        dependency_type: DependencyType = (
            "blocking" if viewed_from and viewed_from == blocking else "waiting_on"
        )

        user_id = data.get("userid")
        return cls(
            waiting_task_id=waiting,
            blocking_task_id=blocking,
            type=dependency_type,
            date_created=cls.format_timestamp(data.get("date_created")),
            user_id=str(user_id) if user_id is not None else None,
        )

    @property
    def id(self) -> str:
        return make_dependency_id(self.waiting_task_id, self.blocking_task_id)

    @property
    def other_task_id(self) -> str:
        """The task on the other end of the dependency."""
        if self.type == "blocking":
            return self.waiting_task_id
        return self.blocking_task_id

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result = {
            "id": self.id,
            "type": self.type,
            "task_id": self.waiting_task_id,
            "depends_on": self.blocking_task_id,
            "other_task_id": self.other_task_id,
        }
        if self.date_created:
            result["date_created"] = self.date_created
        if self.user_id:
            result["user_id"] = self.user_id
        return result
