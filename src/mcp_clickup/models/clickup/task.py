"""
ClickUp task models.

This module provides the compact task summary used when a caller asks for a
task without the full ClickUp payload.
"""

import logging
import math
from typing import Any

from pydantic import Field

from ..base import ApiModel
from ..constants import (
    DESCRIPTION_PREVIEW_LIMIT,
    MILLISECONDS_PER_HOUR,
    TRUNCATION_MARKER,
)

logger = logging.getLogger(__name__)


def format_time_spent(time_spent: Any) -> str | None:
    """
    Format tracked time in milliseconds as hours.

    Rounds half up to one decimal and drops the decimal for whole hours,
    e.g. 5400000 -> "1.5h", 7200000 -> "2h".

    Args:
        time_spent: Milliseconds as a number or digit string

    Returns:
        The formatted duration, or None when no time is tracked
    """
    if time_spent is None or isinstance(time_spent, bool):
        return None
    try:
        millis = float(time_spent)
    except (TypeError, ValueError):
        logger.debug(f"Ignoring non-numeric time_spent: {time_spent!r}")
        return None
    if not millis or math.isnan(millis):
        return None

    tenths = math.floor(millis / MILLISECONDS_PER_HOUR * 10 + 0.5)
    hours = tenths / 10
    if hours.is_integer():
        return f"{int(hours)}h"
    return f"{hours}h"


def _text(value: Any) -> str | None:
    return str(value) if value is not None else None


def _status_label(data: dict[str, Any]) -> str | None:
    status = data.get("status")
    if isinstance(status, dict):
        return _text(status.get("status"))
    return None


def _assignee_names(data: dict[str, Any], initials_only: bool = False) -> list[Any]:
    assignees = data.get("assignees")
    if not isinstance(assignees, list):
        return []
    names = []
    for assignee in assignees:
        if not isinstance(assignee, dict):
            continue
        if initials_only:
            names.append(assignee.get("initials"))
        else:
            names.append(assignee.get("username") or assignee.get("initials"))
    return names


class SubtaskSummary(ApiModel):
    """
    Model representing a subtask inside a task summary.
    """

    id: str | None = None
    name: str | None = None
    status: str | None = None
    assignees: list[Any] = Field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "SubtaskSummary":
        if not isinstance(data, dict):
            return cls()
        return cls(
            id=_text(data.get("id")),
            name=_text(data.get("name")),
            status=_status_label(data),
            assignees=_assignee_names(data, initials_only=True),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status,
            "assignees": list(self.assignees),
        }


class TaskSummary(ApiModel):
    """
    Model representing a compact view of a ClickUp task.

    Expects a task whose custom fields already carry a `resolved_value`.
    """

    id: str | None = None
    name: str | None = None
    status: str | None = None
    date_created: Any = None
    date_updated: Any = None
    start_date: Any = None
    due_date: Any = None
    time_spent: str | None = None
    assignees: list[Any] = Field(default_factory=list)
    description: str | None = None
    custom_fields: list[dict[str, Any]] | None = None
    subtasks: list[SubtaskSummary] | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "TaskSummary":
        """
        Create a TaskSummary from a ClickUp task.

        Args:
            data: The task data, custom fields resolved

        Returns:
            A TaskSummary instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        description = data.get("description")
        if description:
            description = str(description)
            if len(description) > DESCRIPTION_PREVIEW_LIMIT:
                description = description[:DESCRIPTION_PREVIEW_LIMIT] + TRUNCATION_MARKER
        else:
            description = None

        custom_fields = None
        raw_fields = data.get("custom_fields")
        if isinstance(raw_fields, list):
            custom_fields = [
                {"name": field.get("name"), "value": field["resolved_value"]}
                for field in raw_fields
                if isinstance(field, dict) and field.get("resolved_value") is not None
            ]

        subtasks = None
        raw_subtasks = data.get("subtasks")
        if isinstance(raw_subtasks, list):
            subtasks = [SubtaskSummary.from_api_response(s) for s in raw_subtasks]

        return cls(
            id=_text(data.get("id")),
            name=_text(data.get("name")),
            status=_status_label(data),
            date_created=data.get("date_created"),
            date_updated=data.get("date_updated"),
            start_date=data.get("start_date"),
            due_date=data.get("due_date"),
            time_spent=format_time_spent(data.get("time_spent")),
            assignees=_assignee_names(data),
            description=description,
            custom_fields=custom_fields,
            subtasks=subtasks,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to the compact task dictionary returned to tool callers."""
        result: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "status": self.status,
            "date_created": self.date_created,
            "date_updated": self.date_updated,
            "start_date": self.start_date,
            "due_date": self.due_date,
            "time_spent": self.time_spent,
            "assignees": list(self.assignees),
        }
        if self.description is not None:
            result["description"] = self.description
        if self.custom_fields is not None:
            result["custom_fields"] = self.custom_fields
        if self.subtasks is not None:
            result["subtasks"] = [s.to_simplified_dict() for s in self.subtasks]
        return result


def build_task_summary(task: dict[str, Any]) -> dict[str, Any]:
    """Build the compact summary dictionary of a task with resolved custom fields."""
    return TaskSummary.from_api_response(task).to_simplified_dict()
