"""
Pydantic models for ClickUp API responses.

This package provides type-safe models for working with ClickUp API data,
including conversion methods from API responses to structured models and
simplified dictionaries for API responses.
"""

from .base import ApiModel, TimestampMixin
from .clickup import (
    ClickUpCustomField,
    ClickUpView,
    CommentBlock,
    TaskDependency,
    TaskSummary,
    build_task_summary,
    resolve_field_value,
    resolve_task_custom_fields,
)
from .constants import (  # noqa: F401 - Keep constants available
    DEFAULT_CURRENCY,
    EMPTY_STRING,
    UNKNOWN,
)

__all__ = [
    "ApiModel",
    "TimestampMixin",
    "ClickUpCustomField",
    "ClickUpView",
    "CommentBlock",
    "TaskDependency",
    "TaskSummary",
    "build_task_summary",
    "resolve_field_value",
    "resolve_task_custom_fields",
]
